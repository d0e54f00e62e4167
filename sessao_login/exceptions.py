"""
Excecoes do cliente de sessao.
"""

from typing import Optional


class SessaoLoginError(Exception):
    """Erro base do pacote."""


class CredentialError(SessaoLoginError):
    """
    Falha em uma chamada ao servico de credenciais.

    `status` e `reason` so sao preenchidos quando houve resposta HTTP;
    erros de rede e respostas malformadas chegam com status None.
    """

    def __init__(self, mensagem: str, status: Optional[int] = None, reason: str = ""):
        super().__init__(mensagem)
        self.status = status
        self.reason = reason
