"""
Modelos de dados da sessao.
Utiliza dataclasses para representar o usuario e o resultado das operacoes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


@dataclass
class Usuario:
    """
    Identidade retornada pelo servico de credenciais.

    O registro e opaco: alem do identificador e do username, o payload
    original fica disponivel em `dados`.
    """
    id: Any
    username: str = ""
    dados: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Usuario":
        return cls(
            id=data.get("id", data.get("_id", data.get("userId"))),
            username=data.get("username", ""),
            dados=dict(data),
        )


class SessionState(Enum):
    """Estados possiveis da sessao do cliente."""
    ANONYMOUS = "anonymous"
    RESTORING = "restoring"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class Ok:
    """Operacao concluida. `destino` e a rota para onde navegar, se houver."""
    destino: Optional[str] = None
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Err:
    """Operacao falhou; `mensagem` pode ser exibida diretamente ao usuario."""
    mensagem: str
    ok: bool = field(default=False, init=False)

    def __str__(self) -> str:
        return self.mensagem


Resultado = Union[Ok, Err]
