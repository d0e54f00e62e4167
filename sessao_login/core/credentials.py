"""
Cliente HTTP do servico de credenciais (login, usuario atual e cadastro).
"""

from typing import Any, Optional

import requests

from ..config import (
    BACKEND_URL,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    ENDPOINT_CADASTRO,
    ENDPOINT_LOGIN,
    ENDPOINT_USUARIO_ATUAL,
)
from ..exceptions import CredentialError
from ..models import Usuario
from ..utils import Logger


class CredentialService:
    """
    Encapsula as tres operacoes do backend de autenticacao.
    Toda falha (rede, status nao-2xx ou corpo malformado) vira CredentialError.
    """
    
    def __init__(
        self,
        base_url: str = BACKEND_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        debug: bool = False
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = Logger(debug, "credenciais")
        
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
    
    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        self.logger.debug(f"{method} {url}")
        
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise CredentialError(f"Erro de rede em {method} {path}: {e}") from e
        
        self.logger.debug(f"{method} {path} -> {resp.status_code}")
        
        if not 200 <= resp.status_code < 300:
            reason = resp.reason or ""
            raise CredentialError(
                f"{resp.status_code}: {reason}",
                status=resp.status_code,
                reason=reason
            )
        
        return resp
    
    @staticmethod
    def _campo(resp: requests.Response, campo: str) -> Any:
        """Extrai um campo obrigatorio do corpo JSON."""
        try:
            valor = resp.json()[campo]
        except (ValueError, KeyError, TypeError) as e:
            raise CredentialError(f"Resposta malformada: campo '{campo}' ausente") from e
        
        if not valor:
            raise CredentialError(f"Resposta malformada: campo '{campo}' vazio")
        
        return valor
    
    def authenticate(self, username: str, password: str) -> str:
        """Troca usuario e senha por um token de acesso."""
        resp = self._request(
            "POST",
            ENDPOINT_LOGIN,
            json={"username": username, "password": password}
        )
        token = self._campo(resp, "token")
        
        if not isinstance(token, str):
            raise CredentialError("Resposta malformada: token nao e texto")
        
        return token
    
    def whoami(self, token: str) -> Usuario:
        """Resolve o token para a identidade do usuario."""
        resp = self._request(
            "GET",
            ENDPOINT_USUARIO_ATUAL,
            headers={"Authorization": f"Bearer {token}"}
        )
        dados = self._campo(resp, "user")
        
        if not isinstance(dados, dict):
            raise CredentialError("Resposta malformada: usuario nao e um objeto")
        
        return Usuario.from_dict(dados)
    
    def create_account(self, user_data: Any):
        """Cadastra um novo usuario. O corpo da resposta e ignorado."""
        self._request("POST", ENDPOINT_CADASTRO, json=user_data)
    
    def close(self):
        self.session.close()
