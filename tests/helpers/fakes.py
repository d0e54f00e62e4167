from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from sessao_login.config import TOKEN_KEY
from sessao_login.exceptions import CredentialError
from sessao_login.models import Usuario


def unauthorized() -> CredentialError:
    return CredentialError("401: Unauthorized", status=401, reason="Unauthorized")


class MemoryTokenStore:
    """Same interface as TokenStore, kept in a dict."""

    def __init__(self, token: Optional[str] = None):
        self.dados: Dict[str, Any] = {}
        if token is not None:
            self.dados[TOKEN_KEY] = token

    def get(self, key: str) -> Any:
        return self.dados.get(key)

    def set(self, key: str, value: Any) -> None:
        self.dados[key] = value

    def get_token(self) -> Optional[str]:
        return self.dados.get(TOKEN_KEY) or None

    def set_token(self, token: str) -> None:
        self.dados[TOKEN_KEY] = token

    def clear_all(self) -> None:
        self.dados.clear()


class FakeCredentialService:
    """
    In-memory credential backend. Records every call in `calls`.
    """

    def __init__(self):
        self.accounts: Dict[str, Tuple[str, str]] = {}
        self.users_by_token: Dict[str, Usuario] = {}
        self.registered: List[Any] = []
        self.calls: List[Tuple[str, Any]] = []
        self.whoami_error: Optional[CredentialError] = None
        self.register_error: Optional[CredentialError] = None
        self.closed = False

    def add_user(self, username: str, password: str, token: str, **extra) -> Usuario:
        usuario = Usuario.from_dict({"id": len(self.accounts) + 1, "username": username, **extra})
        self.accounts[username] = (password, token)
        self.users_by_token[token] = usuario
        return usuario

    def authenticate(self, username: str, password: str) -> str:
        self.calls.append(("authenticate", username))
        conta = self.accounts.get(username)
        if conta is None or conta[0] != password:
            raise unauthorized()
        return conta[1]

    def whoami(self, token: str) -> Usuario:
        self.calls.append(("whoami", token))
        if self.whoami_error is not None:
            raise self.whoami_error
        if token not in self.users_by_token:
            raise unauthorized()
        return self.users_by_token[token]

    def create_account(self, user_data: Any) -> None:
        self.calls.append(("create_account", user_data))
        if self.register_error is not None:
            raise self.register_error
        self.registered.append(user_data)

    def close(self) -> None:
        self.closed = True
