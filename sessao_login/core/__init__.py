"""Componentes centrais da sessao."""

from .storage import TokenStore
from .credentials import CredentialService
from .session import SessionManager

__all__ = [
    "TokenStore",
    "CredentialService",
    "SessionManager",
]
