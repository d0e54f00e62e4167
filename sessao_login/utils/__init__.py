"""Utilitarios do cliente de sessao."""

from .helpers import (
    Logger,
    save_json,
    load_json,
    mascarar_token,
)

__all__ = [
    "Logger",
    "save_json",
    "load_json",
    "mascarar_token",
]
