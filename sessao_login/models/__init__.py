"""Modelos de dados da sessao."""

from .entities import (
    Usuario,
    SessionState,
    Ok,
    Err,
    Resultado,
)

__all__ = [
    "Usuario",
    "SessionState",
    "Ok",
    "Err",
    "Resultado",
]
