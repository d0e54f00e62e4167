"""
Utilitarios gerais do sistema.
"""

import json
from pathlib import Path
from datetime import datetime
from typing import Any


class Logger:
    """
    Logger simples para o sistema.
    O `nome` identifica o componente que emitiu a mensagem.
    """

    def __init__(self, debug: bool = False, nome: str = ""):
        self.debug_enabled = debug
        self.nome = nome

    def info(self, message: str):
        self._log(message, "INFO")
    
    def debug(self, message: str):
        if self.debug_enabled:
            self._log(message, "DEBUG")
    
    def warn(self, message: str):
        self._log(message, "WARN")
    
    def error(self, message: str):
        self._log(message, "ERROR")
    
    def _log(self, message: str, level: str):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        origem = f" [{self.nome}]" if self.nome else ""
        print(f"[{timestamp}] [{level}]{origem} {message}")


def save_json(data: Any, filepath: Path):
    """Salva dados em arquivo JSON."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def load_json(filepath: Path) -> Any:
    """Carrega dados de um arquivo JSON."""
    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def mascarar_token(token: str, visiveis: int = 4) -> str:
    """Oculta o token para exibicao em logs, mantendo apenas o final."""
    if not token:
        return "<vazio>"
    if len(token) <= visiveis:
        return "*" * len(token)
    return "*" * 8 + token[-visiveis:]
