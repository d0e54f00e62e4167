"""
Persistencia local do estado do cliente.
"""

from pathlib import Path
from typing import Any, Optional

from ..config import DEFAULT_SESSION_DIR, STORAGE_FILE, TOKEN_KEY
from ..utils import Logger, save_json, load_json


class TokenStore:
    """
    Armazena o estado do cliente (token de acesso) em disco.
    Sobrevive entre execucoes do processo, como o localStorage do navegador.
    """
    
    def __init__(self, session_dir: str = DEFAULT_SESSION_DIR, debug: bool = False):
        self.session_dir = Path(session_dir)
        self.session_dir.mkdir(parents=True, exist_ok=True)
        self.storage_file = self.session_dir / STORAGE_FILE
        self.logger = Logger(debug, "storage")
    
    def _ler(self) -> dict:
        if not self.storage_file.exists():
            return {}
        
        try:
            dados = load_json(self.storage_file)
        except (OSError, ValueError) as e:
            self.logger.debug(f"Armazenamento ilegivel, tratado como vazio: {e}")
            return {}
        
        return dados if isinstance(dados, dict) else {}
    
    def get(self, key: str) -> Any:
        """Retorna o valor salvo para a chave, ou None."""
        return self._ler().get(key)
    
    def set(self, key: str, value: Any):
        """Salva um valor, preservando as demais chaves."""
        dados = self._ler()
        dados[key] = value
        save_json(dados, self.storage_file)
    
    def get_token(self) -> Optional[str]:
        """Retorna o token salvo; string vazia conta como ausente."""
        return self.get(TOKEN_KEY) or None
    
    def set_token(self, token: str):
        self.set(TOKEN_KEY, token)
    
    def clear_all(self):
        """Remove todo o estado salvo, nao apenas o token."""
        if self.storage_file.exists():
            self.storage_file.unlink()
