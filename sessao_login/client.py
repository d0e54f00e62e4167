"""
Sessao Login - Classe principal (Facade).
Integra armazenamento, servico de credenciais e sessao, e executa a
navegacao resultante de cada operacao.
"""

import os
from typing import Any, Callable, Optional

from .config import BACKEND_URL, DEFAULT_SESSION_DIR, DEFAULT_TIMEOUT
from .core import CredentialService, SessionManager, TokenStore
from .models import Ok, Resultado, SessionState, Usuario
from .utils import Logger


class SessaoLogin:
    """
    Ponto de entrada do cliente de sessao.
    
    Exemplo de uso:
        app = SessaoLogin(navegar=router.ir_para)
        resultado = app.login("alice", "senha")
        if not resultado.ok:
            print(resultado.mensagem)
        
        app.logout()
        app.close()
    """
    
    def __init__(
        self,
        backend_url: str = None,
        session_dir: str = DEFAULT_SESSION_DIR,
        timeout: int = DEFAULT_TIMEOUT,
        navegar: Optional[Callable[[str], Any]] = None,
        restaurar: bool = True,
        credenciais: Optional[CredentialService] = None,
        store: Optional[TokenStore] = None,
        debug: bool = False
    ):
        self.backend_url = backend_url or os.getenv("BACKEND_URL") or BACKEND_URL
        self.logger = Logger(debug, "cliente")
        self.navegar = navegar or self._navegar_padrao
        
        # Servicos
        self.store = store or TokenStore(session_dir, debug)
        self.credenciais = credenciais or CredentialService(self.backend_url, timeout, debug=debug)
        self.sessao = SessionManager(self.credenciais, self.store, debug)
        
        self.logger.debug(f"Backend: {self.backend_url}")
        
        # Restaurar antes de qualquer login/logout/cadastro
        if restaurar:
            self.sessao.restore()
    
    def _navegar_padrao(self, destino: str):
        self.logger.info(f"Navegando para {destino}")
    
    def _despachar(self, resultado: Resultado) -> Resultado:
        if isinstance(resultado, Ok) and resultado.destino:
            self.navegar(resultado.destino)
        return resultado
    
    # === Estado ===
    
    @property
    def user(self) -> Optional[Usuario]:
        return self.sessao.user
    
    @property
    def state(self) -> SessionState:
        return self.sessao.state
    
    # === Operacoes ===
    
    def login(self, username: str, password: str) -> Resultado:
        """Autentica e, em caso de sucesso, navega para o perfil."""
        return self._despachar(self.sessao.login(username, password))
    
    def logout(self) -> Resultado:
        """Encerra a sessao e navega para a pagina inicial."""
        return self._despachar(self.sessao.logout())
    
    def register(self, user_data: Any) -> Resultado:
        """Cadastra um usuario e, em caso de sucesso, navega para a confirmacao."""
        return self._despachar(self.sessao.register(user_data))
    
    def close(self):
        """Fecha conexoes."""
        self.credenciais.close()
