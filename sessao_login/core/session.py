"""
Estado da sessao do usuario atual (restaurar, login, logout e cadastro).
"""

from typing import Any, Optional

from ..config import (
    MSG_CREDENCIAIS_INVALIDAS,
    MSG_USUARIO_EXISTENTE,
    ROTA_INICIO,
    ROTA_PERFIL,
    ROTA_SUCESSO,
)
from ..exceptions import CredentialError
from ..models import Err, Ok, Resultado, SessionState, Usuario
from ..utils import Logger, mascarar_token
from .credentials import CredentialService
from .storage import TokenStore


class SessionManager:
    """
    Mantem quem esta autenticado no processo atual.

    O usuario so e definido depois que um token foi trocado com sucesso
    por uma identidade. O token em si fica no TokenStore e pode existir
    sem usuario: durante `restore()` e apos um login parcialmente falho.

    Nenhuma operacao levanta excecao por falha do backend; o retorno e
    sempre um `Ok` (com a rota de destino, quando houver) ou um `Err`.
    """
    
    def __init__(self, credenciais: CredentialService, store: TokenStore, debug: bool = False):
        self.credenciais = credenciais
        self.store = store
        self.logger = Logger(debug, "sessao")
        
        self._user: Optional[Usuario] = None
        self._state = SessionState.ANONYMOUS
        self._restaurada = False
    
    @property
    def user(self) -> Optional[Usuario]:
        return self._user
    
    @property
    def state(self) -> SessionState:
        return self._state
    
    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED
    
    @property
    def token(self) -> Optional[str]:
        return self.store.get_token()
    
    def _autenticar(self, usuario: Usuario):
        self._user = usuario
        self._state = SessionState.AUTHENTICATED
    
    def _anonimizar(self):
        self._user = None
        self._state = SessionState.ANONYMOUS
    
    def restore(self) -> Resultado:
        """
        Reconstroi a sessao a partir do token salvo.
        
        Deve ser chamado uma unica vez, no inicio do processo. Um token
        invalido apaga todo o estado local sem gerar erro visivel.
        """
        if self._restaurada:
            self.logger.warn("Sessao ja restaurada, ignorando nova chamada")
            return Ok()
        self._restaurada = True
        
        token = self.store.get_token()
        if not token:
            self.logger.debug("Nenhum token salvo")
            return Ok()
        
        self._state = SessionState.RESTORING
        self.logger.debug(f"Restaurando sessao com token {mascarar_token(token)}")
        
        try:
            usuario = self.credenciais.whoami(token)
        except CredentialError as e:
            self.logger.info(f"Token salvo rejeitado, limpando estado local: {e}")
            self.store.clear_all()
            self._anonimizar()
            return Ok()
        
        self._autenticar(usuario)
        self.logger.info(f"Sessao restaurada. Usuario: {usuario.username}")
        return Ok()
    
    def login(self, username: str, password: str) -> Resultado:
        """
        Autentica com usuario e senha.
        
        Args:
            username: Nome de usuario
            password: Senha
        
        Returns:
            Ok com destino ROTA_PERFIL, ou Err com a mensagem de falha
        """
        if not username or not password:
            raise ValueError("username e password sao obrigatorios")
        
        self.logger.info(f"Iniciando login para {username}...")
        
        try:
            token = self.credenciais.authenticate(username, password)
        except CredentialError as e:
            self.logger.error(f"Falha na autenticacao: {e}")
            return Err(MSG_CREDENCIAIS_INVALIDAS)
        
        self.store.set_token(token)
        
        # A partir daqui o token esta salvo mesmo que o usuario nao seja resolvido
        try:
            usuario = self.credenciais.whoami(token)
        except CredentialError as e:
            self.logger.error(f"Falha ao verificar usuario apos login: {e}")
            return Err(str(e))
        
        self._autenticar(usuario)
        self.logger.info(f"Login bem-sucedido! Usuario: {usuario.username}")
        return Ok(destino=ROTA_PERFIL)
    
    def logout(self) -> Resultado:
        """Encerra a sessao e apaga todo o estado local. Sempre tem sucesso."""
        self._anonimizar()
        self.store.clear_all()
        self.logger.info("Sessao encerrada")
        return Ok(destino=ROTA_INICIO)
    
    def register(self, user_data: Any) -> Resultado:
        """
        Cadastra um novo usuario sem autentica-lo.
        
        `user_data` e enviado ao backend sem validacao local. Qualquer
        falha gera a mesma mensagem de usuario existente.
        """
        try:
            self.credenciais.create_account(user_data)
        except CredentialError as e:
            self.logger.error(f"Falha no cadastro: {e}")
            return Err(MSG_USUARIO_EXISTENTE)
        
        self.logger.info("Cadastro realizado")
        return Ok(destino=ROTA_SUCESSO)
