"""
Sessao Login - Cliente de sessao para backend de login por credenciais.

Exemplo de uso:
    from sessao_login import SessaoLogin
    
    app = SessaoLogin(backend_url="http://localhost:3000")
    resultado = app.login("alice", "senha")
    if resultado.ok:
        print(app.user.username)
    else:
        print(resultado.mensagem)
    
    app.logout()
    app.close()
"""

from .client import SessaoLogin
from .core import CredentialService, SessionManager, TokenStore
from .exceptions import CredentialError, SessaoLoginError
from .models import Err, Ok, SessionState, Usuario

__version__ = "1.0.0"
__all__ = [
    "SessaoLogin",
    "SessionManager",
    "CredentialService",
    "TokenStore",
    "SessionState",
    "Usuario",
    "Ok",
    "Err",
    "CredentialError",
    "SessaoLoginError",
]
