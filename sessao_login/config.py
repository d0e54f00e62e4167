"""
Configuracoes e constantes do cliente de sessao.
"""

# Backend (sobrescrito pela variavel de ambiente BACKEND_URL)
BACKEND_URL = "http://localhost:3000"

# Endpoints do servico de credenciais
ENDPOINT_LOGIN = "/login"
ENDPOINT_USUARIO_ATUAL = "/user/me"
ENDPOINT_CADASTRO = "/register"

# Rotas de navegacao emitidas apos cada operacao
ROTA_PERFIL = "/profile"
ROTA_INICIO = "/"
ROTA_SUCESSO = "/success"

# Mensagens exibidas ao usuario
MSG_CREDENCIAIS_INVALIDAS = "Invalid credentials"
MSG_USUARIO_EXISTENTE = "User Name already exists"

# Persistencia local
DEFAULT_SESSION_DIR = ".session"
STORAGE_FILE = "storage.json"
TOKEN_KEY = "token"

# Configuracoes padrao
DEFAULT_TIMEOUT = 30

# Headers padrao para requisicoes
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
