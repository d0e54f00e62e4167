#!/usr/bin/env python3
"""
Linha de comando do cliente de sessao.
Execute de FORA do pacote: python -m sessao_login.main <comando>
"""

import argparse
import os
import sys

from dotenv import load_dotenv

from .client import SessaoLogin
from .config import DEFAULT_SESSION_DIR


def _parse_campos(campos):
    dados = {}
    for campo in campos or []:
        chave, sep, valor = campo.partition("=")
        if not sep or not chave:
            raise SystemExit(f"Campo invalido (use chave=valor): {campo}")
        dados[chave] = valor
    return dados


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cliente de sessao do backend de login")
    parser.add_argument("--backend", default=None, help="URL do backend (padrao: BACKEND_URL)")
    parser.add_argument("--session-dir", default=DEFAULT_SESSION_DIR, help="Diretorio do estado local")
    parser.add_argument("--debug", action="store_true", help="Habilita logs de debug")
    
    sub = parser.add_subparsers(dest="comando", required=True)
    
    sub.add_parser("whoami", help="Mostra o usuario da sessao salva")
    
    login = sub.add_parser("login", help="Autentica com usuario e senha")
    login.add_argument("--username", default=None)
    login.add_argument("--password", default=None)
    
    sub.add_parser("logout", help="Encerra a sessao e limpa o estado local")
    
    register = sub.add_parser("register", help="Cadastra um novo usuario")
    register.add_argument("--username", required=True)
    register.add_argument("--password", required=True)
    register.add_argument("--field", action="append", default=[], help="Campo extra chave=valor")
    
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    
    app = SessaoLogin(
        backend_url=args.backend,
        session_dir=args.session_dir,
        navegar=lambda destino: print(f"-> {destino}"),
        debug=args.debug
    )
    
    try:
        if args.comando == "whoami":
            if app.user is None:
                print("Nenhum usuario autenticado")
                return 1
            print(f"{app.user.username} ({app.user.id})")
            return 0
        
        if args.comando == "login":
            username = args.username or os.getenv("LOGIN_USERNAME")
            password = args.password or os.getenv("LOGIN_PASSWORD")
            if not username or not password:
                print("Credenciais nao fornecidas")
                return 1
            resultado = app.login(username, password)
        elif args.comando == "logout":
            resultado = app.logout()
        else:
            dados = _parse_campos(args.field)
            dados.update(username=args.username, password=args.password)
            resultado = app.register(dados)
        
        if not resultado.ok:
            print(resultado.mensagem)
            return 1
        return 0
    
    finally:
        app.close()


if __name__ == "__main__":
    sys.exit(main())
