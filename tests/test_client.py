from __future__ import annotations

import pytest

from sessao_login import SessaoLogin
from sessao_login.models import Err, Ok, SessionState
from tests.helpers.fakes import MemoryTokenStore, unauthorized


@pytest.fixture
def rotas():
    return []


def make_app(backend, store, rotas, **kw):
    return SessaoLogin(credenciais=backend, store=store, navegar=rotas.append, **kw)


def test_restore_runs_on_start(backend, rotas):
    app = make_app(backend, MemoryTokenStore(token="tok-alice"), rotas)

    assert app.user.username == "alice"
    assert app.state is SessionState.AUTHENTICATED
    assert rotas == []


def test_restore_can_be_deferred(backend, store, rotas):
    app = make_app(backend, store, rotas, restaurar=False)

    assert backend.calls == []
    assert app.state is SessionState.ANONYMOUS


def test_login_success_navigates_to_profile_once(backend, store, rotas):
    app = make_app(backend, store, rotas)

    res = app.login("alice", "correct")

    assert res == Ok(destino="/profile")
    assert rotas == ["/profile"]
    assert store.get_token() == "tok-alice"


def test_login_failure_does_not_navigate(backend, store, rotas):
    app = make_app(backend, store, rotas)

    res = app.login("alice", "nope")

    assert res == Err("Invalid credentials")
    assert rotas == []


def test_logout_navigates_to_root_each_time(backend, store, rotas):
    app = make_app(backend, store, rotas)
    app.login("alice", "correct")

    app.logout()
    app.logout()

    assert rotas == ["/profile", "/", "/"]
    assert app.user is None
    assert store.dados == {}


def test_register_navigates_to_success(backend, store, rotas):
    app = make_app(backend, store, rotas)

    res = app.register({"username": "erin", "password": "pw"})

    assert res.ok
    assert rotas == ["/success"]
    assert app.user is None


def test_register_failure_does_not_navigate(backend, store, rotas):
    backend.register_error = unauthorized()
    app = make_app(backend, store, rotas)

    res = app.register({"username": "alice", "password": "pw"})

    assert res == Err("User Name already exists")
    assert rotas == []


def test_backend_url_from_environment(monkeypatch, backend, store):
    monkeypatch.setenv("BACKEND_URL", "http://api.example:8080")

    app = SessaoLogin(credenciais=backend, store=store)

    assert app.backend_url == "http://api.example:8080"


def test_explicit_backend_url_wins(monkeypatch, backend, store):
    monkeypatch.setenv("BACKEND_URL", "http://api.example:8080")

    app = SessaoLogin(backend_url="http://other", credenciais=backend, store=store)

    assert app.backend_url == "http://other"


def test_default_backend_url(monkeypatch, backend, store):
    monkeypatch.delenv("BACKEND_URL", raising=False)

    app = SessaoLogin(credenciais=backend, store=store)

    assert app.backend_url == "http://localhost:3000"


def test_default_navigator_only_logs(backend, store, capsys):
    app = SessaoLogin(credenciais=backend, store=store)

    app.logout()

    assert "Navegando para /" in capsys.readouterr().out


def test_close_closes_credential_service(backend, store):
    app = SessaoLogin(credenciais=backend, store=store)

    app.close()

    assert backend.closed
