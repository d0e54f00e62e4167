from __future__ import annotations

import pytest

from sessao_login.core import SessionManager
from tests.helpers.fakes import FakeCredentialService, MemoryTokenStore


@pytest.fixture
def backend():
    """
    Backend with a single account: alice / correct -> token "tok-alice".
    """
    fake = FakeCredentialService()
    fake.add_user("alice", "correct", "tok-alice", email="alice@example.com")
    return fake


@pytest.fixture
def store():
    return MemoryTokenStore()


@pytest.fixture
def manager(backend, store):
    return SessionManager(backend, store)
