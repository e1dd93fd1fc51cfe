"""
Shared fixtures: in-memory store, controllable clock, wired TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from auth.jwt import TokenSigner
from config.settings import Settings
from database.memory import InMemoryDocumentStore


class FakeClock:
    """Stand-in for ``time.time`` that only moves when told to."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret="test-secret",
        jwt_expiry_seconds=3600,
        bcrypt_rounds=4,
        storage_backend="memory",
        api_prefix="",
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def signer(settings, clock) -> TokenSigner:
    return TokenSigner(settings.jwt_secret, settings.jwt_expiry_seconds, clock=clock)


@pytest.fixture
def client(settings, store, signer):
    from main import create_app

    app = create_app(settings, store=store, signer=signer)
    with TestClient(app) as test_client:
        yield test_client
