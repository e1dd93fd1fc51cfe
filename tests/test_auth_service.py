"""
Tests for registration and login.
"""

import asyncio

import pytest

from unittest.mock import patch

from auth.password import PasswordHasher
from auth.service import AuthService
from utils.errors import AuthenticationError, ConflictError, ValidationError


@pytest.fixture
def service(store, signer) -> AuthService:
    return AuthService(store.users, PasswordHasher(rounds=4), signer)


class TestRegister:
    @pytest.mark.asyncio
    async def test_returns_token_and_public_user(self, service, signer):
        result = await service.register("Ann", "ann@x.com", "secret1")
        assert set(result.user) == {"id", "name", "email"}
        assert result.user["email"] == "ann@x.com"
        claims = signer.verify_token(result.token)
        assert claims.user_id == result.user["id"]
        assert claims.email == "ann@x.com"

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, service, store):
        await service.register("Ann", "ann@x.com", "secret1")
        doc = await store.users.find_one({"email": "ann@x.com"})
        assert doc["passwordHash"] != "secret1"
        assert doc["passwordHash"].startswith("$2b$")
        assert "password" not in doc
        assert doc["createdAt"] is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, service):
        await service.register("Ann", "ann@x.com", "secret1")
        with pytest.raises(ConflictError, match="Email already exists"):
            await service.register("Other Ann", "ann@x.com", "different")

    @pytest.mark.asyncio
    async def test_concurrent_duplicates_only_one_wins(self, service, store):
        results = await asyncio.gather(
            service.register("Ann", "ann@x.com", "secret1"),
            service.register("Ann", "ann@x.com", "secret1"),
            return_exceptions=True,
        )
        conflicts = [r for r in results if isinstance(r, ConflictError)]
        assert len(conflicts) == 1
        assert len(await store.users.find_many()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,email,password",
        [(None, "a@x.com", "pw"), ("Ann", "", "pw"), ("Ann", "a@x.com", None)],
    )
    async def test_missing_fields(self, service, name, email, password):
        with pytest.raises(ValidationError):
            await service.register(name, email, password)

    @pytest.mark.asyncio
    async def test_long_password_registers_and_logs_in(self, service):
        password = "p" * 80
        registered = await service.register("Ann", "ann@x.com", password)
        result = await service.login("ann@x.com", password)
        assert result.user == registered.user


class TestLogin:
    @pytest.mark.asyncio
    async def test_correct_password(self, service, signer):
        registered = await service.register("Ann", "ann@x.com", "secret1")
        result = await service.login("ann@x.com", "secret1")
        assert result.user == registered.user
        assert signer.verify_token(result.token).user_id == registered.user["id"]

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, service):
        await service.register("Ann", "ann@x.com", "secret1")

        with pytest.raises(AuthenticationError) as wrong_pw:
            await service.login("ann@x.com", "wrong")
        with pytest.raises(AuthenticationError) as unknown:
            await service.login("nobody@x.com", "secret1")

        assert str(wrong_pw.value) == str(unknown.value) == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_missing_fields(self, service):
        with pytest.raises(ValidationError):
            await service.login("ann@x.com", "")
        with pytest.raises(ValidationError):
            await service.login(None, "secret1")

    @pytest.mark.asyncio
    async def test_unknown_email_still_runs_bcrypt(self, service):
        await service.register("Ann", "ann@x.com", "secret1")
        hasher = service._hasher
        with patch.object(
            hasher, "verify_password_async", wraps=hasher.verify_password_async,
        ) as verify:
            with pytest.raises(AuthenticationError):
                await service.login("nobody@x.com", "secret1")
            with pytest.raises(AuthenticationError):
                await service.login("nobody@x.com", "secret1")
        assert verify.await_count == 2
