"""
Auth service — registration and login against the ``users`` collection.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel

from auth.jwt import TokenSigner
from auth.password import PasswordHasher
from database.models import User
from database.store import DocumentCollection
from utils.errors import AuthenticationError, ConflictError, ValidationError

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


class AuthResult(BaseModel):
    token: str
    user: Dict[str, Any]


class AuthService:
    def __init__(
        self,
        users: DocumentCollection,
        hasher: PasswordHasher,
        signer: TokenSigner,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._signer = signer
        self._dummy_hash: Optional[str] = None

    def _issue(self, user: User) -> AuthResult:
        token = self._signer.create_token(user.id, user.email)
        return AuthResult(token=token, user=user.public())

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> AuthResult:
        """Create a user and return a fresh token for it."""
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        if await self._users.find_one({"email": email}) is not None:
            raise ConflictError("Email already exists")

        user = User(
            name=name,
            email=email,
            password_hash=await self._hasher.hash_password_async(password),
        )
        try:
            doc = await self._users.insert_one(user.to_document())
        except ConflictError as exc:
            # lost a race with a concurrent registration
            raise ConflictError("Email already exists") from exc
        user = User.from_document(doc)

        logger.info("Registered user %s (%s)", user.name, user.id)
        return self._issue(user)

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        """Check credentials; unknown email and wrong password fail identically."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        doc = await self._users.find_one({"email": email})
        if doc is None:
            # unknown emails pay the same bcrypt cost as known ones
            if self._dummy_hash is None:
                self._dummy_hash = await self._hasher.hash_password_async("unused-dummy-password")
            await self._hasher.verify_password_async(password, self._dummy_hash)
            logger.info("Login failed: unknown email")
            raise AuthenticationError(_INVALID_CREDENTIALS)

        user = User.from_document(doc)
        if not await self._hasher.verify_password_async(password, user.password_hash):
            logger.info("Login failed for user %s", user.id)
            raise AuthenticationError(_INVALID_CREDENTIALS)

        logger.info("Login: %s (%s)", user.name, user.id)
        return self._issue(user)
