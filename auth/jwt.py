"""
JWT-style token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256:

    base64url(json{userId, email, issuedAt, expiresAt}) + "." + hex(hmac)

Nothing is persisted — a token is valid iff the signature matches the
server secret and ``expiresAt`` has not passed.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import b64decode, urlsafe_b64encode
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from utils.errors import InvalidCredentialError


class TokenClaims(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    email: str
    issued_at: int = Field(alias="issuedAt")
    expires_at: int = Field(alias="expiresAt")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class TokenSigner:
    """Mints and checks tokens for one secret and validity window."""

    def __init__(
        self,
        secret: str,
        expiry_seconds: int = 3600,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret.encode()
        self.expiry_seconds = expiry_seconds
        self._clock = clock

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def create_token(self, user_id: str, email: str) -> str:
        """Create a signed token for ``user_id``/``email`` expiring after the window."""
        now = int(self._clock())
        claims = TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=now,
            expires_at=now + self.expiry_seconds,
        )
        raw = json.dumps(claims.to_payload()).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify token and return its claims.

        Raises ``InvalidCredentialError`` on malformed, forged or expired tokens.
        """
        parts = token.split(".", 1)
        if len(parts) != 2:
            raise InvalidCredentialError("Malformed token")
        try:
            raw = b64decode(parts[0], altchars=b"-_", validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidCredentialError("Malformed token") from exc

        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            raise InvalidCredentialError("Invalid token signature")

        try:
            claims = TokenClaims.model_validate(json.loads(raw))
        except (ValueError, PydanticValidationError) as exc:
            raise InvalidCredentialError("Malformed token") from exc

        if self._clock() > claims.expires_at:
            raise InvalidCredentialError("Token expired")
        return claims
