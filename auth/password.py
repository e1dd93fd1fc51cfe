"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

import asyncio

import bcrypt

BCRYPT_MAX_BYTES = 72


def _to_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise instead
    return password.encode()[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """bcrypt with a per-instance work factor (``BCRYPT_ROUNDS``)."""

    def __init__(self, rounds: int = 10) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    def hash_password(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return bcrypt.hashpw(_to_bytes(password), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_to_bytes(password), password_hash.encode())
        except (ValueError, TypeError):
            return False

    # bcrypt is CPU-bound; keep it off the event loop.
    async def hash_password_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash_password, password)

    async def verify_password_async(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify_password, password, password_hash)
