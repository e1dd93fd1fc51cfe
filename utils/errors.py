"""
Error taxonomy shared by the services and the HTTP layer.

Every error carries the HTTP status it maps to and a short machine-readable
code; ``api.middleware`` turns them into ``{"error": ..., "message": ...}``.
"""

from __future__ import annotations


class SkillTrackerError(Exception):
    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SkillTrackerError):
    """Missing or malformed input."""

    status_code = 400
    error = "validation_error"


class AuthenticationError(SkillTrackerError):
    """Bad email/password combination."""

    status_code = 401
    error = "authentication_error"


class MissingCredentialError(SkillTrackerError):
    """No bearer token on a protected request."""

    status_code = 401
    error = "missing_credential"


class InvalidCredentialError(SkillTrackerError):
    """Bearer token failed signature or expiry checks."""

    status_code = 403
    error = "invalid_credential"


class NotFoundError(SkillTrackerError):
    status_code = 404
    error = "not_found"


class ConflictError(SkillTrackerError):
    """Duplicate value for a unique key."""

    status_code = 409
    error = "conflict"


class StoreError(SkillTrackerError):
    """The underlying document store failed."""

    status_code = 500
    error = "store_error"
