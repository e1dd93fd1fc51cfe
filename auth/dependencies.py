"""
FastAPI dependency that gates protected routes on a valid bearer token.

    no Authorization / not "Bearer <token>"  → MissingCredentialError (401)
    bad signature / malformed / expired      → InvalidCredentialError (403)
    otherwise                                → claims on ``request.state.user``

No database lookup happens here; trust is purely cryptographic.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies import get_token_signer
from auth.jwt import TokenClaims, TokenSigner
from utils.errors import MissingCredentialError

_bearer_scheme = HTTPBearer(auto_error=False)


async def require_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    signer: TokenSigner = Depends(get_token_signer),
) -> TokenClaims:
    """Return the verified claims for the request's bearer token."""
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError("Missing bearer token")

    claims = signer.verify_token(credentials.credentials)
    request.state.user = claims
    return claims
