"""
FastAPI dependencies (shared across routes).

Services are built once in ``main.create_app`` and kept on ``app.state``;
these helpers hand them to route handlers.
"""

from __future__ import annotations

from fastapi import Request

from auth.jwt import TokenSigner
from auth.service import AuthService
from skills.service import SkillService


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_skill_service(request: Request) -> SkillService:
    return request.app.state.skill_service


def get_token_signer(request: Request) -> TokenSigner:
    return request.app.state.token_signer
