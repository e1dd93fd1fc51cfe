"""
Auth API routes — register, login, dashboard.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from auth.dependencies import require_claims
from auth.jwt import TokenClaims
from auth.models import AuthResponse, DashboardResponse, LoginRequest, RegisterRequest
from auth.service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Register a new user."""
    result = await service.register(req.name, req.email, req.password)
    return {
        "message": "User registered successfully",
        "token": result.token,
        "user": result.user,
    }


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Login with email + password."""
    result = await service.login(req.email, req.password)
    return {
        "message": "Login successful",
        "token": result.token,
        "user": result.user,
    }


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(claims: TokenClaims = Depends(require_claims)) -> Dict[str, Any]:
    return {
        "message": "Welcome to your dashboard",
        "user": claims.to_payload(),
    }
