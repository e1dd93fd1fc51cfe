"""
Request / response schemas for the auth routes.

Body fields are optional at the schema level so that missing fields reach
``AuthService`` and come back as a 400 rather than FastAPI's 422.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    message: str
    token: str
    user: Dict[str, Any]


class DashboardResponse(BaseModel):
    message: str
    user: Dict[str, Any]
