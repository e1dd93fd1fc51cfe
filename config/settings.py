"""
Application settings loaded from environment variables.
"""

from pydantic_settings import BaseSettings
from typing import List

DEFAULT_JWT_SECRET = "your_jwt_secret"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    storage_backend: str = "mongo"      # "mongo" | "memory"
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "skilltracker"

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET   # HMAC secret for auth tokens
    jwt_expiry_seconds: int = 3600         # 1 hour
    bcrypt_rounds: int = 10                # bcrypt work factor (4..31)

    # ── Server ───────────────────────────────────────────────────────────
    api_prefix: str = ""
    port: int = 5000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


config = Settings()
