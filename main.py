"""
Skill Tracker API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from auth.jwt import TokenSigner
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from auth.service import AuthService
from config.settings import Settings, config
from database.memory import InMemoryDocumentStore
from database.session import MongoDocumentStore
from database.store import DocumentStore
from skills.routes import router as skills_router
from skills.service import SkillService

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("pymongo", "httpx", "httpcore"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> DocumentStore:
    if settings.storage_backend == "memory":
        logger.warning("Using the in-memory store — data is lost on restart")
        return InMemoryDocumentStore()
    if settings.storage_backend == "mongo":
        return MongoDocumentStore.from_settings(settings)
    raise ValueError(f"Unknown storage backend '{settings.storage_backend}'")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    signer: Optional[TokenSigner] = None,
) -> FastAPI:
    settings = settings or config
    store = store or build_store(settings)
    signer = signer or TokenSigner(settings.jwt_secret, settings.jwt_expiry_seconds)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET is not set — tokens are signed with an insecure default")
        await store.ensure_indexes()
        logger.info("Application ready to accept requests.")
        yield
        await store.close()

    app = FastAPI(
        title="Skill Tracker API",
        version="1.0.0",
        description="User accounts and a shared skill catalog.",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.token_signer = signer
    app.state.auth_service = AuthService(
        store.users, PasswordHasher(settings.bcrypt_rounds), signer,
    )
    app.state.skill_service = SkillService(store.skills)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(skills_router, prefix=settings.api_prefix)

    @app.get("/")
    async def index():
        return {"message": "Skill Tracker API is running..."}

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
