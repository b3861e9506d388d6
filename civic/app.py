from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from civic.core.config import Settings, get_settings
from civic.core.logging_config import setup_logging
from civic.core.rate_limiter import RateLimiter
from civic.repositories.memory_repository import MemoryRepository
from civic.routers import announcements as announcements_router
from civic.routers import discussions as discussions_router
from civic.routers import events as events_router
from civic.routers import issues as issues_router
from civic.services.community_service import CommunityService

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, sniffing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _allowed_origins(settings: Settings) -> list[str]:
    allowed_cors = {settings.public_base_url}
    if settings.app_env != "prod":
        allowed_cors.update(
            {
                "http://localhost:5000",
                "http://127.0.0.1:5000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            }
        )
    return sorted(origin for origin in allowed_cors if origin)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[MemoryRepository] = None,
) -> FastAPI:
    """
    Build the API around a single explicitly constructed store.

    Compatible with ``uvicorn civic.app:create_app --factory``. Tests pass
    their own repository (usually unseeded) and settings.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if repository is None:
        repository = MemoryRepository(seed=settings.seed_data)

    app = FastAPI(title="Civic Engagement API")
    app.state.settings = settings
    app.state.repository = repository
    app.state.community_service = CommunityService(repository)
    app.state.rate_limiter = RateLimiter(trust_proxy_headers=settings.trust_proxy_headers)

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.include_router(issues_router.router)
    app.include_router(announcements_router.router)
    app.include_router(events_router.router)
    app.include_router(discussions_router.router)

    logger.info("civic api ready (env=%s, seed=%s)", settings.app_env, settings.seed_data)
    return app
