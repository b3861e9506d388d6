from __future__ import annotations

from fastapi import HTTPException, Request

from civic.core.config import Settings
from civic.core.rate_limiter import RateLimiter
from civic.services.community_service import CommunityService, EntityNotFoundError


def _app_state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} not configured")
    return value


def get_community_service(request: Request) -> CommunityService:
    return _app_state(request, "community_service")


def limit_creates(request: Request) -> None:
    settings: Settings = _app_state(request, "settings")
    limiter: RateLimiter = _app_state(request, "rate_limiter")
    scope = f"create:{request.url.path}"
    limiter.hit(request, scope, limit=settings.create_rate_limit, window_seconds=settings.create_rate_window)


def not_found(exc: EntityNotFoundError) -> HTTPException:
    return HTTPException(404, str(exc))
