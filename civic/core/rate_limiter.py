"""Fixed-window request limiter, one instance per application."""
from __future__ import annotations

import threading
import time
from typing import Callable, Dict, Tuple

from fastapi import HTTPException, Request


class RateLimiter:
    """Counts hits per key inside a window; expired windows are pruned on each check."""

    def __init__(self, *, trust_proxy_headers: bool = False, clock: Callable[[], float] = time.time) -> None:
        self.trust_proxy_headers = trust_proxy_headers
        self._clock = clock
        self._hits: Dict[str, Tuple[int, float]] = {}
        self._lock = threading.Lock()

    def client_ip(self, request: Request) -> str:
        if self.trust_proxy_headers:
            forwarded = request.headers.get("x-forwarded-for")
            if forwarded:
                return forwarded.split(",")[0].strip()
        if request.client and request.client.host:
            return request.client.host
        return "unknown"

    def check(self, key: str, limit: int, window_seconds: int) -> None:
        if limit <= 0:
            return
        now = self._clock()
        with self._lock:
            expired = [k for k, (_count, reset) in self._hits.items() if now > reset]
            for k in expired:
                del self._hits[k]
            count, reset = self._hits.get(key, (0, now + window_seconds))
            count += 1
            self._hits[key] = (count, reset)
            if count > limit:
                raise HTTPException(429, "Too many requests. Please try again shortly.")

    def hit(self, request: Request, scope: str, *, limit: int, window_seconds: int) -> None:
        self.check(f"{scope}:{self.client_ip(request)}", limit, window_seconds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)
