# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from lifedash import config


def build_limiter(rate_limit: str = None) -> Limiter:
    """Per-app limiter; `enforce_rate_limit` applies its default limit to every route."""
    return Limiter(key_func=get_remote_address, default_limits=[rate_limit or config.RATE_LIMIT])


def enforce_rate_limit(request: Request):
    """
    App-wide dependency. Runs after routing, so routes coming from
    included routers are counted too (keyed by path and client address).
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    # Raises RateLimitExceeded, answered by rate_limit_exceeded_handler
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


# ---------------------- ADDING EXCEPTION HANDLER ----------------------
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )
