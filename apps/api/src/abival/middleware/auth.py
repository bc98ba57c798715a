"""
Bearer token guard for the validation API.

Only /v1/* routes are guarded, and only when API_TOKEN is configured.
Health, type listing and sample endpoints stay open.
"""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from abival.config import get_settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def check_bearer_token(header: str | None, expected: str) -> str | None:
    """
    Compare an Authorization header against the expected token.

    Returns:
        None when the token matches, otherwise the rejection reason
    """
    if not header:
        return "Authorization header required"
    if not header.startswith(BEARER_PREFIX):
        return f"Authorization must use the {BEARER_PREFIX.strip()} scheme"
    if header[len(BEARER_PREFIX):] != expected:
        return "Token rejected"
    return None


class APITokenMiddleware(BaseHTTPMiddleware):
    """Reject unauthenticated calls to /v1/* with a 401 JSON body."""

    GUARDED_PREFIX = "/v1"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        token = get_settings().api_token

        # No token configured means an open dev server
        if not token or not path.startswith(self.GUARDED_PREFIX):
            return await call_next(request)

        reason = check_bearer_token(request.headers.get("Authorization"), token)
        if reason:
            logger.warning(f"Refused {request.method} {path}: {reason}")
            return JSONResponse(status_code=401, content={"detail": reason})

        return await call_next(request)
