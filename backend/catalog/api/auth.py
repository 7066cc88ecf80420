"""Auth Gate: static shared-secret bearer check in front of every route.

Invariants:
    - Runs before routing, body parsing and store access
    - Missing or mismatched Authorization header -> 401 {"message": "Unauthorized"}
    - No configured token -> every request is rejected (fail closed)
    - No session, no per-user identity, no rate limiting
"""

import hmac
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

UNAUTHORIZED_BODY = {"message": "Unauthorized"}


def is_authorized(header: str | None, token: str | None) -> bool:
    """Constant-time comparison of the header against 'Bearer <token>'."""
    if not header or not token:
        return False
    expected = f"Bearer {token}"
    return hmac.compare_digest(header.encode(), expected.encode())


def register_auth_gate(app: FastAPI, token: str | None) -> None:
    """Register the bearer check as HTTP middleware on the app."""
    if not token:
        logger.warning("AUTH_TOKEN is not configured; all requests will be rejected")

    @app.middleware("http")
    async def auth_gate(request: Request, call_next):
        if not is_authorized(request.headers.get("authorization"), token):
            logger.warning(
                "Rejected unauthenticated request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "error_code": "UNAUTHORIZED",
                },
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=UNAUTHORIZED_BODY,
            )
        return await call_next(request)
