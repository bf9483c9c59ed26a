"""Dependency injection for FastAPI endpoints"""

import logging
import uuid
from fastapi import Depends, Header, HTTPException, Request
from socia_finance.infrastructure.clients.auth import AuthClient, AuthUser
from socia_finance.infrastructure.observability.metrics import auth_failures_counter
from socia_finance.domain.exceptions import AuthServiceError, InvalidSessionError


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_auth_client() -> AuthClient:
    """Provide auth service client instance"""
    return AuthClient()


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
    auth_client: AuthClient = Depends(get_auth_client),
) -> AuthUser:
    """Resolve the bearer token to the socia making the request"""
    request_id = get_request_id(request)
    if not authorization or not authorization.lower().startswith("bearer "):
        auth_failures_counter.labels(reason="invalid_session").inc()
        raise HTTPException(status_code=401, detail="Missing bearer token")

    token = authorization.split(" ", 1)[1].strip()
    try:
        return await auth_client.get_user(token)
    except InvalidSessionError as e:
        auth_failures_counter.labels(reason="invalid_session").inc()
        logging.warning(f"Invalid session: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    except AuthServiceError as e:
        auth_failures_counter.labels(reason="unavailable").inc()
        logging.error(f"Auth service error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Auth service unavailable")


def parse_uuid(raw: str, label: str) -> uuid.UUID:
    """Path ids are UUIDs; anything else is a client error"""
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label} ID format")
