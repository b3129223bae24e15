"""Verification of access tokens issued by the managed backend."""

from __future__ import annotations

import os

import structlog
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from opentelemetry import trace

logger = structlog.get_logger(__name__)

# The backend signs session tokens with a shared secret
SECRET_KEY = os.getenv("BACKEND_JWT_SECRET", "your-backend-jwt-secret-change-in-production")
ALGORITHM = os.getenv("BACKEND_JWT_ALGORITHM", "HS256")
AUDIENCE = os.getenv("BACKEND_JWT_AUDIENCE", "authenticated")

optional_security = HTTPBearer(auto_error=False)


def decode_access_token(token: str) -> dict | None:
    """
    Decode and verify a backend-issued JWT.

    Args:
        token: The JWT token to decode

    Returns:
        Decoded token payload or None if invalid
    """
    tracer = trace.get_tracer(__name__)

    with tracer.start_as_current_span("decode_access_token") as span:
        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], audience=AUDIENCE)
        except JWTError as e:
            logger.warning("jwt_token_decode_failed", error=str(e), error_type=type(e).__name__)
            span.set_attribute("error", True)
            span.set_attribute("error.type", type(e).__name__)
            return None

        employee_id = payload.get("sub")
        if not employee_id:
            logger.warning("jwt_token_missing_subject")
            return None

        span.set_attribute("employee.id", employee_id)
        logger.debug("jwt_token_decoded", employee_id=employee_id)
        return payload


async def get_optional_employee(
    credentials: HTTPAuthorizationCredentials | None = Depends(optional_security),
) -> dict | None:
    """
    Dependency returning the caller's token claims, or None.

    Anonymous and invalid tokens are not rejected; endpoints that use this
    fall back to unpersonalized output.
    """
    if credentials is None:
        logger.debug("auth_no_credentials")
        return None

    return decode_access_token(credentials.credentials)
