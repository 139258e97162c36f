import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from momentum_ai.config import Settings, get_settings
from momentum_ai.errors import AuthenticationError, ConfigurationError, Forbidden
from momentum_ai.services.access import Principal, Role, authorize_ask

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

TOKEN_REQUIRED = "Access token required"
TOKEN_INVALID = "Invalid or expired token"
AUTH_NOT_CONFIGURED = "Authentication is not configured"


def create_access_token(
    principal: Principal,
    secret: str,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "id": principal.id,
        "role": principal.role.value,
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_principal(token: str, secret: str, algorithm: str = "HS256") -> Principal:
    try:
        claims: dict[str, Any] = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.PyJWTError as exc:
        logger.info("Rejected bearer token: %s", type(exc).__name__)
        raise AuthenticationError(TOKEN_INVALID) from exc

    user_id = claims.get("id") or claims.get("sub")
    try:
        role = Role(str(claims.get("role", "")).upper())
    except ValueError as exc:
        raise AuthenticationError(TOKEN_INVALID) from exc
    if not user_id:
        raise AuthenticationError(TOKEN_INVALID)
    return Principal(id=str(user_id), role=role)


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Principal:
    if not settings.auth_configured:
        raise ConfigurationError(AUTH_NOT_CONFIGURED)
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(TOKEN_REQUIRED)
    return decode_principal(credentials.credentials, settings.jwt_secret, settings.jwt_algorithm)


async def require_viewer(principal: Principal = Depends(get_current_principal)) -> Principal:
    decision = authorize_ask(principal)
    if not decision.allowed:
        raise Forbidden(decision.message or "Forbidden")
    return principal
