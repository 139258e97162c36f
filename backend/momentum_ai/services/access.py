from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMIN = "ADMIN"
    CREATOR = "CREATOR"
    VIEWER = "VIEWER"


@dataclass(frozen=True)
class Principal:
    id: str
    role: Role


@dataclass(frozen=True)
class AuthzDecision:
    allowed: bool
    message: str | None = None


VIEWER_ONLY_MESSAGE = "Only viewers can access Ask AI"


def authorize_ask(principal: Principal | None) -> AuthzDecision:
    if principal is None or principal.role is not Role.VIEWER:
        return AuthzDecision(allowed=False, message=VIEWER_ONLY_MESSAGE)
    return AuthzDecision(allowed=True)
