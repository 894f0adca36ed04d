from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from prospection.config import get_settings

_bearer_security = HTTPBearer(auto_error=False)


class ConsoleUser:
    """Represents an authenticated console principal."""

    def __init__(self, method: str) -> None:
        self.method = method


async def require_console_user(
    bearer_credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_security),
) -> ConsoleUser:
    token = get_settings().api_token or ""
    if not token:
        return ConsoleUser(method="anonymous")

    if bearer_credentials and secrets.compare_digest(bearer_credentials.credentials or "", token):
        return ConsoleUser(method="bearer")

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


__all__ = ["ConsoleUser", "require_console_user"]
