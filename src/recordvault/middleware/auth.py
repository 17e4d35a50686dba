"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import MissingCredentialError
from ..security import decode_access_token


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Resolves to the integer user id carried by the token. Failures surface as
    domain credential errors so the app's exception handlers answer with 401.
    """

    def __init__(self):
        super(JWTBearer, self).__init__(auto_error=False)

    async def __call__(self, request: Request) -> int:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer":
            raise MissingCredentialError("Bearer credential required")

        return decode_access_token(credentials.credentials)


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: int = Depends(JWTBearer())) -> int:
    """Get current authenticated user ID."""
    return user_id
