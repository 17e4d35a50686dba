"""JWT token utilities."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ..config import get_settings
from ..core.exceptions import ExpiredCredentialError, InvalidCredentialError

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: int,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    """Create a signed access token whose subject is the user id."""
    settings = get_settings()
    now = issued_at or datetime.now(timezone.utc)

    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode: Dict[str, Any] = {
        "sub": str(user_id),
        "iat": now,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> int:
    """Validate an access token and return the user id it was issued for.

    Raises ``ExpiredCredentialError`` once the token is past ``exp`` and
    ``InvalidCredentialError`` for every other failure: bad signature,
    garbage input, a token of another type or a non-integer subject.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError as e:
        raise ExpiredCredentialError("Access token has expired") from e
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        raise InvalidCredentialError("Invalid access token") from e

    if payload.get("type") != "access":
        raise InvalidCredentialError("Invalid access token")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise InvalidCredentialError("Invalid access token") from e
