"""
Session stub used by callers of the task store.

There is no credential check, rate limiting or persistence: any non-empty
username/password pair gets a session whose token is derived from the
username.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .errors import LoginError
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
@dataclass
class Session:
    """A login session: opaque token plus expiry time."""

    token: str
    expires_at: datetime
    revoked: bool = False


def _session_ttl() -> timedelta:
    return timedelta(hours=get_settings().session_ttl_hours)


# PUBLIC_INTERFACE
def login(username: str, password: str, now: Optional[datetime] = None) -> Session:
    """
    Open a session for the given user.

    Raises:
        LoginError if username or password is empty.
    """
    if not username or not password:
        raise LoginError("Username and password are required")

    now = now or datetime.now()
    logger.info("Opened session for user=%s", username)
    return Session(token=f"tok_{username}", expires_at=now + _session_ttl())


# PUBLIC_INTERFACE
def logout(session: Session) -> None:
    """Invalidate the session; it can no longer be refreshed."""
    session.revoked = True
    logger.info("Closed session token=%s", session.token)


# PUBLIC_INTERFACE
def refresh(session: Session, now: Optional[datetime] = None) -> None:
    """
    Push the session's expiry to a full TTL window from now.

    Raises:
        LoginError if the session was logged out.
    """
    if session.revoked:
        raise LoginError("Session has been logged out")
    session.expires_at = (now or datetime.now()) + _session_ttl()
