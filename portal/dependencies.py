"""
Request-scoped dependencies shared by the routers.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from portal.exceptions import AuthenticationError


@dataclass(frozen=True)
class ActorContext:
    """The signed-in staff member performing an operation."""
    user_id: str
    email: Optional[str] = None


def get_current_actor(
    x_user_id: Optional[str] = Header(None, description="Authenticated user id set by the auth gateway"),
    x_user_email: Optional[str] = Header(None, description="Authenticated user email"),
) -> ActorContext:
    """Resolve the actor for write operations; refuses when no session is present."""
    if not x_user_id or not x_user_id.strip():
        raise AuthenticationError("You must be logged in")
    return ActorContext(user_id=x_user_id.strip(), email=x_user_email)
