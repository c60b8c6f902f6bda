"""
Bearer‑token helpers and role‑based access control.

Tokens are opaque random strings issued at login and kept in the
application's :class:`~opticore_api.app.services.token_store.TokenStore`.
There is no signature, expiry or revocation: a token is valid for as
long as the process lives.

``authorize`` is the gate itself and has no FastAPI dependency; the
``get_current_session`` and ``require_role`` dependencies wrap it for
use in endpoints via ``Depends``.
"""

import secrets
from typing import TYPE_CHECKING, Callable, Optional

from fastapi import Header, Request

from ..models import Role, Session
from .errors import AuthenticationError, AuthorizationError

if TYPE_CHECKING:
    from ..services.token_store import TokenStore


TOKEN_BYTES = 16
BEARER_PREFIX = "Bearer "


def generate_token() -> str:
    """Return a 128‑bit random token, hex encoded (32 characters)."""
    return secrets.token_hex(TOKEN_BYTES)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Strip the ``Bearer `` prefix from an ``Authorization`` header value.

    A missing header yields an empty token.  A value without the prefix
    is used verbatim.
    """
    if not authorization:
        return ""
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip()
    return authorization.strip()


def authorize(store: "TokenStore", token: str, required_role: Optional[Role] = None) -> Session:
    """Resolve ``token`` to a session and check its role.

    Raises
    ------
    AuthenticationError
        If the token is empty or unknown.
    AuthorizationError
        If ``required_role`` is given and the session has another role.
    """
    session = store.resolve(token)
    if session is None:
        raise AuthenticationError()
    if required_role is not None and session.role != required_role:
        raise AuthorizationError()
    return session


def get_current_session(request: Request, authorization: Optional[str] = Header(None)) -> Session:
    """Dependency that resolves the request's bearer token to a session."""
    return authorize(request.app.state.token_store, extract_bearer_token(authorization))


def require_role(role: Role) -> Callable[..., Session]:
    """Dependency factory enforcing that the current session has ``role``.

    Use as ``Depends(require_role(Role.ADMIN))``.
    """

    def _role_dependency(request: Request, authorization: Optional[str] = Header(None)) -> Session:
        return authorize(request.app.state.token_store, extract_bearer_token(authorization), role)

    return _role_dependency
