"""
Business logic for demo logins.

Login does not verify anything: the caller names an e‑mail and a role
and receives a bearer token bound to them.  A real deployment would
send an OTP or check credentials here.
"""

import logging
from typing import Any, Optional

from ..core.errors import ValidationError
from ..models import Role
from .token_store import TokenStore


logger = logging.getLogger(__name__)


class SessionService:
    """Issues sessions into a :class:`TokenStore`."""

    def __init__(self, store: TokenStore) -> None:
        self.store = store

    def login(self, email: Optional[str], role: Optional[str], client_id: Any = None) -> str:
        """Issue a token for ``email`` acting as ``role``.

        ``client_id`` is only meaningful for the client role; a falsy
        value (missing, ``0``) leaves the session without a client.
        """
        if not email or not role:
            raise ValidationError("email and role are required")
        try:
            parsed_role = Role(role)
        except ValueError:
            raise ValidationError("role must be 'client' or 'admin'")
        client_ref = int(client_id) if client_id else None
        token = self.store.issue(email, parsed_role, client_ref)
        logger.info("Session issued for %s (role=%s, client=%s)", email, parsed_role.value, client_ref)
        return token
