"""
In‑memory session store.

Maps opaque bearer tokens to :class:`~opticore_api.app.models.Session`
records for the lifetime of the process.  Sessions never expire and
there is no logout, so the store only grows.
"""

import threading
from typing import Dict, Optional

from ..core.security import generate_token
from ..models import Role, Session


class TokenStore:
    """Thread‑safe mapping from token to session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: Dict[str, Session] = {}

    def issue(self, identity: str, role: Role, client_ref: Optional[int] = None) -> str:
        """Create a session under a fresh random token and return the token.

        Collisions are not checked: 128 random bits make them
        practically impossible.
        """
        session = Session(token=generate_token(), identity=identity, role=role, client_ref=client_ref)
        with self._lock:
            self._sessions[session.token] = session
        return session.token

    def resolve(self, token: str) -> Optional[Session]:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
