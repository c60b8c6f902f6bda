"""
Administrative operations on clients: pause, resume and listing.

Pausing only flips the status flag.  It does not revoke the client's
sessions or block its dashboard.
"""

import logging
from typing import List, Union

from ..core.errors import NotFoundError, ValidationError
from ..models import Client, ClientStatus
from .client_registry import ClientRegistry, parse_client_id


logger = logging.getLogger(__name__)

ACTIONS = {
    "pause": ClientStatus.PAUSED,
    "resume": ClientStatus.ACTIVE,
}


class AdminService:
    """Service for administrator‑only client management."""

    def __init__(self, registry: ClientRegistry) -> None:
        self.registry = registry

    def set_status(self, client_id: Union[int, str], action: str) -> Client:
        """Apply ``action`` (``pause`` or ``resume``) to a client."""
        # Unknown (or non-numeric) clients are reported before unknown actions.
        client_id = parse_client_id(client_id)
        if client_id is None or self.registry.get(client_id) is None:
            raise NotFoundError()
        if action not in ACTIONS:
            raise ValidationError("Invalid action")
        client = self.registry.set_status(client_id, ACTIONS[action])
        logger.info("Client %s %sd by admin", client_id, action)
        return client

    def list_clients(self) -> List[Client]:
        return self.registry.list_all()
