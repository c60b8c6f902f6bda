"""
Business logic for client subscriptions.

Covers the public subscription endpoint and the two client‑scoped
operations (dashboard, service toggle).  Both client‑scoped operations
first check that the session owns the requested client, then that the
client exists.  Paused clients keep full access.
"""

import logging
import random
from typing import Any, Dict, Optional, Tuple, Union

from ..core.errors import AuthorizationError, NotFoundError, ValidationError
from ..models import Client, Session
from .client_registry import ClientRegistry, parse_client_id


logger = logging.getLogger(__name__)

MAX_LEADS = 1000
MAX_MESSAGES = 500


class ClientService:
    """Subscription, dashboard and service‑toggle operations."""

    def __init__(self, registry: ClientRegistry, days_until_renewal: int = 5) -> None:
        self.registry = registry
        self.days_until_renewal = days_until_renewal

    def create_subscription(self, name: Optional[str], plan: Optional[str]) -> int:
        """Register a new client on ``plan`` and return its identifier."""
        if not name or not plan:
            raise ValidationError("name and plan are required")
        client = self.registry.create(name, plan)
        logger.info("Client %s created (%s, plan %s)", client.id, name, plan)
        return client.id

    def get_dashboard(self, client_id: Union[int, str], session: Session) -> Tuple[Client, Dict[str, int]]:
        """Return the client record together with synthetic usage metrics."""
        client_id = self._check_owner(client_id, session)
        client = self.registry.get(client_id)
        if client is None:
            raise NotFoundError()
        return client, self.synthetic_metrics()

    def toggle_service(self, client_id: Union[int, str], session: Session, service: Optional[str], enabled: Any) -> Dict[str, bool]:
        """Switch one of the client's services on or off.

        Returns the full, updated service map.
        """
        client_id = self._check_owner(client_id, session)
        if self.registry.get(client_id) is None:
            raise NotFoundError()
        # JSON booleans only; 0/1 and "true" are rejected.
        if not service or not isinstance(enabled, bool):
            raise ValidationError("service and enabled are required")
        try:
            services = self.registry.set_service(client_id, service, enabled)
        except KeyError:
            raise ValidationError("Unknown service")
        logger.info("Client %s: %s %s", client_id, service, "enabled" if enabled else "disabled")
        return services

    def synthetic_metrics(self) -> Dict[str, int]:
        return {
            "leads_processed": random.randrange(MAX_LEADS),
            "messages_processed": random.randrange(MAX_MESSAGES),
            "days_until_renewal": self.days_until_renewal,
        }

    @staticmethod
    def _check_owner(client_id: Union[int, str], session: Session) -> int:
        # A non-numeric id can never match the session's client.
        parsed = parse_client_id(client_id)
        if parsed is None or session.client_ref != parsed:
            raise AuthorizationError()
        return parsed
