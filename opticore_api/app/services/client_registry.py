"""
In‑memory client registry.

Clients are keyed by a numeric identifier allocated monotonically from
1.  Each public method is a single atomic operation under the
registry's lock; there are no multi‑step transactions, so two
concurrent updates to the same client are last‑write‑wins.  Records
returned to callers are copies.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from ..core.errors import NotFoundError
from ..models import Client, ClientStatus, default_services


def parse_client_id(value: Union[int, str]) -> Optional[int]:
    """Parse a path identifier; ``None`` when it is not an integer."""
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError:
        return None


def utcnow_iso() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ClientRegistry:
    """Thread‑safe store of :class:`Client` records."""

    def __init__(self, lowest_plan: str = "START") -> None:
        self.lowest_plan = lowest_plan
        self._lock = threading.Lock()
        self._clients: Dict[int, Client] = {}
        self._next_id = 1

    def create(self, name: str, plan: str) -> Client:
        with self._lock:
            client = Client(
                id=self._next_id,
                name=name,
                plan=plan,
                subscription_date=utcnow_iso(),
                services=default_services(plan, self.lowest_plan),
            )
            self._clients[client.id] = client
            self._next_id += 1
            return client.copy()

    def get(self, client_id: int) -> Optional[Client]:
        with self._lock:
            client = self._clients.get(client_id)
            return client.copy() if client else None

    def set_service(self, client_id: int, service: str, enabled: bool) -> Dict[str, bool]:
        """Set one service flag and return the resulting service map.

        Raises :class:`NotFoundError` for an unknown client and
        ``KeyError`` if the client has no such service.
        """
        with self._lock:
            client = self._require(client_id)
            if service not in client.services:
                raise KeyError(service)
            client.services[service] = enabled
            return dict(client.services)

    def set_status(self, client_id: int, status: ClientStatus) -> Client:
        with self._lock:
            client = self._require(client_id)
            client.status = status
            return client.copy()

    def list_all(self) -> List[Client]:
        with self._lock:
            return [client.copy() for client in self._clients.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)

    def _require(self, client_id: int) -> Client:
        client = self._clients.get(client_id)
        if client is None:
            raise NotFoundError()
        return client
