"""
Domain records held by the in‑memory stores.

These are plain dataclasses, kept separate from the pydantic schemas in
``schemas`` so that the wire representation (camelCase keys) does not
leak into the service layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Role(str, Enum):
    CLIENT = "client"
    ADMIN = "admin"


class ClientStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"


class ServiceName(str, Enum):
    TELEGRAM_BOT = "telegram_bot"
    WHATSAPP_BOT = "whatsapp_bot"
    MAKE_SCENARIO = "make_scenario"
    CRM_INTEGRATION = "crm_integration"


# Services that are only switched on by default above the lowest plan.
PREMIUM_SERVICES = frozenset({ServiceName.WHATSAPP_BOT, ServiceName.CRM_INTEGRATION})


@dataclass(frozen=True)
class Session:
    """Binding of a bearer token to an identity, a role and an optional client."""

    token: str
    identity: str
    role: Role
    client_ref: Optional[int] = None


@dataclass
class Client:
    """A subscribed tenant."""

    id: int
    name: str
    plan: str
    subscription_date: str
    status: ClientStatus = ClientStatus.ACTIVE
    services: Dict[str, bool] = field(default_factory=dict)

    def copy(self) -> "Client":
        return Client(
            id=self.id,
            name=self.name,
            plan=self.plan,
            subscription_date=self.subscription_date,
            status=self.status,
            services=dict(self.services),
        )


def default_services(plan: str, lowest_plan: str) -> Dict[str, bool]:
    """Return the initial service flags for a new subscription on ``plan``."""
    premium_enabled = plan != lowest_plan
    return {
        service.value: (premium_enabled if service in PREMIUM_SERVICES else True)
        for service in ServiceName
    }
