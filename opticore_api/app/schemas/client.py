"""
Pydantic models for client subscriptions, dashboards and admin views.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import Client, ClientStatus


class SubscribeRequest(BaseModel):
    """Schema for creating a subscription (no payment is taken)."""

    name: Optional[str] = Field(None, examples=["Acme"])
    plan: Optional[str] = Field(None, examples=["PRO"])


class SubscribeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    client_id: int = Field(..., alias="clientId")


class ClientRead(BaseModel):
    """Schema for reading a client record."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    plan: str
    status: ClientStatus
    services: Dict[str, bool]
    subscription_date: str = Field(..., alias="subscriptionDate")

    @classmethod
    def from_client(cls, client: Client) -> "ClientRead":
        return cls(
            id=client.id,
            name=client.name,
            plan=client.plan,
            status=client.status,
            services=dict(client.services),
            subscription_date=client.subscription_date,
        )


class Metrics(BaseModel):
    """Illustrative usage figures; regenerated on every dashboard read."""

    model_config = ConfigDict(populate_by_name=True)

    leads_processed: int = Field(..., alias="leadsProcessed")
    messages_processed: int = Field(..., alias="messagesProcessed")
    days_until_renewal: int = Field(..., alias="daysUntilRenewal")


class DashboardRead(BaseModel):
    client: ClientRead
    metrics: Metrics


class ServiceToggleRequest(BaseModel):
    """Body for switching a single service on or off.

    ``enabled`` is left untyped so that a non‑boolean value is reported
    after the ownership check, with the same message as a missing one.
    """

    service: Optional[str] = Field(None, examples=["telegram_bot"])
    enabled: Optional[Any] = Field(None, examples=[True])


class ServiceToggleResponse(BaseModel):
    message: str
    services: Dict[str, bool]


class AdminActionResponse(BaseModel):
    message: str
    client: ClientRead


class ClientList(BaseModel):
    clients: List[ClientRead]
