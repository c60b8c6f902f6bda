"""
Client self‑service endpoints.

Both routes require a session with the ``client`` role whose client
reference matches the ``client_id`` in the path.
"""

from fastapi import APIRouter, Depends

from opticore_api.app.api.deps import get_client_service
from opticore_api.app.core.security import require_role
from opticore_api.app.models import Role, Session
from opticore_api.app.schemas.client import (
    ClientRead,
    DashboardRead,
    Metrics,
    ServiceToggleRequest,
    ServiceToggleResponse,
)
from opticore_api.app.services.client_service import ClientService


router = APIRouter()


@router.get("/dashboard/{client_id}", response_model=DashboardRead)
async def get_dashboard(
    client_id: str,
    session: Session = Depends(require_role(Role.CLIENT)),
    service: ClientService = Depends(get_client_service),
) -> DashboardRead:
    """Return the client record with freshly generated usage metrics."""
    client, metrics = service.get_dashboard(client_id, session)
    return DashboardRead(client=ClientRead.from_client(client), metrics=Metrics(**metrics))


@router.post("/clients/{client_id}/service", response_model=ServiceToggleResponse)
async def toggle_service(
    client_id: str,
    payload: ServiceToggleRequest,
    session: Session = Depends(require_role(Role.CLIENT)),
    service: ClientService = Depends(get_client_service),
) -> ServiceToggleResponse:
    """Enable or disable one service, e.g. ``{"service": "telegram_bot", "enabled": false}``."""
    services = service.toggle_service(client_id, session, payload.service, payload.enabled)
    return ServiceToggleResponse(message="Service updated", services=services)
