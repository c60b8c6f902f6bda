"""
Administrator endpoints.

Every route requires a session with the ``admin`` role.  Admin sessions
are not scoped to a client.
"""

from fastapi import APIRouter, Depends

from opticore_api.app.api.deps import get_admin_service
from opticore_api.app.core.security import require_role
from opticore_api.app.models import Role, Session
from opticore_api.app.schemas.client import AdminActionResponse, ClientList, ClientRead
from opticore_api.app.services.admin_service import AdminService


router = APIRouter()


@router.get("/clients", response_model=ClientList)
async def list_clients(
    session: Session = Depends(require_role(Role.ADMIN)),
    service: AdminService = Depends(get_admin_service),
) -> ClientList:
    return ClientList(clients=[ClientRead.from_client(c) for c in service.list_clients()])


@router.post("/clients/{client_id}/{action}", response_model=AdminActionResponse)
async def set_client_status(
    client_id: str,
    action: str,
    session: Session = Depends(require_role(Role.ADMIN)),
    service: AdminService = Depends(get_admin_service),
) -> AdminActionResponse:
    """Pause or resume a client (``action`` is ``pause`` or ``resume``)."""
    client = service.set_status(client_id, action)
    return AdminActionResponse(message=f"Client {action}d", client=ClientRead.from_client(client))
