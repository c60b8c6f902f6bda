"""
Subscription endpoint.

Public and free: no payment is taken, the client is simply registered
with default services for the chosen plan.
"""

from fastapi import APIRouter, Depends

from opticore_api.app.api.deps import get_client_service
from opticore_api.app.schemas.client import SubscribeRequest, SubscribeResponse
from opticore_api.app.services.client_service import ClientService


router = APIRouter()


@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe(payload: SubscribeRequest, service: ClientService = Depends(get_client_service)) -> SubscribeResponse:
    client_id = service.create_subscription(payload.name, payload.plan)
    return SubscribeResponse(message="Subscription created", client_id=client_id)
