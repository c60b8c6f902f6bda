"""
Login endpoint.

Demo only: any e‑mail may log in with either role.  The returned token
is sent back as ``Authorization: Bearer <token>`` on later requests.
"""

from fastapi import APIRouter, Depends

from opticore_api.app.api.deps import get_session_service
from opticore_api.app.schemas.session import LoginRequest, LoginResponse
from opticore_api.app.services.session_service import SessionService


router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, service: SessionService = Depends(get_session_service)) -> LoginResponse:
    """Issue a bearer token for the given e‑mail and role."""
    token = service.login(payload.email, payload.role, payload.client_id)
    return LoginResponse(token=token, role=payload.role)
