"""
FastAPI dependency providers.

The stores live on ``app.state`` (see ``create_app``); these helpers
wrap them in the matching service for each request.
"""

from fastapi import Request

from ..services.admin_service import AdminService
from ..services.client_service import ClientService
from ..services.session_service import SessionService


def get_session_service(request: Request) -> SessionService:
    return SessionService(request.app.state.token_store)


def get_client_service(request: Request) -> ClientService:
    state = request.app.state
    return ClientService(state.client_registry, days_until_renewal=state.settings.days_until_renewal)


def get_admin_service(request: Request) -> AdminService:
    return AdminService(request.app.state.client_registry)
