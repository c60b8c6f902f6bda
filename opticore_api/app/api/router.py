"""
Top‑level API router.

Aggregates the domain routers; ``create_app`` mounts it under ``/api``.
"""

from fastapi import APIRouter, HTTPException, status

from .endpoints import admin, auth, clients, subscriptions

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(subscriptions.router, tags=["subscriptions"])
# Client self‑service routes live under two prefixes (/dashboard and
# /clients), so the router declares full paths itself.
router.include_router(clients.router, tags=["clients"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])


# Unknown /api paths answer 404 for every method instead of falling
# through to the static mount (which only serves GET/HEAD).
@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def unknown_api_route(path: str) -> None:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
