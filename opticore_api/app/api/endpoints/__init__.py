"""
Endpoint subpackage.

Each module defines an APIRouter for one area (login, subscriptions,
client self‑service, administration).
"""
