"""
Service layer.

``TokenStore`` and ``ClientRegistry`` own the process‑local state; the
``*Service`` classes implement the request operations on top of them.
Stores are created per application in ``create_app`` and handed to the
services, so nothing here relies on module‑level state.
"""
