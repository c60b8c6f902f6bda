"""
Application package initializer.

The backend is split into a few small pieces: ``core`` (settings,
logging, errors, the authorization gate), ``services`` (the in‑memory
stores and the business operations on top of them), ``schemas``
(request/response bodies) and ``api`` (the HTTP routes).
"""

from .main import app  # noqa: F401
