"""
Top‑level package for the OptiCore mock backend.

All functionality lives in submodules under ``app``; import the ASGI
application as ``opticore_api.app.main:app``.
"""

__all__ = []
