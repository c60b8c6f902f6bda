"""
Main entrypoint for the OptiCore mock backend.

This module assembles the FastAPI application: logging, error handlers,
the in‑memory stores, the ``/api`` routes and the static front end.
``create_app`` builds a fresh application with empty stores, and an
instance is created at import time as ``app`` so it can be served
directly, e.g.::

    uvicorn opticore_api.app.main:app --port 3000
"""

import logging
import os
from typing import Dict, Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.client_registry import ClientRegistry
from .services.token_store import TokenStore


logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured application with its own, empty token store and
        client registry on ``app.state``.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version)
    app.state.settings = cfg
    app.state.token_store = TokenStore()
    app.state.client_registry = ClientRegistry(lowest_plan=cfg.lowest_plan)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    # The static mount catches every remaining path, so it goes last.
    if cfg.static_dir:
        static_dir = os.path.abspath(cfg.static_dir)
        if os.path.isdir(static_dir):
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory %s does not exist; static files disabled", static_dir)

    return app


app = create_app()
