"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first, so local overrides can live next to the static assets
instead of the shell profile.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "KIREI OptiCore")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address and port used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Directory served at ``/`` for the HTML/CSS/JS front end.  Relative
    # paths are resolved against the current working directory.  Set to an
    # empty string to disable static file serving.
    static_dir: str = os.getenv("STATIC_DIR", ".")

    # Plan whose premium services (WhatsApp bot, CRM integration) are
    # switched off when a subscription is created.
    lowest_plan: str = os.getenv("LOWEST_PLAN", "START")

    # Fixed renewal countdown reported on the client dashboard.
    days_until_renewal: int = int(os.getenv("DAYS_UNTIL_RENEWAL", "5"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
