"""
Logging setup for the mock server.

Everything goes through the root logger so that the service modules
(``logging.getLogger(__name__)``) and uvicorn share one format.  The
httpx client behind the test client logs every request at INFO, which
buries the service messages (sessions issued, clients paused), so it is
lowered to WARNING.  uvicorn's own access log is switched off in
``run.py`` for the same reason.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("httpx",)


def quiet_loggers(names: Iterable[str] = NOISY_LOGGERS, level: int = logging.WARNING) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the application.

    ``level`` is a level name such as ``"DEBUG"`` (unknown names mean
    ``INFO``); ``logfile`` adds a UTF‑8 file handler next to the console
    one.  Handlers are only attached if the root logger has none yet, so
    building several apps in one process (tests) does not duplicate
    output.  Noisy third‑party loggers are quieted every time.
    """
    quiet_loggers()

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
