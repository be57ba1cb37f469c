"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and an optional file handler.  ``add_request_logging`` installs an
HTTP middleware that writes one line per request with the method,
path, response status and elapsed time.
"""

import logging
import time
from pathlib import Path
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. when create_app runs once per test.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def add_request_logging(app: FastAPI) -> None:
    """Log every HTTP request handled by ``app``."""
    logger = logging.getLogger("crud_api.requests")

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The fault handler logs the traceback and renders the 500.
            _log_request(logger, request, 500, started)
            raise
        _log_request(logger, request, response.status_code, started)
        return response


def _log_request(logger: logging.Logger, request: Request, status_code: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        status_code,
        elapsed_ms,
    )
