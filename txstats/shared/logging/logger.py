"""
txstats – Logging configuration
=================================
Un único handler a stdout para la app y para uvicorn.

El nivel sale de Settings: TXSTATS_LOG_LEVEL, o DEBUG si TXSTATS_DEBUG
está activo. Los loggers de uvicorn se enganchan al root en vez de
usar su propia configuración (el runner arranca con log_config=None).
"""

from __future__ import annotations

import logging
import sys

from txstats.shared.config.settings import Settings, settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(app_settings: Settings) -> int:
    """Nivel numérico efectivo para una configuración."""
    if app_settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(app_settings.log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(app_settings: Settings | None = None) -> None:
    """Configura el root logger una sola vez al arranque."""
    app_settings = app_settings or settings
    root = logging.getLogger()
    # Evitar handlers duplicados si se llama más de una vez
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(resolve_level(app_settings))

    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    # Un log por request HTTP es ruido a este volumen
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Fábrica de loggers con namespace prefijado."""
    return logging.getLogger(f"txstats.{name}")
