"""
txstats – Shared Module
=========================
Utilidades transversales usadas por todas las capas.

Este módulo contiene:
- config/: Settings y configuración
- logging/: Setup de logging

NOTA: Este módulo no contiene lógica de negocio.
"""

from txstats.shared.config.settings import settings
from txstats.shared.logging.logger import setup_logging, get_logger

__all__ = [
    "settings",
    "setup_logging",
    "get_logger",
]
