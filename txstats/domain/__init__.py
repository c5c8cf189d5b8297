"""
txstats – Domain Layer
========================
Núcleo puro del sistema. CERO dependencias externas.

Este módulo contiene:
- entities/: Transaction
- value_objects/: Statistic
- services/: reloj, ventanas, dinero, StatisticsEngine
- repositories/: Interfaces abstractas (ABCs)
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de:
- infrastructure/
- presentation/
- application/
- Frameworks externos (FastAPI, pydantic, etc.)
"""

from txstats.domain.entities.transaction import Transaction
from txstats.domain.value_objects.statistic import Statistic
from txstats.domain.services.statistics_engine import StatisticsEngine

__all__ = [
    "Transaction",
    "Statistic",
    "StatisticsEngine",
]
