"""
txstats – Application Layer
=============================
Capa de casos de uso y orquestación.

Este módulo contiene:
- use_cases/: Casos de uso (orquestadores de dominio)
- dto/: Data Transfer Objects

REGLA DE DEPENDENCIA:
Esta capa puede importar de:
- domain/ (entidades, servicios, interfaces)

NO puede importar de:
- infrastructure/ (implementaciones concretas)
- presentation/ (API)
"""

from txstats.application.use_cases import (
    RecordTransactionUseCase,
    DeleteTransactionsUseCase,
    GetStatisticsUseCase,
)

__all__ = [
    "RecordTransactionUseCase",
    "DeleteTransactionsUseCase",
    "GetStatisticsUseCase",
]
