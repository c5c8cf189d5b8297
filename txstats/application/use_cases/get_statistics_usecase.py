"""
Get Statistics Use Case.

Caso de uso para obtener las estadísticas de la ventana activa.
"""

from __future__ import annotations

from dataclasses import dataclass

from txstats.application.dto.statistic_dto import StatisticDTO
from txstats.domain.repositories.transaction_repository import ITransactionRepository
from txstats.domain.services.statistics_engine import StatisticsEngine
from txstats.domain.value_objects.statistic import Statistic


@dataclass
class StatisticResult:
    """Resultado del cálculo de estadísticas."""
    statistic: Statistic
    dto: StatisticDTO


class GetStatisticsUseCase:
    """
    Caso de uso: Calcular estadísticas de los últimos N segundos.

    Recalcula en cada llamada; no hay cache.
    """

    def __init__(
        self,
        transaction_repository: ITransactionRepository,
        statistics_engine: StatisticsEngine,
    ):
        self._repo = transaction_repository
        self._engine = statistics_engine

    def execute(self) -> StatisticResult:
        statistic = self._engine.current(self._repo)
        return StatisticResult(
            statistic=statistic,
            dto=StatisticDTO.from_statistic(statistic),
        )
