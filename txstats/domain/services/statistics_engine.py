"""
txstats - Statistics Engine (Sliding Window)
===============================================
Calcula sum/avg/max/min/count sobre las transacciones de la ventana.

PRINCIPIO CENTRAL:
  compute() es una funcion pura sobre una secuencia de transacciones
  y un instante `now`. No toca el store, no guarda cache: cada
  consulta recalcula desde cero. Una sola pasada O(n) con
  acumuladores.

CUANDO SE EJECUTA:
  - Bajo demanda via API (GET /statistics).
  - Nunca al insertar: las transacciones envejecen solas y salen de
    la ventana sin que nadie las borre.

CONCURRENCIA:
  current() toma un snapshot (tupla) del store bajo su lock y calcula
  fuera de el. Varias consultas corren en paralelo y cada una ve un
  estado consistente, aunque pueda estar unos microsegundos atrasado.

══════════════════════════════════════════════════════════════════
  FORMULAS
══════════════════════════════════════════════════════════════════

  sum   = Σ amount                      (Decimal, contexto EXACT)
  avg   = float(sum) / count            (dominio float, luego Decimal)
  max   = max(amount)
  min   = min(amount)
  count = n

  sum, avg, max, min → 2 decimales HALF_UP.

  El promedio en float es intencional: 128.01 / 2 da 64.00499… en
  binario y redondea a 64.00, que es el resultado publicado por el
  servicio. En Decimal exacto seria 64.005 → 64.01.
  Si float(sum) desborda a inf se divide en Decimal (average_money).

══════════════════════════════════════════════════════════════════
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal, localcontext
from typing import Iterable

from txstats.domain.entities.transaction import Transaction
from txstats.domain.repositories.transaction_repository import ITransactionRepository
from txstats.domain.services.money import EXACT, average_money, round_money
from txstats.domain.services.time_window import (
    DEFAULT_WINDOW,
    Clock,
    in_statistics_window,
    utc_now,
)
from txstats.domain.value_objects.statistic import Statistic

logger = logging.getLogger("txstats.statistics_engine")


class StatisticsEngine:
    """
    Motor de estadisticas sobre ventana deslizante.

    Responsabilidades:
      1. Filtrar transacciones a |now - t| < ventana.
      2. Agregar en una pasada.
      3. Redondear la salida a centavos.
    """

    def __init__(
        self,
        window: timedelta = DEFAULT_WINDOW,
        clock: Clock = utc_now,
    ) -> None:
        self._window = window
        self._clock = clock

    @property
    def window(self) -> timedelta:
        return self._window

    # ═══════════════════════════════════════════════════════════════
    #  API PUBLICA
    # ═══════════════════════════════════════════════════════════════

    def compute(self, transactions: Iterable[Transaction], now: datetime) -> Statistic:
        """
        Calcula la estadistica de la ventana que termina en `now`.

        Args:
            transactions: Contenido del store (no se modifica).
            now: Instante de referencia UTC.

        Returns:
            Statistic ya redondeada. Ventana vacia → Statistic.empty().
        """
        total = Decimal(0)
        highest: Decimal | None = None
        lowest: Decimal | None = None
        count = 0

        with localcontext(EXACT):
            for tx in transactions:
                if not in_statistics_window(tx.timestamp, now, self._window):
                    continue
                amount = tx.amount
                total += amount
                if highest is None or amount > highest:
                    highest = amount
                if lowest is None or amount < lowest:
                    lowest = amount
                count += 1

        if count == 0:
            return Statistic.empty()

        return Statistic(
            sum=round_money(total),
            avg=average_money(total, count),
            max=round_money(highest),
            min=round_money(lowest),
            count=count,
        )

    def current(self, repository: ITransactionRepository) -> Statistic:
        """Estadistica del contenido actual del repositorio, con `now` del reloj."""
        snapshot = repository.snapshot()
        statistic = self.compute(snapshot, self._clock())
        logger.debug(
            "Estadisticas calculadas | almacenadas=%d en_ventana=%d sum=%s",
            len(snapshot), statistic.count, statistic.sum,
        )
        return statistic
