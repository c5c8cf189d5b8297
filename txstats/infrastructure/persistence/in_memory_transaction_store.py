"""
txstats – In-Memory Transaction Store
=======================================
Estado centralizado de las transacciones recibidas.

DISEÑO:
  - Lista en orden de inserción, sin índice por tiempo.
  - Política de aceptación evaluada al insertar (ver time_window).
  - Nunca se poda sola: las transacciones viejas siguen guardadas
    (solo quedan fuera de las estadísticas) hasta delete_all().

THREADING:
  Los handlers HTTP pueden correr en varios threads. Toda escritura
  y la copia del snapshot pasan por un único Lock; el cálculo de
  estadísticas trabaja sobre la copia, fuera del lock.
"""

from __future__ import annotations

import threading
from datetime import timedelta
from typing import Iterable

from txstats.domain.entities.transaction import Transaction
from txstats.domain.exceptions.domain_errors import (
    RejectionKind,
    TransactionInFutureError,
    TransactionTooOldError,
)
from txstats.domain.repositories.transaction_repository import ITransactionRepository
from txstats.domain.services.time_window import (
    DEFAULT_WINDOW,
    Clock,
    acceptance_rejection,
    utc_now,
)
from txstats.shared.logging.logger import get_logger

logger = get_logger("transaction_store")


class InMemoryTransactionStore(ITransactionRepository):
    """
    Almacén en memoria de transacciones.

    Invariantes:
      - Solo entra por add_transaction() lo que está dentro de la
        ventana de aceptación en ese instante.
      - Ninguna transacción se modifica después de entrar.
    """

    def __init__(
        self,
        window: timedelta = DEFAULT_WINDOW,
        clock: Clock = utc_now,
    ) -> None:
        self._window = window
        self._clock = clock
        self._transactions: list[Transaction] = []
        self._lock = threading.Lock()

    # ════════════════════════════════════════════════════════════════
    #  ESCRITURA
    # ════════════════════════════════════════════════════════════════

    def add_transaction(self, transaction: Transaction) -> None:
        now = self._clock()
        rejection = acceptance_rejection(transaction.timestamp, now, self._window)

        if rejection is RejectionKind.TOO_OLD:
            logger.debug(
                "Transacción descartada por antigua | ts=%s now=%s",
                transaction.timestamp.isoformat(), now.isoformat(),
            )
            raise TransactionTooOldError(
                int(self._window.total_seconds()), timestamp=transaction.timestamp,
            )
        if rejection is RejectionKind.TOO_FUTURE:
            logger.info(
                "Transacción rechazada con fecha futura | ts=%s now=%s",
                transaction.timestamp.isoformat(), now.isoformat(),
            )
            raise TransactionInFutureError(transaction.timestamp)

        with self._lock:
            self._transactions.append(transaction)
            total = len(self._transactions)

        logger.debug(
            "Transacción aceptada | amount=%s ts=%s total=%d",
            transaction.amount, transaction.timestamp.isoformat(), total,
        )

    def delete_all(self) -> None:
        with self._lock:
            removed = len(self._transactions)
            self._transactions.clear()
        logger.info("Transacciones eliminadas | count=%d", removed)

    def load(self, transactions: Iterable[Transaction]) -> None:
        batch = list(transactions)
        with self._lock:
            self._transactions.extend(batch)
        logger.debug("Transacciones importadas sin validar | count=%d", len(batch))

    # ════════════════════════════════════════════════════════════════
    #  CONSULTAS
    # ════════════════════════════════════════════════════════════════

    def snapshot(self) -> tuple[Transaction, ...]:
        with self._lock:
            return tuple(self._transactions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
