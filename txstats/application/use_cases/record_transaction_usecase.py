"""
Record Transaction Use Case.

Caso de uso para registrar una transacción nueva.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from txstats.domain.entities.transaction import Transaction
from txstats.domain.repositories.transaction_repository import ITransactionRepository


@dataclass
class RecordTransactionResult:
    """Resultado del registro (solo se construye si fue aceptada)."""
    transaction: Transaction
    stored: int = 0


class RecordTransactionUseCase:
    """
    Caso de uso: Registrar una transacción.

    Los rechazos por ventana (TransactionTooOldError,
    TransactionInFutureError) se propagan tal cual: la capa HTTP
    decide con qué severidad mostrarlos.
    """

    def __init__(self, transaction_repository: ITransactionRepository):
        self._repo = transaction_repository

    def execute(self, amount: Decimal, timestamp: datetime) -> RecordTransactionResult:
        transaction = Transaction(amount=amount, timestamp=timestamp)
        self._repo.add_transaction(transaction)
        return RecordTransactionResult(transaction=transaction, stored=len(self._repo))
