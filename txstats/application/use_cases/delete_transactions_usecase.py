"""
Delete Transactions Use Case.

Caso de uso para vaciar el almacén de transacciones.
"""

from __future__ import annotations

from txstats.domain.repositories.transaction_repository import ITransactionRepository


class DeleteTransactionsUseCase:
    """Caso de uso: Borrar todas las transacciones."""

    def __init__(self, transaction_repository: ITransactionRepository):
        self._repo = transaction_repository

    def execute(self) -> None:
        self._repo.delete_all()
