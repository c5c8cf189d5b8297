"""
txstats – Domain Repository Interface: Transaction
====================================================
Interfaz abstracta para el almacén de transacciones.

Define el contrato de cualquier implementación (hoy solo InMemory).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from txstats.domain.entities.transaction import Transaction


class ITransactionRepository(ABC):
    """
    Interfaz abstracta para repositorio de transacciones.

    OPERACIONES SÍNCRONAS:
    Todo vive en memoria, ninguna operación bloquea ni hace I/O.

    CONCURRENCIA:
    Las implementaciones deben garantizar que ningún lector observe
    una inserción o un borrado a medias.
    """

    @abstractmethod
    def add_transaction(self, transaction: Transaction) -> None:
        """
        Acepta y guarda una transacción.

        Raises:
            TransactionTooOldError: timestamp anterior a now - ventana.
            TransactionInFutureError: timestamp posterior a now.
        """

    @abstractmethod
    def delete_all(self) -> None:
        """Borra todas las transacciones. Idempotente."""

    @abstractmethod
    def snapshot(self) -> tuple[Transaction, ...]:
        """Copia inmutable del contenido actual."""

    @abstractmethod
    def load(self, transactions: Iterable[Transaction]) -> None:
        """Importa transacciones sin validar la ventana (fixtures)."""

    @abstractmethod
    def __len__(self) -> int:
        """Cantidad de transacciones almacenadas (dentro o fuera de ventana)."""
