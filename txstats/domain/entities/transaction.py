"""
txstats – Domain Entity: Transaction
======================================
Una transacción monetaria con su instante de ocurrencia.

- frozen=True → inmutable una vez aceptada por el store.
- amount siempre es Decimal (nunca float binario).
- timestamp siempre es un datetime UTC con zona horaria.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Vía str() para no arrastrar la representación binaria completa
        return Decimal(str(value))
    return Decimal(value)


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class Transaction:
    """Monto + timestamp UTC. Sin identidad propia."""

    amount: Decimal
    timestamp: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", _to_decimal(self.amount))
        object.__setattr__(self, "timestamp", _to_utc(self.timestamp))

    def to_dict(self) -> dict:
        """Serialización para logs / API."""
        return {
            "amount": str(self.amount),
            "timestamp": self.timestamp.isoformat(),
        }
