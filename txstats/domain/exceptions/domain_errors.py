"""
txstats – Domain Exceptions
=============================
Excepciones específicas del dominio de negocio.

Estas excepciones capturan rechazos de lógica de negocio,
NO errores técnicos ni de formato (esos los resuelve la capa HTTP).

JERARQUÍA:
    DomainError (base)
    └── TimestampRejectedError
        ├── TransactionTooOldError    (benigno: se descarta en silencio)
        └── TransactionInFutureError  (error real del cliente)
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class RejectionKind(str, Enum):
    """Motivo de rechazo de una transacción al insertarla."""

    TOO_OLD = "TOO_OLD"
    TOO_FUTURE = "TOO_FUTURE"


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }


class TimestampRejectedError(DomainError):
    """El timestamp de la transacción cae fuera de la ventana de aceptación."""

    kind: RejectionKind

    def __init__(self, message: str, kind: RejectionKind, timestamp: datetime | None = None):
        super().__init__(message, code=kind.value)
        self.kind = kind
        self.timestamp = timestamp


class TransactionTooOldError(TimestampRejectedError):
    """Transacción con más de la ventana de antigüedad al momento de insertarla."""

    def __init__(self, window_seconds: int, timestamp: datetime | None = None):
        super().__init__(
            f"transaction older than {window_seconds} seconds.",
            kind=RejectionKind.TOO_OLD,
            timestamp=timestamp,
        )


class TransactionInFutureError(TimestampRejectedError):
    """Transacción fechada después del instante actual."""

    def __init__(self, timestamp: datetime | None = None):
        super().__init__(
            "transaction has future date.",
            kind=RejectionKind.TOO_FUTURE,
            timestamp=timestamp,
        )
