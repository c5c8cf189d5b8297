"""Domain exceptions."""
from txstats.domain.exceptions.domain_errors import (
    DomainError,
    RejectionKind,
    TimestampRejectedError,
    TransactionTooOldError,
    TransactionInFutureError,
)

__all__ = [
    "DomainError",
    "RejectionKind",
    "TimestampRejectedError",
    "TransactionTooOldError",
    "TransactionInFutureError",
]
