"""Domain repository interfaces."""
from txstats.domain.repositories.transaction_repository import ITransactionRepository

__all__ = ["ITransactionRepository"]
