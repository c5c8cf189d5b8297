"""Persistence implementations."""
from txstats.infrastructure.persistence.in_memory_transaction_store import InMemoryTransactionStore

__all__ = ["InMemoryTransactionStore"]
