"""Domain entities."""
from txstats.domain.entities.transaction import Transaction

__all__ = ["Transaction"]
