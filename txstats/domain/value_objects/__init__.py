"""Domain value objects."""
from txstats.domain.value_objects.statistic import Statistic

__all__ = ["Statistic"]
