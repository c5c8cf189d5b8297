"""
txstats – Application DTO: Statistic
======================================
Data Transfer Object de estadísticas para la capa HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from txstats.domain.value_objects.statistic import Statistic


@dataclass
class StatisticDTO:
    """DTO de respuesta: decimales ya formateados como string."""

    sum: str
    avg: str
    max: str
    min: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sum": self.sum,
            "avg": self.avg,
            "max": self.max,
            "min": self.min,
            "count": self.count,
        }

    @classmethod
    def from_statistic(cls, statistic: Statistic) -> "StatisticDTO":
        return cls(**statistic.to_dict())
