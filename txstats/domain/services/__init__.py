"""Domain services - Pure business logic with no external dependencies."""
from txstats.domain.services.money import round_money, average_money, CENTS, EXACT
from txstats.domain.services.time_window import (
    Clock,
    DEFAULT_WINDOW,
    utc_now,
    acceptance_rejection,
    in_statistics_window,
)
from txstats.domain.services.statistics_engine import StatisticsEngine

__all__ = [
    "round_money",
    "CENTS",
    "EXACT",
    "average_money",
    "Clock",
    "DEFAULT_WINDOW",
    "utc_now",
    "acceptance_rejection",
    "in_statistics_window",
    "StatisticsEngine",
]
