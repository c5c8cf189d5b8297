"""Application DTOs - Data Transfer Objects for use cases."""
from txstats.application.dto.statistic_dto import StatisticDTO

__all__ = ["StatisticDTO"]
