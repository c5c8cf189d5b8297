"""
txstats – API Schemas (Pydantic)
==================================
Schemas de validación para request/response de la API REST.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# yyyy-MM-ddTHH:mm:ss con fracción y zona opcionales
_ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:?\d{2})?$")

# |amount| < 10^64
MAX_AMOUNT_INTEGER_DIGITS = 64


class TransactionRequest(BaseModel):
    """Body de POST /transactions. Campos desconocidos → 422."""

    model_config = ConfigDict(extra="forbid")

    amount: Decimal = Field(allow_inf_nan=False, description="Monto, ej: \"12.3343\"")
    timestamp: datetime = Field(description="ISO 8601, ej: \"2018-07-17T09:59:51.312Z\"")

    @field_validator("timestamp", mode="before")
    @classmethod
    def timestamp_must_be_iso_string(cls, value: Any) -> Any:
        # Sin epochs numéricos ni fechas sin hora
        if not isinstance(value, str) or not _ISO_DATETIME.match(value):
            raise ValueError("timestamp must be an ISO 8601 date-time string")
        return value

    @field_validator("amount")
    @classmethod
    def amount_must_be_bounded(cls, value: Decimal) -> Decimal:
        if value and value.adjusted() >= MAX_AMOUNT_INTEGER_DIGITS:
            raise ValueError(f"amount must be below 1e{MAX_AMOUNT_INTEGER_DIGITS}")
        return value


class StatisticResponse(BaseModel):
    sum: str
    avg: str
    max: str
    min: str
    count: int


class HealthResponse(BaseModel):
    status: str
    service: str
    transactions: int
