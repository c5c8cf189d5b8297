"""
txstats - Statistic (Value Object)
=====================================
Foto instantánea de las métricas de la ventana activa.

PRINCIPIO DE DISENO:
  Es un VALUE OBJECT puro: no tiene identidad, no muta, no tiene
  logica de negocio. Solo transporta datos ya calculados y redondeados
  por el StatisticsEngine. Nunca se almacena: se recalcula en cada
  consulta.

FORMATO:
  sum, avg, max, min → Decimal con exactamente 2 decimales (HALF_UP).
  count              → int exacto, nunca redondeado.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

# Cero con la escala de salida (2 decimales)
ZERO = Decimal("0.00")


@dataclass(frozen=True, slots=True)
class Statistic:
    """
    Metricas agregadas de las transacciones dentro de la ventana.

    Atributos:
    ----------
    sum : Decimal
        Suma de los montos.

    avg : Decimal
        sum / count.

    max : Decimal
        Monto mas alto.

    min : Decimal
        Monto mas bajo.

    count : int
        N de transacciones dentro de la ventana.
    """

    sum: Decimal = ZERO
    avg: Decimal = ZERO
    max: Decimal = ZERO
    min: Decimal = ZERO
    count: int = 0

    @classmethod
    def empty(cls) -> "Statistic":
        """Estadistica de una ventana sin transacciones (todo 0.00)."""
        return cls()

    def to_dict(self) -> dict:
        """Serializacion para API REST: decimales como string."""
        return {
            "sum": str(self.sum),
            "avg": str(self.avg),
            "max": str(self.max),
            "min": str(self.min),
            "count": self.count,
        }
