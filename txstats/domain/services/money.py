"""
txstats – Domain Service: Money
=================================
Aritmética monetaria en base 10.

Todos los montos y agregados son Decimal; el único paso por float
es el promedio (ver StatisticsEngine). El redondeo de salida es
HALF_UP a 2 decimales, que en decimal equivale a redondear la mitad
alejándose de cero:

    0.005  → 0.01
   -0.005  → -0.01
    64.004999… → 64.00

PRECISIÓN:
  El contexto por defecto de decimal tiene 28 dígitos: una suma de
  montos grandes se redondearía en silencio y quantize() fallaría con
  InvalidOperation. Sumas y redondeos corren dentro de EXACT, que no
  pierde dígitos en sumas, comparaciones ni quantize. EXACT no sirve
  para dividir (un cociente periódico no termina nunca).
"""

from __future__ import annotations

import math
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    localcontext,
)

# Escala de salida: 2 decimales
CENTS = Decimal("0.01")

EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)

# Dígitos de guarda por debajo de los centavos al dividir en Decimal
_GUARD_DIGITS = 6


def round_money(value: Decimal | float | int) -> Decimal:
    """Redondea a 2 decimales con HALF_UP, sin límite de dígitos enteros."""
    if not isinstance(value, Decimal):
        # float → Decimal exacto del valor binario, igual que new BigDecimal(double)
        value = Decimal(value)
    with localcontext(EXACT):
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def average_money(total: Decimal, count: int) -> Decimal:
    """
    total / count redondeado a centavos.

    Se divide en float mientras el resultado sea finito. Si float(total)
    desborda (|total| > ~1.8e308) se divide en Decimal truncando con
    dígitos de guarda, para que el HALF_UP final no redondee dos veces.
    """
    approx = float(total) / count
    if math.isfinite(approx):
        return round_money(approx)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, total.adjusted() + 3 + _GUARD_DIGITS)
        ctx.Emax = MAX_EMAX
        ctx.rounding = ROUND_DOWN
        quotient = total / count
    return round_money(quotient)
