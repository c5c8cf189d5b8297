"""
txstats – Domain Service: Time Window
=======================================
Reloj UTC y los dos predicados de ventana.

Hay DOS convenciones de borde distintas y ambas son observables:

  ACEPTACIÓN (al insertar):
    rechazo TOO_OLD    si  t <  now - ventana
    rechazo TOO_FUTURE si  t >  now
    → t == now - ventana se acepta; t == now se acepta.

  ESTADÍSTICAS (al consultar):
    se cuenta si  |now - t| < ventana   (estricto, simétrico)
    → t == now - ventana NO se cuenta.

No unificar: una transacción aceptada justo en el borde deja de
contarse en la consulta inmediata.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from txstats.domain.exceptions.domain_errors import RejectionKind

Clock = Callable[[], datetime]

DEFAULT_WINDOW = timedelta(seconds=60)


def utc_now() -> datetime:
    """Instante actual en UTC (con zona horaria)."""
    return datetime.now(timezone.utc)


def acceptance_rejection(
    timestamp: datetime,
    now: datetime,
    window: timedelta = DEFAULT_WINDOW,
) -> RejectionKind | None:
    """Motivo de rechazo al insertar, o None si se acepta."""
    if timestamp < now - window:
        return RejectionKind.TOO_OLD
    if timestamp > now:
        return RejectionKind.TOO_FUTURE
    return None


def in_statistics_window(
    timestamp: datetime,
    now: datetime,
    window: timedelta = DEFAULT_WINDOW,
) -> bool:
    """¿Cuenta esta transacción para las estadísticas consultadas en `now`?"""
    return abs(now - timestamp) < window
