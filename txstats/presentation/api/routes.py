"""
txstats – API Routes (FastAPI)
================================
Endpoints REST del servicio.

Endpoints disponibles:
  POST   /transactions  → registrar transacción (201 / 204 / 422)
  DELETE /transactions  → borrar todas (204)
  GET    /statistics    → métricas de los últimos 60 s (200)
  GET    /health        → health check
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from txstats.container import Container
from txstats.presentation.api.schemas import (
    HealthResponse,
    StatisticResponse,
    TransactionRequest,
)
from txstats.shared.logging.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()


def get_app_container(request: Request) -> Container:
    """Contenedor de la app que atiende el request (ver create_app)."""
    return request.app.state.container


# ─── Transacciones ─────────────────────────────────────────────────────

@router.post("/transactions", status_code=status.HTTP_201_CREATED)
async def add_transaction(
    body: TransactionRequest,
    container: Container = Depends(get_app_container),
) -> Response:
    """
    Registrar una transacción.
    Los rechazos por ventana los traducen los handlers de errors.py.
    """
    usecase = container.get_record_transaction_usecase()
    usecase.execute(amount=body.amount, timestamp=body.timestamp)
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/transactions", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transactions(container: Container = Depends(get_app_container)) -> Response:
    """Borrar todas las transacciones."""
    container.get_delete_transactions_usecase().execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Estadísticas ──────────────────────────────────────────────────────

@router.get("/statistics", response_model=StatisticResponse)
async def get_statistics(container: Container = Depends(get_app_container)) -> dict:
    """Estadísticas de las transacciones de la ventana activa."""
    result = container.get_statistics_usecase().execute()
    return result.dto.to_dict()


# ─── Health ────────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse)
async def health_check(container: Container = Depends(get_app_container)) -> dict:
    """Health check para monitoreo."""
    return {
        "status": "ok",
        "service": container.settings.app_name,
        "transactions": len(container.transaction_store),
    }
