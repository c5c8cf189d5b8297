"""
txstats – Main Application Entry Point
========================================
API HTTP de transacciones con estadísticas sobre una ventana
deslizante (60 segundos por defecto, TXSTATS_WINDOW_SECONDS). Todo en memoria, sin persistencia.

ARQUITECTURA DE ARRANQUE:
  1. Configurar logging
  2. Crear el contenedor (store + engine + casos de uso)
  3. create_app(): FastAPI + handlers de error + rutas
  4. Lifespan: banner al arrancar, resumen al detener

FLUJO DE DATOS:
  POST /transactions → RecordTransactionUseCase → InMemoryTransactionStore
  GET  /statistics   → GetStatisticsUseCase → StatisticsEngine(snapshot, now)
  DELETE /transactions → DeleteTransactionsUseCase → store.delete_all()

  uvicorn txstats.main:app --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from txstats.container import Container, init_container
from txstats.presentation.api.errors import register_error_handlers
from txstats.presentation.api.routes import router
from txstats.shared.config.settings import Settings, settings
from txstats.shared.logging.logger import get_logger, setup_logging

# ─── Logging ────────────────────────────────────────────────────────────
setup_logging(settings)
logger = get_logger("main")


def create_app(
    app_settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Construye una app independiente.

    Cada app tiene su propio contenedor y por lo tanto su propio
    store: dos apps nunca comparten transacciones.
    """
    app_settings = app_settings or (container.settings if container else Settings())
    container = container or Container(settings=app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 60)
        logger.info("  %s - estadísticas de transacciones", app_settings.app_name)
        logger.info("  Ventana: %ds", app_settings.window_seconds)
        logger.info("  Almacenamiento: memoria (sin persistencia)")
        logger.info("=" * 60)

        yield  # ← La app está corriendo aquí

        logger.info(
            "Shutdown | transacciones en memoria=%d",
            len(app.state.container.transaction_store),
        )

    app = FastAPI(
        title=app_settings.app_name,
        description=f"Transacciones y estadísticas sobre los últimos {app_settings.window_seconds} segundos",
        version="1.0.0",
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    register_error_handlers(app)
    app.include_router(router)
    return app


# ─── App por defecto (uvicorn txstats.main:app) ─────────────────────────
container = init_container(settings)
app = create_app(settings, container)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
