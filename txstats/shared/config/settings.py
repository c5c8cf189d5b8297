"""
txstats – Settings (Pydantic BaseSettings)
============================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque.

Todas las variables aceptan el prefijo TXSTATS_ (ej: TXSTATS_PORT=9000).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ─── Servicio ───────────────────────────────────────────────────────
    app_name: str = Field(default="txstats", description="Nombre del servicio")

    # ─── Ventana de estadísticas ────────────────────────────────────────
    window_seconds: int = Field(
        default=60,
        gt=0,
        description="Antigüedad máxima (seg) de una transacción aceptada y contada",
    )

    # ─── Server ─────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", description="Nivel del root logger")

    model_config = SettingsConfigDict(
        env_prefix="TXSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton global – se importa donde se necesite
settings = Settings()
