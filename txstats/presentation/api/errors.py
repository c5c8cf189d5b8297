"""
txstats – API Error Handlers
==============================
Traducción de excepciones a códigos HTTP.

  JSON mal formado, vacío o no-objeto    → 400
  JSON válido con campos inválidos       → 422
  TransactionTooOldError                 → 204 (sin cuerpo, no es error)
  TransactionInFutureError               → 422
"""

from __future__ import annotations

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from txstats.domain.exceptions.domain_errors import (
    TransactionInFutureError,
    TransactionTooOldError,
)
from txstats.shared.logging.logger import get_logger

logger = get_logger("api.errors")

# Errores de parseo del JSON, en cualquier posición
_MALFORMED_JSON_TYPES = {"json_invalid", "json_type"}

# Errores sobre el cuerpo entero: vacío o JSON que no es un objeto
_MALFORMED_BODY_TYPES = {"missing", "model_type", "model_attributes_type", "dict_type"}


def _is_malformed_body(err: dict) -> bool:
    if err.get("type") in _MALFORMED_JSON_TYPES:
        return True
    return err.get("type") in _MALFORMED_BODY_TYPES and tuple(err.get("loc", ())) == ("body",)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if any(_is_malformed_body(err) for err in errors):
        logger.info("Cuerpo JSON inválido | path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "BAD_REQUEST", "message": "Validation Error"},
        )

    logger.info("Transacción no parseable | path=%s errores=%d", request.url.path, len(errors))
    return JSONResponse(
        status_code=422,
        content={
            "error": "UNPROCESSABLE_ENTITY",
            "message": "transaction could not be parsed.",
            "detail": jsonable_encoder(errors),
        },
    )


async def too_old_handler(request: Request, exc: TransactionTooOldError) -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def in_future_handler(request: Request, exc: TransactionInFutureError) -> JSONResponse:
    return JSONResponse(status_code=422, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Registrar todos los handlers en la app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TransactionTooOldError, too_old_handler)
    app.add_exception_handler(TransactionInFutureError, in_future_handler)
