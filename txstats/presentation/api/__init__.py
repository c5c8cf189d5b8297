"""HTTP API."""
from txstats.presentation.api.routes import router
from txstats.presentation.api.errors import register_error_handlers

__all__ = ["router", "register_error_handlers"]
