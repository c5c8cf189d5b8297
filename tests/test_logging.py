from __future__ import annotations

import logging
from typing import Generator

import pytest

from txstats.shared.config.settings import Settings
from txstats.shared.logging.logger import get_logger, resolve_level, setup_logging


@pytest.fixture
def _restore_root_level() -> Generator[None, None, None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_level_comes_from_settings() -> None:
    assert resolve_level(Settings(log_level="warning")) == logging.WARNING
    assert resolve_level(Settings(log_level="nonsense")) == logging.INFO


def test_debug_flag_forces_debug_level() -> None:
    assert resolve_level(Settings(log_level="ERROR", debug=True)) == logging.DEBUG


@pytest.mark.usefixtures("_restore_root_level")
def test_setup_logging_applies_level_and_routes_uvicorn_to_root() -> None:
    setup_logging(Settings(log_level="ERROR"))

    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("uvicorn.error").propagate is True
    assert logging.getLogger("uvicorn.error").handlers == []
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_get_logger_is_namespaced() -> None:
    assert get_logger("api.routes").name == "txstats.api.routes"
