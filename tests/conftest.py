from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from tests.helpers.clock import FrozenClock
from txstats.container import Container
from txstats.domain.services.statistics_engine import StatisticsEngine
from txstats.infrastructure.persistence.in_memory_transaction_store import InMemoryTransactionStore
from txstats.main import create_app
from txstats.shared.config.settings import Settings


@pytest.fixture(scope="function")
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture(scope="function")
def store(clock: FrozenClock) -> InMemoryTransactionStore:
    return InMemoryTransactionStore(clock=clock)


@pytest.fixture(scope="function")
def engine(clock: FrozenClock) -> StatisticsEngine:
    return StatisticsEngine(clock=clock)


@pytest.fixture(scope="function")
def container(clock: FrozenClock) -> Container:
    return Container(settings=Settings(), clock=clock)


@pytest.fixture(scope="function")
def client(container: Container) -> Generator[TestClient, None, None]:
    with TestClient(create_app(container=container)) as test_client:
        yield test_client
