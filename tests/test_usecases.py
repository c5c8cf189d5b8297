from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from tests.helpers.clock import FROZEN_NOW, FrozenClock
from txstats.container import Container, get_container, init_container, reset_container
from txstats.domain.exceptions.domain_errors import TransactionInFutureError, TransactionTooOldError
from txstats.infrastructure.persistence.in_memory_transaction_store import InMemoryTransactionStore
from txstats.shared.config.settings import Settings


def test_record_transaction_returns_stored_transaction(container: Container) -> None:
    result = container.get_record_transaction_usecase().execute(Decimal("12.3343"), FROZEN_NOW)

    assert result.transaction.amount == Decimal("12.3343")
    assert result.stored == 1


def test_record_transaction_propagates_rejections(container: Container) -> None:
    usecase = container.get_record_transaction_usecase()

    with pytest.raises(TransactionTooOldError):
        usecase.execute(Decimal("1"), FROZEN_NOW - timedelta(seconds=61))
    with pytest.raises(TransactionInFutureError):
        usecase.execute(Decimal("1"), FROZEN_NOW + timedelta(minutes=2))

    assert len(container.transaction_store) == 0


def test_get_statistics_and_delete(container: Container) -> None:
    record = container.get_record_transaction_usecase()
    for amount in ("50.00", "100.50", "12.21"):
        record.execute(Decimal(amount), FROZEN_NOW)

    result = container.get_statistics_usecase().execute()

    assert result.statistic.count == 3
    assert result.dto.to_dict() == {
        "sum": "162.71",
        "avg": "54.24",
        "max": "100.50",
        "min": "12.21",
        "count": 3,
    }

    container.get_delete_transactions_usecase().execute()

    assert container.get_statistics_usecase().execute().dto.count == 0


def test_use_cases_share_the_container_store(container: Container) -> None:
    assert container.transaction_store is container.transaction_store
    container.get_record_transaction_usecase().execute(Decimal("1"), FROZEN_NOW)

    assert container.get_statistics_usecase().execute().statistic.count == 1


def test_window_setting_reaches_store_and_engine(clock: FrozenClock) -> None:
    container = Container(settings=Settings(window_seconds=10), clock=clock)

    with pytest.raises(TransactionTooOldError):
        container.get_record_transaction_usecase().execute(Decimal("1"), FROZEN_NOW - timedelta(seconds=11))

    assert container.statistics_engine.window == timedelta(seconds=10)


def test_override_and_reset(container: Container, clock: FrozenClock) -> None:
    replacement = InMemoryTransactionStore(clock=clock)
    container.override("transaction_store", replacement)

    assert container.transaction_store is replacement

    container.reset()
    assert container.transaction_store is not replacement

    with pytest.raises(ValueError):
        container.override("missing", object())


def test_global_container_lifecycle() -> None:
    try:
        initialised = init_container(Settings(window_seconds=30))
        assert get_container() is initialised
        assert initialised.window == timedelta(seconds=30)

        reset_container()
        assert get_container() is not initialised
    finally:
        reset_container()
