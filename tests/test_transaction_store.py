from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from tests.helpers.clock import FROZEN_NOW, FrozenClock
from txstats.domain.entities.transaction import Transaction
from txstats.domain.exceptions.domain_errors import (
    RejectionKind,
    TimestampRejectedError,
    TransactionInFutureError,
    TransactionTooOldError,
)
from txstats.domain.services.statistics_engine import StatisticsEngine
from txstats.infrastructure.persistence.in_memory_transaction_store import InMemoryTransactionStore


def _tx(amount: str = "123.21", seconds_ago: float = 0) -> Transaction:
    return Transaction(amount=Decimal(amount), timestamp=FROZEN_NOW - timedelta(seconds=seconds_ago))


def test_add_first_transaction(store: InMemoryTransactionStore) -> None:
    transaction = _tx()

    store.add_transaction(transaction)

    assert store.snapshot() == (transaction,)
    assert len(store) == 1


def test_add_four_transactions_preserves_insertion_order(store: InMemoryTransactionStore) -> None:
    transactions = [_tx(str(i), i) for i in range(4)]

    for transaction in transactions:
        store.add_transaction(transaction)

    assert store.snapshot() == tuple(transactions)


def test_transaction_older_than_60_seconds_is_rejected(store: InMemoryTransactionStore) -> None:
    with pytest.raises(TransactionTooOldError) as excinfo:
        store.add_transaction(_tx(seconds_ago=61))

    assert excinfo.value.kind is RejectionKind.TOO_OLD
    assert len(store) == 0


def test_transaction_in_the_future_is_rejected(store: InMemoryTransactionStore) -> None:
    with pytest.raises(TransactionInFutureError) as excinfo:
        store.add_transaction(_tx(seconds_ago=-120))

    assert excinfo.value.kind is RejectionKind.TOO_FUTURE
    assert excinfo.value.to_dict() == {"error": "TOO_FUTURE", "message": "transaction has future date."}
    assert len(store) == 0


def test_one_microsecond_ahead_is_in_the_future(store: InMemoryTransactionStore) -> None:
    ahead = Transaction(amount=Decimal("1"), timestamp=FROZEN_NOW + timedelta(microseconds=1))

    with pytest.raises(TimestampRejectedError):
        store.add_transaction(ahead)


def test_acceptance_edges(store: InMemoryTransactionStore) -> None:
    store.add_transaction(_tx(seconds_ago=60))
    store.add_transaction(_tx(seconds_ago=0))

    assert len(store) == 2


def test_rejection_does_not_affect_later_calls(store: InMemoryTransactionStore) -> None:
    with pytest.raises(TransactionTooOldError):
        store.add_transaction(_tx(seconds_ago=300))

    store.add_transaction(_tx())

    assert len(store) == 1


def test_delete_all_is_idempotent(store: InMemoryTransactionStore) -> None:
    for _ in range(4):
        store.add_transaction(_tx())

    store.delete_all()
    store.delete_all()

    assert store.snapshot() == ()


def test_snapshot_is_a_detached_copy(store: InMemoryTransactionStore) -> None:
    store.add_transaction(_tx("1.00"))
    snapshot = store.snapshot()

    store.add_transaction(_tx("2.00"))
    store.delete_all()

    assert isinstance(snapshot, tuple)
    assert [t.amount for t in snapshot] == [Decimal("1.00")]


def test_load_bypasses_acceptance_window(store: InMemoryTransactionStore) -> None:
    store.load([_tx("50.00", 80), _tx("10.00", -80)])

    assert len(store) == 2


def test_stored_transactions_age_out_of_statistics_without_pruning(
    store: InMemoryTransactionStore, engine: StatisticsEngine, clock: FrozenClock
) -> None:
    store.add_transaction(_tx("99.99"))
    clock.advance(61)

    assert engine.current(store).count == 0
    assert len(store) == 1


def test_delete_all_then_statistics_are_zero(
    store: InMemoryTransactionStore, engine: StatisticsEngine
) -> None:
    store.add_transaction(_tx("10.00"))
    store.load([_tx("5.00", 90)])

    store.delete_all()

    assert engine.current(store).to_dict() == {
        "sum": "0.00", "avg": "0.00", "max": "0.00", "min": "0.00", "count": 0,
    }


def test_concurrent_writers_and_readers() -> None:
    store = InMemoryTransactionStore()
    engine = StatisticsEngine()
    writers, per_writer = 8, 250
    observed_counts: list[int] = []
    torn: list = []
    start = threading.Barrier(writers + 1)

    def write() -> None:
        start.wait()
        for _ in range(per_writer):
            store.add_transaction(Transaction(Decimal("1.00"), datetime.now(timezone.utc)))

    def read() -> None:
        start.wait()
        for _ in range(50):
            snapshot = store.snapshot()
            observed_counts.append(len(snapshot))
            statistic = engine.compute(snapshot, datetime.now(timezone.utc))
            if statistic.sum != Decimal(statistic.count):
                torn.append(statistic)

    threads = [threading.Thread(target=write) for _ in range(writers)]
    threads.append(threading.Thread(target=read))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == writers * per_writer
    assert observed_counts == sorted(observed_counts)
    assert torn == []
    statistic = engine.current(store)
    assert statistic.count == writers * per_writer
    assert statistic.max == Decimal("1.00")


def test_too_old_message_uses_configured_window(clock: FrozenClock) -> None:
    store = InMemoryTransactionStore(window=timedelta(seconds=10), clock=clock)

    with pytest.raises(TransactionTooOldError) as excinfo:
        store.add_transaction(_tx(seconds_ago=11))

    assert excinfo.value.message == "transaction older than 10 seconds."
