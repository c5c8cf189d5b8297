"""Application use cases."""
from txstats.application.use_cases.record_transaction_usecase import (
    RecordTransactionUseCase,
    RecordTransactionResult,
)
from txstats.application.use_cases.delete_transactions_usecase import DeleteTransactionsUseCase
from txstats.application.use_cases.get_statistics_usecase import (
    GetStatisticsUseCase,
    StatisticResult,
)

__all__ = [
    "RecordTransactionUseCase",
    "RecordTransactionResult",
    "DeleteTransactionsUseCase",
    "GetStatisticsUseCase",
    "StatisticResult",
]
