"""Tests for the finance transaction use cases."""

from datetime import date

import pytest

from recordkit.application.record_transaction import RecordTransactionHandler
from recordkit.application.sample_data import SAMPLE_TRANSACTIONS
from recordkit.application.summarize_transactions import SummarizeTransactionsHandler
from recordkit.domain.exceptions import DuplicateEntityError, ValidationError
from recordkit.domain.model.finance import Transaction
from recordkit.domain.model.value_objects import Money
from recordkit.infrastructure.persistence.in_memory_repository import InMemoryRepository


def _ledger() -> InMemoryRepository[Transaction]:
    repo = InMemoryRepository[Transaction]()
    handler = RecordTransactionHandler(repo)
    for transaction_id, amount, category in SAMPLE_TRANSACTIONS:
        handler.handle(transaction_id, amount, category, on=date(2024, 5, 1))
    return repo


class TestRecordTransaction:

    def test_records(self):
        repo = InMemoryRepository[Transaction]()
        t = RecordTransactionHandler(repo).handle(1, "19.99", " Books ")
        assert t.amount == Money.of("19.99")
        assert t.category == "Books"
        assert repo.get_by_id(1) == t

    def test_duplicate_id_rejected(self):
        repo = _ledger()
        with pytest.raises(DuplicateEntityError):
            RecordTransactionHandler(repo).handle(1, "5.00", "Books")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError):
            RecordTransactionHandler(InMemoryRepository()).handle(1, "-5", "Books")


class TestSummarizeTransactions:

    def test_totals(self):
        summary = SummarizeTransactionsHandler(_ledger()).handle()
        assert summary.transaction_count == 4
        assert summary.total == "$467.75"
        assert [(c.category, c.count, c.total) for c in summary.categories] == [
            ("Entertainment", 1, "$200.00"),
            ("Groceries", 2, "$192.25"),
            ("Utilities", 1, "$75.50"),
        ]

    def test_empty_ledger(self):
        summary = SummarizeTransactionsHandler(InMemoryRepository()).handle()
        assert summary.categories == []
        assert summary.total == "$0.00"

    def test_ledger_in_another_currency(self):
        repo = InMemoryRepository[Transaction]()
        repo.add(Transaction(1, date(2024, 5, 1), Money.of("10.00", "EUR"), "Books"))
        repo.add(Transaction(2, date(2024, 5, 2), Money.of("5.25", "EUR"), "Books"))
        summary = SummarizeTransactionsHandler(repo).handle()
        assert summary.total == str(Money.of("15.25", "EUR"))
        assert [(c.category, c.total) for c in summary.categories] == [
            ("Books", str(Money.of("15.25", "EUR")))
        ]
