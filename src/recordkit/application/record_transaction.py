"""Application service: Record Transaction use case."""

from __future__ import annotations

from datetime import date

from recordkit.domain.exceptions import DuplicateEntityError
from recordkit.domain.model.finance import Transaction
from recordkit.domain.model.value_objects import Money
from recordkit.domain.repository.repository import Repository


class RecordTransactionHandler:

    def __init__(self, transaction_repo: Repository[Transaction]) -> None:
        self._transaction_repo = transaction_repo

    def handle(
        self,
        transaction_id: int,
        amount: str,
        category: str,
        on: date | None = None,
    ) -> Transaction:
        if self._transaction_repo.find(lambda t: t.id == transaction_id) is not None:
            raise DuplicateEntityError(
                f"Transaction with ID {transaction_id} already exists"
            )

        transaction = Transaction(
            id=transaction_id,
            date=on or date.today(),
            amount=Money.of(amount),
            category=category.strip(),
        )
        self._transaction_repo.add(transaction)
        return transaction
