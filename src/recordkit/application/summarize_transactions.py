"""Application service: Summarize Transactions use case (query)."""

from __future__ import annotations

from recordkit.application.dto import CategoryTotalDTO, LedgerSummaryDTO
from recordkit.domain.model.finance import Transaction
from recordkit.domain.model.value_objects import Money
from recordkit.domain.repository.repository import Repository


class SummarizeTransactionsHandler:

    def __init__(self, transaction_repo: Repository[Transaction]) -> None:
        self._transaction_repo = transaction_repo

    def handle(self) -> LedgerSummaryDTO:
        """Totals per category (alphabetical) and for the whole ledger."""
        transactions = self._transaction_repo.get_all()

        by_category: dict[str, list[Money]] = {}
        for t in transactions:
            by_category.setdefault(t.category, []).append(t.amount)

        return LedgerSummaryDTO(
            transaction_count=len(transactions),
            categories=[
                CategoryTotalDTO(
                    category=category,
                    count=len(amounts),
                    total=str(Money.total(amounts)),
                )
                for category, amounts in sorted(by_category.items())
            ],
            total=str(Money.total(t.amount for t in transactions)),
        )
