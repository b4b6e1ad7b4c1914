"""CLI commands for finance transactions."""

from __future__ import annotations

import click

from recordkit.application.record_transaction import RecordTransactionHandler
from recordkit.application.sample_data import SAMPLE_TRANSACTIONS
from recordkit.application.summarize_transactions import SummarizeTransactionsHandler
from recordkit.domain.exceptions import DomainException
from recordkit.infrastructure.bootstrap import transaction_repository


@click.command("demo")
def finance_demo() -> None:
    """Record the sample transactions and show totals per category."""
    repo = transaction_repository()
    handler = RecordTransactionHandler(transaction_repo=repo)

    try:
        for transaction_id, amount, category in SAMPLE_TRANSACTIONS:
            click.echo(f"Recorded {handler.handle(transaction_id, amount, category)}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    summary = SummarizeTransactionsHandler(transaction_repo=repo).handle()
    click.echo()
    click.echo(f"{'Category':<20} {'Count':>5} {'Total':>12}")
    click.echo("-" * 39)
    for line in summary.categories:
        click.echo(f"{line.category:<20} {line.count:>5} {line.total:>12}")
    click.echo("-" * 39)
    click.echo(f"{'All':<20} {summary.transaction_count:>5} {summary.total:>12}")
