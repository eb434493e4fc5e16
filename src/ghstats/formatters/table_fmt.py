from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from ..models import DetailedStatRow, SummaryRow
from ..orchestrator import Report

_TABLE_WIDTH = 120


def detailed_table(rows: Sequence[DetailedStatRow]) -> Table:
    table = Table(title="Detailed statistics")
    table.add_column("owner")
    table.add_column("repo")
    table.add_column("author")
    for column in ("created", "commented", "approved"):
        table.add_column(column, justify="right")
    for row in rows:
        table.add_row(row.owner, row.repo, row.author, str(row.created), str(row.commented), str(row.approved))
    return table


def summary_table(rows: Sequence[SummaryRow]) -> Table:
    table = Table(title="Summary")
    table.add_column("author")
    for column in ("pull_requests", "repos", "commented", "approved", "repos_reviewed"):
        table.add_column(column, justify="right")
    for row in rows:
        table.add_row(
            row.author,
            str(row.pull_requests),
            str(row.repos),
            str(row.commented),
            str(row.approved),
            str(row.repos_reviewed),
        )
    return table


def format_table(report: Report) -> str:
    console = Console(width=_TABLE_WIDTH, no_color=True, highlight=False)
    with console.capture() as capture:
        console.print(detailed_table(report.detailed))
        console.print(summary_table(report.summary))
    return capture.get()
