from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .formatters.json_fmt import format_json
from .models import DetailedStatRow

_stderr = Console(stderr=True)


def write_results(path: Path, rows: Sequence[DetailedStatRow]) -> bool:
    """Save detailed rows as JSON. A failed write is reported, never raised."""
    _stderr.print(f"Saving results to {escape(str(path))}…")
    try:
        path.write_text(format_json(rows), encoding="utf-8")
    except OSError as exc:
        _stderr.print(f"[red]Error:[/red] could not write {escape(str(path))}: {escape(str(exc))}")
        return False
    _stderr.print(f"[green]Wrote {len(rows)} rows to {escape(str(path))}[/green]")
    return True
