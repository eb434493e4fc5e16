from __future__ import annotations

import dataclasses
import json
from collections.abc import Sequence
from typing import Any

from ..models import DetailedStatRow, SummaryRow
from ..orchestrator import Report


def _rows(rows: Sequence[DetailedStatRow] | Sequence[SummaryRow]) -> list[dict[str, Any]]:
    return [dataclasses.asdict(row) for row in rows]


def format_json(rows: Sequence[DetailedStatRow] | Sequence[SummaryRow]) -> str:
    return json.dumps(_rows(rows), indent=2)


def format_report_json(report: Report) -> str:
    return json.dumps({"detailed": _rows(report.detailed), "summary": _rows(report.summary)}, indent=2)
