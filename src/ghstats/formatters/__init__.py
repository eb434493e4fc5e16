from __future__ import annotations

from collections.abc import Callable

from .json_fmt import format_report_json
from .table_fmt import format_table
from ..orchestrator import Report


def get_formatter(fmt: str) -> Callable[[Report], str]:
    if fmt == "table":
        return format_table
    if fmt == "json":
        return format_report_json
    raise ValueError(f"Unknown format: {fmt!r}")
