from __future__ import annotations

from typing import List

from .scanner import ScanResult, ScanRow
from .stack import format_stack

COLUMN_WIDTH = 40


def format_header() -> List[str]:
    rule = "-" * COLUMN_WIDTH
    return [
        f"line  {'source':<{COLUMN_WIDTH}}  {'output':<{COLUMN_WIDTH}}  stack",
        f"----  {rule}  {rule}  {'-' * 19}",
    ]


def format_row(row: ScanRow) -> str:
    return f"{row.lineno:4d}  {row.source:<{COLUMN_WIDTH}}  {row.output:<{COLUMN_WIDTH}}  {format_stack(row.stack)}"


def format_table(result: ScanResult) -> str:
    lines = format_header()
    lines.extend(format_row(row) for row in result.rows)
    return "\n".join(lines)


__all__ = ["format_header", "format_row", "format_table"]
