"""CSV export helpers for report tables."""

from __future__ import annotations

import csv
from dataclasses import fields, is_dataclass
from io import StringIO
from typing import Any, Mapping, Sequence


class ReportExportError(RuntimeError):
    """Raised when a report cannot be exported."""


# export name -> AnalysisResult attribute
REPORT_NAMES: Mapping[str, str] = {
    "rankings": "rankings",
    "physical": "physical",
    "colleges": "colleges",
    "teams": "teams",
    "peak-seasons": "peak_seasons",
}


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (tuple, list)):
        return ", ".join(str(item) for item in value)
    return value


def report_to_csv(rows: Sequence[Any]) -> str:
    """Convert a list of report dataclasses to CSV text with a header row.

    An empty report exports as an empty string since there is no row type to
    derive the header from.
    """

    if not rows:
        return ""
    first = rows[0]
    if not is_dataclass(first):
        raise ReportExportError(f"Cannot export rows of type {type(first).__name__}")
    header = [field.name for field in fields(first)]

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(header)
    for row in rows:
        writer.writerow([_cell(getattr(row, name)) for name in header])
    return buffer.getvalue()


def resolve_report(result: Any, name: str) -> Sequence[Any]:
    """Fetch a report table from an analysis result by its export name."""

    attribute = REPORT_NAMES.get(name)
    if attribute is None:
        raise ReportExportError(
            f"Unknown report {name!r}; expected one of {', '.join(REPORT_NAMES)}"
        )
    return getattr(result, attribute)


__all__ = [
    "REPORT_NAMES",
    "ReportExportError",
    "report_to_csv",
    "resolve_report",
]
