"""
Rate card CSV export.

Builds the CSV text for one job's entries or for every stored entry.
The header row is unquoted; every data field is quoted and missing values
render as empty strings. Rows are joined with a bare newline.

Dependencies: csv, io
System role: Export formatting for stored rate card entries
"""

import csv
import io
from collections.abc import Iterable
from typing import Any

JOB_EXPORT_HEADERS = [
    "Media Type",
    "Media Format",
    "Placement Name",
    "Dimensions",
    "Media Cost (4 weeks)",
    "Production Cost",
    "Total Cost",
    "Notes",
    "Confidence",
]

ALL_EXPORT_HEADERS = [*JOB_EXPORT_HEADERS, "Source File"]

_ENTRY_ATTRIBUTES = [
    "media_type",
    "media_format",
    "placement_name",
    "dimensions",
    "cost_media_4weeks",
    "production_cost",
    "total_cost",
    "notes",
    "confidence",
]


def _field(entry: Any, attribute: str) -> str:
    value = getattr(entry, attribute, None)
    if value is None:
        return ""
    # Enum-valued attributes export their value
    return str(getattr(value, "value", value))


def _render(headers: list[str], rows: Iterable[list[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in rows:
        writer.writerow(row)
    body = buffer.getvalue().rstrip("\n")
    header = ",".join(headers)
    return f"{header}\n{body}" if body else header


def build_job_csv(entries: Iterable[Any]) -> str:
    """
    Build the CSV export for a single job's entries.

    Args:
        entries: Rate card entries (ORM rows or any object with entry attributes)

    Returns:
        str: CSV text without a source file column
    """
    rows = ([_field(entry, attr) for attr in _ENTRY_ATTRIBUTES] for entry in entries)
    return _render(JOB_EXPORT_HEADERS, rows)


def build_all_entries_csv(entries: Iterable[Any]) -> str:
    """
    Build the CSV export across all jobs.

    Args:
        entries: Rate card entries from every job

    Returns:
        str: CSV text including the source file column
    """
    rows = (
        [_field(entry, attr) for attr in _ENTRY_ATTRIBUTES]
        + [_field(entry, "original_file_name")]
        for entry in entries
    )
    return _render(ALL_EXPORT_HEADERS, rows)
