# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Export helpers — serialise Entry lists to JSON and CSV.

- JSON: standard JSON array, human-readable with 2-space indentation.
- CSV:  RFC 4180 CSV with a header row; all five fields on every row.
"""

from __future__ import annotations

import csv
import io
import json
from typing import Iterable

from eternalog.types import Entry, ExportFormat

# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------


def export_json(entries: Iterable[Entry]) -> str:
    """Serialise entries to a JSON array string with 2-space indentation."""
    return json.dumps(
        [entry.model_dump(mode="json") for entry in entries],
        indent=2,
        ensure_ascii=False,
    )


# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------

CSV_COLUMNS: list[str] = ["id", "created_at", "author", "category", "content"]


def export_csv(entries: Iterable[Entry]) -> str:
    """Serialise entries to CSV; the first row holds the column headers."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for entry in entries:
        raw = entry.model_dump(mode="json")
        writer.writerow([str(raw[column]) for column in CSV_COLUMNS])
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Unified dispatcher
# ---------------------------------------------------------------------------


def export_entries(entries: Iterable[Entry], export_format: ExportFormat) -> str:
    """
    Route export to the appropriate format handler.

    Raises
    ------
    ValueError
        When ``export_format`` is not ``"json"`` or ``"csv"``.
    """
    if export_format == "json":
        return export_json(entries)
    if export_format == "csv":
        return export_csv(entries)
    raise ValueError(f"Unsupported export format: {export_format!r}")
