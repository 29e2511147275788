# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the NDJSON EventJournal and the entry export helpers."""

from __future__ import annotations

import asyncio
import csv
import io
import json
from pathlib import Path

import pytest

from helpers import ALICE, BOB, OWNER, paying
from eternalog.contract import Eternalog
from eternalog.export_formats import CSV_COLUMNS, export_csv, export_entries, export_json
from eternalog.journal import EventJournal
from eternalog.types import CallContext, FeeBurned, LogStored, StorageFeeUpdated


# ---------------------------------------------------------------------------
# TestEventJournal
# ---------------------------------------------------------------------------


class TestEventJournal:
    def test_read_missing_file_returns_empty(self, tmp_path: Path) -> None:
        journal = EventJournal(tmp_path / "missing.ndjson")
        assert asyncio.run(journal.read_all()) == []

    def test_append_and_read_back(self, tmp_path: Path) -> None:
        journal = EventJournal(tmp_path / "events.ndjson")
        events = [
            FeeBurned(amount=10, burner=ALICE),
            LogStored(log_id=1, author=ALICE, log_type=3, data="disk error"),
            StorageFeeUpdated(old_fee=10, new_fee=20, updated_by=OWNER),
        ]

        async def scenario() -> list[object]:
            await journal.append(events[0])
            await journal.append_many(events[1:])
            return await journal.read_all()

        assert asyncio.run(scenario()) == events

    def test_one_json_object_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "events.ndjson"
        journal = EventJournal(path)
        asyncio.run(journal.append(FeeBurned(amount=10, burner=ALICE)))
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {"event": "FeeBurned", "amount": 10, "burner": ALICE}

    def test_sync_writes_only_new_events(self, tmp_path: Path, log: Eternalog) -> None:
        journal = EventJournal(tmp_path / "events.ndjson")
        log.store(paying(ALICE), "login ok", 1)
        assert asyncio.run(journal.sync(log.events)) == 2
        assert asyncio.run(journal.sync(log.events)) == 0

        log.update_fee(CallContext(caller=OWNER), 15)
        assert asyncio.run(journal.sync(log.events)) == 1
        assert asyncio.run(journal.count()) == 3
        assert asyncio.run(journal.read_all()) == log.events.all()

    def test_malformed_lines_are_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "events.ndjson"
        journal = EventJournal(path)
        asyncio.run(journal.append(FeeBurned(amount=1, burner=BOB)))
        with path.open("a", encoding="utf-8") as handle:
            handle.write("{not json\n\n")
            handle.write('{"event": "Unknown"}\n')
        asyncio.run(journal.append(FeeBurned(amount=2, burner=BOB)))
        events = asyncio.run(journal.read_all())
        assert [event.amount for event in events] == [1, 2]

    def test_undecodable_lines_are_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "events.ndjson"
        journal = EventJournal(path)
        asyncio.run(journal.append(FeeBurned(amount=1, burner=BOB)))
        with path.open("ab") as handle:
            handle.write(b"\xff\xfe garbage\n")
        asyncio.run(journal.append(FeeBurned(amount=2, burner=BOB)))
        events = asyncio.run(journal.read_all())
        assert [event.amount for event in events] == [1, 2]
        assert asyncio.run(journal.count()) == 2

    def test_append_many_with_nothing_creates_no_file(self, tmp_path: Path) -> None:
        path = tmp_path / "events.ndjson"
        assert asyncio.run(EventJournal(path).append_many([])) == 0
        assert not path.exists()


# ---------------------------------------------------------------------------
# TestExportFormats
# ---------------------------------------------------------------------------


class TestExportFormats:
    def test_export_json(self, populated_log: Eternalog) -> None:
        entries = populated_log.query.entries(populated_log.by_author(BOB))
        payload = json.loads(export_json(entries))
        assert payload == [
            {
                "id": 2,
                "content": "disk error on sda",
                "category": 2,
                "author": BOB,
                "created_at": 6,
            }
        ]

    def test_export_csv_has_header_and_rows(self, populated_log: Eternalog) -> None:
        entries = list(populated_log.repository.iter_entries())
        rows = list(csv.reader(io.StringIO(export_csv(entries))))
        assert rows[0] == CSV_COLUMNS
        assert len(rows) == 5
        assert rows[1] == ["1", "5", ALICE, "1", "login ok"]

    def test_export_csv_quotes_commas(self, log: Eternalog) -> None:
        log.store(paying(ALICE), "a, b, c", 1)
        rows = list(csv.reader(io.StringIO(export_csv([log.get(1)]))))
        assert rows[1][-1] == "a, b, c"

    def test_export_entries_dispatch(self, populated_log: Eternalog) -> None:
        entries = [populated_log.get(1)]
        assert export_entries(entries, "json") == export_json(entries)
        assert export_entries(entries, "csv") == export_csv(entries)

    def test_unsupported_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported export format"):
            export_entries([], "xml")  # type: ignore[arg-type]
