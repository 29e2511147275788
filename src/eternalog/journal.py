# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Append-only NDJSON journal for store notifications.

Each notification is written as one JSON object per line.  The file is only
ever opened in append mode; nothing here truncates or rewrites it.  The
journal is an archive for off-process audit and never feeds state back into
a store.

Reading always parses the whole file so the view stays consistent with lines
written by other processes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

import aiofiles
from pydantic import TypeAdapter, ValidationError

from eternalog.events import Event, EventLog
from eternalog.types import Notification

logger = logging.getLogger("eternalog.journal")

_NOTIFICATION_ADAPTER: TypeAdapter[Notification] = TypeAdapter(Notification)


class EventJournal:
    """
    Persistent, append-only notification journal.

    Parameters
    ----------
    file_path:
        Path to the NDJSON file.  The file is created on first write.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._file_path = Path(file_path)
        self._synced = 0

    @property
    def file_path(self) -> Path:
        return self._file_path

    async def append(self, event: Event) -> None:
        await self.append_many([event])

    async def append_many(self, events: Iterable[Event]) -> int:
        """Append ``events`` in order; return how many lines were written."""
        lines = [json.dumps(event.model_dump(mode="json")) + "\n" for event in events]
        if not lines:
            return 0
        async with aiofiles.open(self._file_path, mode="a", encoding="utf-8") as file_handle:
            await file_handle.write("".join(lines))
        return len(lines)

    async def sync(self, event_log: EventLog) -> int:
        """
        Write the notifications in ``event_log`` this journal has not seen yet.

        Progress is tracked per journal instance, so one journal should follow
        one event log.  Returns the number of lines written.
        """
        pending = event_log.all()[self._synced :]
        written = await self.append_many(pending)
        self._synced += written
        if written:
            logger.debug(
                "journal_synced",
                extra={"path": str(self._file_path), "written": written},
            )
        return written

    async def read_all(self) -> list[Event]:
        if not self._file_path.exists():
            return []

        events: list[Event] = []
        # Undecodable bytes become U+FFFD so the line fails validation and is skipped.
        async with aiofiles.open(
            self._file_path, mode="r", encoding="utf-8", errors="replace"
        ) as file_handle:
            line_number = 0
            async for line in file_handle:
                line_number += 1
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    events.append(_NOTIFICATION_ADAPTER.validate_json(stripped))
                except ValidationError:
                    logger.warning(
                        "journal_line_skipped",
                        extra={"path": str(self._file_path), "line": line_number},
                    )
        return events

    async def count(self) -> int:
        return len(await self.read_all())
