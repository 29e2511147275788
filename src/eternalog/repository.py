# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
EntryRepository — the canonical id → Entry table.

The repository is the single source of truth for whether an entry exists.  It
assigns ids, builds the immutable :class:`~eternalog.types.Entry`, and updates
the :class:`~eternalog.index.IndexManager` in the same call, so no reader can
observe an entry without its index records or the reverse.

Every precondition is checked before the first mutation.  A failed ``create``
leaves the table, the counter, and the indexes untouched.
"""

from __future__ import annotations

from typing import Iterator

from eternalog.errors import (
    EmptyContentError,
    EntryNotFoundError,
    IdSpaceExhaustedError,
    InvalidCategoryError,
)
from eternalog.index import IndexManager
from eternalog.types import U64_MAX, Entry, saturating_add


class EntryRepository:
    """
    Append-only entry table with id allocation.

    Parameters
    ----------
    index:
        Index manager kept in step with every insert.  A fresh one is
        created when omitted.
    max_entry_id:
        Saturation point of the id counter.  The counter stops here and the
        value itself is never issued.
    """

    def __init__(self, index: IndexManager | None = None, max_entry_id: int = U64_MAX) -> None:
        self._index: IndexManager = index if index is not None else IndexManager()
        self._entries: dict[int, Entry] = {}
        self._next_id: int = 1
        self._max_entry_id = max_entry_id

    @property
    def index(self) -> IndexManager:
        return self._index

    @property
    def next_id(self) -> int:
        """The id the next successful ``create`` will assign."""
        return self._next_id

    # ─── Validation ───────────────────────────────────────────────────────────

    @staticmethod
    def validate(content: str, category: int) -> None:
        """
        Check entry inputs without touching state.

        Empty content is reported before a zero category.
        """
        if not content:
            raise EmptyContentError()
        if category == 0:
            raise InvalidCategoryError(category)

    def ensure_capacity(self) -> None:
        """Raise ``IdSpaceExhaustedError`` if the counter can no longer advance."""
        if self._next_id >= self._max_entry_id:
            raise IdSpaceExhaustedError(self._next_id)

    # ─── Write ────────────────────────────────────────────────────────────────

    def create(self, content: str, category: int, author: str, clock: int) -> int:
        """
        Commit a new entry and its index records; return the assigned id.

        Raises
        ------
        EmptyContentError
            When ``content`` is empty.
        InvalidCategoryError
            When ``category`` is 0.
        IdSpaceExhaustedError
            When the id counter has reached its ceiling.
        """
        return self.commit(self.prepare(content, category, author, clock))

    def prepare(self, content: str, category: int, author: str, clock: int) -> Entry:
        """
        Validate inputs and build the entry the next ``commit`` will store.

        Nothing is mutated.  Out-of-range numeric fields surface here as a
        ``pydantic.ValidationError``.
        """
        self.validate(content, category)
        self.ensure_capacity()
        return Entry(
            id=self._next_id,
            content=content,
            category=category,
            author=author,
            created_at=clock,
        )

    def commit(self, entry: Entry) -> int:
        """
        Store a prepared entry, record it in the indexes, and advance the counter.

        ``entry`` must come from ``prepare`` with no commit in between.
        """
        if entry.id != self._next_id:
            raise ValueError(
                f"Prepared entry id {entry.id} is stale; next id is {self._next_id}."
            )
        self._entries[entry.id] = entry
        self._index.record(entry.id, entry.category, entry.author)
        self._next_id = saturating_add(self._next_id, 1, self._max_entry_id)
        return entry.id

    # ─── Read ─────────────────────────────────────────────────────────────────

    def get(self, entry_id: int) -> Entry:
        """Return the entry for ``entry_id`` or raise ``EntryNotFoundError``."""
        entry = self._entries.get(entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def count(self) -> int:
        """Return the number of committed entries (always ``next_id - 1``)."""
        return self._next_id - 1

    def iter_entries(self) -> Iterator[Entry]:
        """Yield every committed entry in ascending id order."""
        for entry_id in range(1, self._next_id):
            yield self._entries[entry_id]

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __len__(self) -> int:
        return self.count()
