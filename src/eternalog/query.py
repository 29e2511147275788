# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Read-only query facade over an EntryRepository and its indexes.

Every method is total: unknown keys and empty results yield ``[]``, never an
error.  Callers can use QueryEngine on its own when they only need read access.
"""

from __future__ import annotations

from typing import Iterable

from eternalog.repository import EntryRepository
from eternalog.types import Entry


class QueryEngine:
    """
    Exact, combined, and substring lookups.

    Parameters
    ----------
    repository:
        The entry table to query.  Its ``index`` serves the keyed lookups.
    """

    def __init__(self, repository: EntryRepository) -> None:
        self._repository = repository

    def search_by_content(self, term: str) -> list[int]:
        """
        Return ids of entries whose content contains ``term``, ascending.

        Matching is a case-sensitive substring test and an empty ``term``
        matches every entry.  There is no inverted index: the cost is a scan
        over every committed entry, O(entries) per call.
        """
        return [
            entry.id
            for entry in self._repository.iter_entries()
            if term in entry.content
        ]

    def by_category(self, category: int) -> list[int]:
        return self._repository.index.by_category(category)

    def by_author(self, author: str) -> list[int]:
        return self._repository.index.by_author(author)

    def by_category_and_author(self, category: int, author: str) -> list[int]:
        """Return ids matching both keys, in ascending order."""
        return self._repository.index.by_category_and_author(category, author)

    def entries(self, entry_ids: Iterable[int]) -> list[Entry]:
        """
        Resolve ids returned by the other queries into their entries.

        Unlike the lookups above this can fail: an id that was never issued
        raises ``EntryNotFoundError``.
        """
        return [self._repository.get(entry_id) for entry_id in entry_ids]
