# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Secondary indexes over committed entries.

Each index maps a key to the ascending list of entry ids carrying that key.
Ids are appended in creation order, so every list is sorted and free of
duplicates without further work.  The manager is written to only by
:class:`~eternalog.repository.EntryRepository` as part of an entry insert.
"""

from __future__ import annotations


def merge_intersection(left: list[int], right: list[int]) -> list[int]:
    """
    Intersect two ascending, duplicate-free id lists in linear time.

    The result preserves ascending order.
    """
    results: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            results.append(left[i])
            i += 1
            j += 1
        elif left[i] < right[j]:
            i += 1
        else:
            j += 1
    return results


class IndexManager:
    """By-category and by-author id indexes."""

    def __init__(self) -> None:
        self._by_category: dict[int, list[int]] = {}
        self._by_author: dict[str, list[int]] = {}

    def record(self, entry_id: int, category: int, author: str) -> None:
        """
        Append ``entry_id`` to its category and author sequences.

        The repository calls this exactly once per id, with ids in ascending
        order; the manager does not re-check either condition.
        """
        self._by_category.setdefault(category, []).append(entry_id)
        self._by_author.setdefault(author, []).append(entry_id)

    def by_category(self, category: int) -> list[int]:
        return list(self._by_category.get(category, ()))

    def by_author(self, author: str) -> list[int]:
        return list(self._by_author.get(author, ()))

    def by_category_and_author(self, category: int, author: str) -> list[int]:
        return merge_intersection(
            self._by_category.get(category, []),
            self._by_author.get(author, []),
        )

    def categories(self) -> list[int]:
        """Return every category that has at least one entry, ascending."""
        return sorted(self._by_category)

    def authors(self) -> list[str]:
        """Return every author that has at least one entry, in first-seen order."""
        return list(self._by_author)
