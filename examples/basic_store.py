# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_store.py — Demonstrates core Eternalog usage.

Shows how to:
- Initialise a store (default fee of 10)
- Store entries with attached payment
- Handle rejected writes
- Query by category, author, both, and content
- Journal notifications to an NDJSON file

Run: python examples/basic_store.py
"""

from __future__ import annotations

import asyncio
import sys
import tempfile
from pathlib import Path

# Allow running directly from the examples directory.
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from eternalog import CallContext, EternalogError, EventJournal, Eternalog, export_json


async def main() -> None:
    log = Eternalog.default(CallContext(caller="deployer"))

    print("=== Eternalog — Basic Store Example ===\n")

    writes = [
        (CallContext(caller="alice", value=10, block_number=100), "login ok", 1),
        (CallContext(caller="bob", value=10, block_number=101), "", 2),
        (CallContext(caller="alice", value=10, block_number=102), "disk error", 3),
        (CallContext(caller="bob", value=5, block_number=103), "fan failure", 3),
        (CallContext(caller="bob", value=50, block_number=104), "disk error on sdb", 3),
    ]

    print("Storing entries...")
    for ctx, content, category in writes:
        try:
            entry_id = log.store(ctx, content, category)
            print(f"  [STORED  ] #{entry_id} {ctx.caller} -> {content!r}")
        except EternalogError as exc:
            print(f"  [REJECTED] {ctx.caller} -> {content!r}: {exc.code}")

    print(f"\nTotal entries: {log.total_entries()}")
    print(f"Total burned:  {log.total_burned()}")

    print("\n--- Lookups ---")
    print(f"  by_author('alice')             = {log.by_author('alice')}")
    print(f"  by_category(3)                 = {log.by_category(3)}")
    print(f"  by_category_and_author(3, bob) = {log.by_category_and_author(3, 'bob')}")
    print(f"  search_by_content('error')     = {log.search_by_content('error')}")

    print("\n--- Owner raises the fee ---")
    log.update_fee(CallContext(caller="deployer"), 25)
    print(f"  current_fee = {log.current_fee()}")

    with tempfile.TemporaryDirectory() as tmp_dir:
        journal = EventJournal(Path(tmp_dir) / "events.ndjson")
        written = await journal.sync(log.events)
        print(f"\nJournalled {written} notifications to {journal.file_path.name}")

    print("\n--- Entries matching 'error' (JSON) ---")
    print(export_json(log.query.entries(log.search_by_content("error"))))


if __name__ == "__main__":
    asyncio.run(main())
