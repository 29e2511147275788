# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
eternalog — Append-only, fee-gated log store with secondary indexes.

Public API surface:

    Classes:
        Eternalog        — Call surface: store(), get(), queries, update_fee()
        EntryRepository  — Id allocation and the immutable entry table
        IndexManager     — By-category and by-author id indexes
        FeeLedger        — Fee gate, burn accounting, owner identity
        QueryEngine      — Read-only exact, combined, and substring queries
        EventLog         — In-memory notification log with listeners
        EventJournal     — Append-only NDJSON notification journal

    Functions:
        export_json      — Serialise entries to JSON
        export_csv       — Serialise entries to CSV
        export_entries   — Format-dispatching export helper

    Types:
        Entry, CallContext, LogStored, FeeBurned, StorageFeeUpdated,
        EternalogConfig
"""

from eternalog.config import DEFAULT_FEE, EternalogConfig
from eternalog.contract import Eternalog
from eternalog.errors import (
    EmptyContentError,
    EntryNotFoundError,
    EternalogError,
    IdSpaceExhaustedError,
    InsufficientPaymentError,
    InvalidCategoryError,
    UnauthorizedError,
)
from eternalog.events import EventLog
from eternalog.export_formats import export_csv, export_entries, export_json
from eternalog.index import IndexManager
from eternalog.journal import EventJournal
from eternalog.ledger import FeeLedger
from eternalog.query import QueryEngine
from eternalog.repository import EntryRepository
from eternalog.types import (
    U32_MAX,
    U64_MAX,
    U128_MAX,
    CallContext,
    Entry,
    FeeBurned,
    LogStored,
    StorageFeeUpdated,
)

__all__ = [
    # Core classes
    "Eternalog",
    "EntryRepository",
    "IndexManager",
    "FeeLedger",
    "QueryEngine",
    # Notifications
    "EventLog",
    "EventJournal",
    # Export helpers
    "export_json",
    "export_csv",
    "export_entries",
    # Config
    "EternalogConfig",
    "DEFAULT_FEE",
    # Errors
    "EternalogError",
    "InsufficientPaymentError",
    "EntryNotFoundError",
    "InvalidCategoryError",
    "EmptyContentError",
    "UnauthorizedError",
    "IdSpaceExhaustedError",
    # Types
    "Entry",
    "CallContext",
    "LogStored",
    "FeeBurned",
    "StorageFeeUpdated",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
]
