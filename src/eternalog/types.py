# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Shared type definitions for the eternalog package.

Entries and notifications are frozen Pydantic v2 models: fields cannot be
mutated after construction, which mirrors the store's guarantee that a
committed entry never changes.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# ─── Numeric domains ──────────────────────────────────────────────────────────

U32_MAX: int = 2**32 - 1
U64_MAX: int = 2**64 - 1
U128_MAX: int = 2**128 - 1

EntryId = Annotated[int, Field(ge=1, le=U64_MAX)]
Category = Annotated[int, Field(ge=0, le=U32_MAX)]
Amount = Annotated[int, Field(ge=0, le=U128_MAX)]
Identity = Annotated[str, Field(min_length=1)]
BlockNumber = Annotated[int, Field(ge=0)]


def saturating_add(value: int, increment: int, ceiling: int) -> int:
    """Return ``value + increment`` clamped to ``ceiling`` instead of wrapping."""
    total = value + increment
    return ceiling if total > ceiling else total


# ─── Call context ─────────────────────────────────────────────────────────────


class CallContext(BaseModel):
    """
    What the host environment hands the store on every call.

    ``value`` is the amount attached to the call and is only meaningful for
    payable operations.  ``block_number`` is the logical clock stamped onto
    new entries.
    """

    model_config = ConfigDict(frozen=True)

    caller: Identity
    value: Amount = 0
    block_number: BlockNumber = 0


# ─── Entry ────────────────────────────────────────────────────────────────────


class Entry(BaseModel):
    """
    A committed, immutable log entry.

    ``created_at`` is the block number supplied by the environment when the
    entry was stored.
    """

    model_config = ConfigDict(frozen=True)

    id: EntryId
    content: str = Field(..., min_length=1)
    category: Category
    author: Identity
    created_at: BlockNumber


# ─── Notifications ────────────────────────────────────────────────────────────


class LogStored(BaseModel):
    """Emitted after an entry is committed."""

    model_config = ConfigDict(frozen=True)

    event: Literal["LogStored"] = "LogStored"
    log_id: EntryId
    author: Identity
    log_type: Category
    data: str


class FeeBurned(BaseModel):
    """Emitted when a storage fee is removed from circulation."""

    model_config = ConfigDict(frozen=True)

    event: Literal["FeeBurned"] = "FeeBurned"
    amount: Amount
    burner: Identity


class StorageFeeUpdated(BaseModel):
    """Emitted when the owner changes the per-entry storage fee."""

    model_config = ConfigDict(frozen=True)

    event: Literal["StorageFeeUpdated"] = "StorageFeeUpdated"
    old_fee: Amount
    new_fee: Amount
    updated_by: Identity


Notification = Annotated[
    Union[LogStored, FeeBurned, StorageFeeUpdated],
    Field(discriminator="event"),
]

ExportFormat = Literal["json", "csv"]
