# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Eternalog — the call surface of the fee-gated, append-only log store.

Eternalog wires four components together:

1. FeeLedger — admits writes that pay at least the current fee and burns it.
2. EntryRepository — assigns ids and stores immutable entries.
3. IndexManager — by-category and by-author lookups, updated on every insert.
4. QueryEngine — read-only exact, combined, and substring queries.

Writes are checked in a fixed order before any state changes::

    EmptyContent -> InvalidCategory -> InsufficientPayment -> IdSpaceExhausted

so a rejected call leaves the entries, indexes, and ledger exactly as they were.

Usage::

    from eternalog import CallContext, Eternalog

    log = Eternalog.default(CallContext(caller="deployer"))
    entry_id = log.store(CallContext(caller="alice", value=10), "login ok", 1)
    log.by_author("alice")  # [1]
"""

from __future__ import annotations

import logging
from typing import Callable

from eternalog.config import DEFAULT_FEE, EternalogConfig
from eternalog.events import EventLog, Listener
from eternalog.index import IndexManager
from eternalog.ledger import FeeLedger
from eternalog.query import QueryEngine
from eternalog.repository import EntryRepository
from eternalog.types import CallContext, Entry, LogStored

logger = logging.getLogger("eternalog.contract")


class Eternalog:
    """
    Fee-gated, append-only log store.

    The host must serialise calls: each call runs to completion before the
    next one starts.  No locking is done here.

    Parameters
    ----------
    ctx:
        Context of the initialising call.  ``ctx.caller`` becomes the owner.
    config:
        Fee and saturation settings.  Defaults to a fee of 10.
    """

    def __init__(self, ctx: CallContext, config: EternalogConfig | None = None) -> None:
        self._config = config or EternalogConfig()
        self._events = EventLog()
        self._ledger = FeeLedger(
            owner=ctx.caller,
            fee=self._config.fee,
            events=self._events,
            max_balance=self._config.max_balance,
        )
        self._repository = EntryRepository(
            index=IndexManager(),
            max_entry_id=self._config.max_entry_id,
        )
        self._query = QueryEngine(self._repository)
        logger.info(
            "eternalog_initialised",
            extra={"owner": ctx.caller, "fee": self._config.fee},
        )

    @classmethod
    def new(cls, ctx: CallContext, fee: int) -> Eternalog:
        """Initialise with an explicit storage fee."""
        return cls(ctx, EternalogConfig(fee=fee))

    @classmethod
    def default(cls, ctx: CallContext) -> Eternalog:
        """Initialise with the default storage fee of 10."""
        return cls(ctx, EternalogConfig(fee=DEFAULT_FEE))

    # ─── Components ───────────────────────────────────────────────────────────

    @property
    def config(self) -> EternalogConfig:
        return self._config

    @property
    def events(self) -> EventLog:
        return self._events

    @property
    def ledger(self) -> FeeLedger:
        return self._ledger

    @property
    def repository(self) -> EntryRepository:
        return self._repository

    @property
    def query(self) -> QueryEngine:
        return self._query

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a fire-and-forget notification listener; returns an unsubscribe callable."""
        return self._events.subscribe(listener)

    # ─── Writes ───────────────────────────────────────────────────────────────

    def store(self, ctx: CallContext, content: str, category: int) -> int:
        """
        Store a new entry, paying with ``ctx.value``; return its id.

        The ledger burns exactly the current fee.  ``FeeBurned`` and then
        ``LogStored`` are emitted only after the entry is committed, so
        listeners always observe the completed write.

        Raises
        ------
        EmptyContentError
            When ``content`` is empty.
        InvalidCategoryError
            When ``category`` is 0.
        InsufficientPaymentError
            When ``ctx.value`` is below the current fee.
        IdSpaceExhaustedError
            When no further ids can be issued.
        """
        try:
            self._repository.validate(content, category)
            self._ledger.check_payment(ctx.value)
            entry = self._repository.prepare(content, category, ctx.caller, ctx.block_number)
        except Exception as exc:
            logger.warning(
                "store_rejected",
                extra={"caller": ctx.caller, "category": category, "reason": type(exc).__name__},
            )
            raise

        # No listener may run between the burn and the commit.
        burned = self._ledger.burn(ctx.value, ctx.caller)
        entry_id = self._repository.commit(entry)

        self._events.emit(burned)
        self._events.emit(
            LogStored(log_id=entry_id, author=ctx.caller, log_type=category, data=content)
        )
        logger.info(
            "log_stored",
            extra={
                "log_id": entry_id,
                "author": ctx.caller,
                "log_type": category,
                "block_number": ctx.block_number,
            },
        )
        return entry_id

    def update_fee(self, ctx: CallContext, new_fee: int) -> None:
        """
        Replace the storage fee.  Owner only.

        Raises:
            UnauthorizedError: If ``ctx.caller`` is not the owner.
        """
        try:
            self._ledger.update_fee(new_fee, ctx.caller)
        except Exception as exc:
            logger.warning(
                "update_fee_rejected",
                extra={"caller": ctx.caller, "reason": type(exc).__name__},
            )
            raise

    # ─── Reads ────────────────────────────────────────────────────────────────

    def get(self, entry_id: int) -> Entry:
        """Return the entry for ``entry_id``; raises ``EntryNotFoundError`` if absent."""
        return self._repository.get(entry_id)

    def by_category(self, category: int) -> list[int]:
        return self._query.by_category(category)

    def by_author(self, author: str) -> list[int]:
        return self._query.by_author(author)

    def by_category_and_author(self, category: int, author: str) -> list[int]:
        return self._query.by_category_and_author(category, author)

    def search_by_content(self, term: str) -> list[int]:
        return self._query.search_by_content(term)

    def current_fee(self) -> int:
        return self._ledger.current_fee

    def total_entries(self) -> int:
        return self._repository.count()

    def total_burned(self) -> int:
        return self._ledger.total_burned

    def next_id(self) -> int:
        return self._repository.next_id

    def owner(self) -> str:
        return self._ledger.owner
