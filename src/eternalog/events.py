# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Append-only, in-memory notification log.

Notifications are observational only.  Components emit them after their state
change is complete, and nothing inside the store ever reads them back, so a
lost or failing listener cannot affect committed entries or ledger totals.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from eternalog.types import FeeBurned, LogStored, StorageFeeUpdated

logger = logging.getLogger("eternalog.events")

Event = LogStored | FeeBurned | StorageFeeUpdated
Listener = Callable[[Event], None]


class EventLog:
    """Ordered record of every notification emitted by a store instance."""

    def __init__(self) -> None:
        self._events: list[Event] = []
        self._listeners: list[Listener] = []

    def emit(self, event: Event) -> None:
        """
        Append ``event`` and broadcast it to every subscribed listener.

        Listener exceptions are logged and not re-raised: delivery is
        fire-and-forget and the emitting operation has already committed.
        """
        self._events.append(event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "event_listener_failed",
                    extra={"event": event.event, "listener": repr(listener)},
                )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def all(self) -> list[Event]:
        """Return a copy of every emitted notification, oldest first."""
        return list(self._events)

    def of_type(self, event_type: type[Event]) -> list[Event]:
        return [event for event in self._events if isinstance(event, event_type)]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))
