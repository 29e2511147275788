# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
FeeLedger — storage fee, burn accounting, and the owner identity.

Design contract
---------------
- ``check_payment()`` is read-only. It decides admission and nothing else.
- ``burn()`` and ``charge_and_burn()`` add exactly ``current_fee`` to
  ``total_burned``; only ``charge_and_burn()`` emits ``FeeBurned``.
  Any amount paid above the fee is neither tracked nor refunded here.
- ``total_burned`` only grows, and saturates at ``max_balance`` instead of
  wrapping.
- The owner is fixed at construction and cannot be transferred.
"""

from __future__ import annotations

import logging

from eternalog.errors import InsufficientPaymentError, UnauthorizedError
from eternalog.events import EventLog
from eternalog.types import U128_MAX, FeeBurned, StorageFeeUpdated, saturating_add

logger = logging.getLogger("eternalog.ledger")


class FeeLedger:
    """
    Fee gate for every write.

    Parameters
    ----------
    owner:
        Identity allowed to change the fee.
    fee:
        Initial per-entry storage fee.
    events:
        Notification log receiving ``FeeBurned`` and ``StorageFeeUpdated``.
    max_balance:
        Saturation point of the burned-amount accumulator.
    """

    def __init__(
        self,
        owner: str,
        fee: int,
        events: EventLog | None = None,
        max_balance: int = U128_MAX,
    ) -> None:
        if fee < 0:
            raise ValueError(f"Storage fee must be >= 0; got {fee}.")
        self._owner = owner
        self._current_fee = fee
        self._total_burned = 0
        self._max_balance = max_balance
        self._events: EventLog = events if events is not None else EventLog()

    @property
    def current_fee(self) -> int:
        return self._current_fee

    @property
    def total_burned(self) -> int:
        return self._total_burned

    @property
    def owner(self) -> str:
        return self._owner

    def check_payment(self, paid_amount: int) -> None:
        """Raise ``InsufficientPaymentError`` if ``paid_amount`` is below the fee."""
        if paid_amount < self._current_fee:
            raise InsufficientPaymentError(paid=paid_amount, required=self._current_fee)

    def charge_and_burn(self, paid_amount: int, payer: str) -> FeeBurned:
        """
        Admit a payment, burn the current fee, and emit ``FeeBurned``.

        Returns the emitted notification.

        Raises:
            InsufficientPaymentError: If ``paid_amount`` is below the fee.
                No state is mutated.
        """
        event = self.burn(paid_amount, payer)
        self._events.emit(event)
        return event

    def burn(self, paid_amount: int, payer: str) -> FeeBurned:
        """
        Admit a payment and burn the current fee without emitting anything.

        The caller owns delivery of the returned ``FeeBurned``.  Use this when
        the burn is one half of a larger write that listeners must only see
        once it has fully committed.
        """
        self.check_payment(paid_amount)
        burned = self._current_fee
        self._total_burned = saturating_add(self._total_burned, burned, self._max_balance)
        logger.debug(
            "fee_burned",
            extra={
                "payer": payer,
                "paid": paid_amount,
                "burned": burned,
                "total_burned": self._total_burned,
            },
        )
        return FeeBurned(amount=burned, burner=payer)

    def update_fee(self, new_fee: int, caller: str) -> StorageFeeUpdated:
        """
        Replace the storage fee.

        Raises:
            UnauthorizedError: If ``caller`` is not the owner.
            ValueError: If ``new_fee`` is negative or above ``max_balance``.
        """
        if caller != self._owner:
            raise UnauthorizedError(caller=caller, owner=self._owner)
        if new_fee < 0 or new_fee > self._max_balance:
            raise ValueError(f"Storage fee must be within 0..{self._max_balance}; got {new_fee}.")

        old_fee = self._current_fee
        self._current_fee = new_fee

        event = StorageFeeUpdated(old_fee=old_fee, new_fee=new_fee, updated_by=caller)
        self._events.emit(event)
        logger.info(
            "storage_fee_updated",
            extra={"old_fee": old_fee, "new_fee": new_fee, "updated_by": caller},
        )
        return event
