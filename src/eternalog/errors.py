# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class EternalogError(Exception):
    """Base class for all eternalog errors."""

    def __init__(self, message: str, code: str = "ETERNALOG_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InsufficientPaymentError(EternalogError):
    """
    Raised when the value attached to a write is below the current fee.

    Attributes:
        paid: The amount attached to the call.
        required: The storage fee in force at the time of the call.
    """

    def __init__(self, paid: int, required: int) -> None:
        super().__init__(
            f"Payment of {paid} is below the storage fee of {required}.",
            code="INSUFFICIENT_PAYMENT",
        )
        self.paid = paid
        self.required = required


class EntryNotFoundError(EternalogError):
    """Raised when an entry id has never been issued."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Entry {entry_id} does not exist.", code="ENTRY_NOT_FOUND")
        self.entry_id = entry_id


class InvalidCategoryError(EternalogError):
    """Raised when an entry is submitted with category 0."""

    def __init__(self, category: int) -> None:
        super().__init__(
            f"Category must be greater than 0; got {category}.",
            code="INVALID_CATEGORY",
        )
        self.category = category


class EmptyContentError(EternalogError):
    """Raised when an entry is submitted with empty content."""

    def __init__(self) -> None:
        super().__init__("Entry content must not be empty.", code="EMPTY_CONTENT")


class UnauthorizedError(EternalogError):
    """
    Raised when a non-owner calls an owner-only operation.

    Attributes:
        caller: The identity that attempted the call.
        owner: The identity allowed to make it.
    """

    def __init__(self, caller: str, owner: str) -> None:
        super().__init__(
            f"Caller '{caller}' is not the owner; only '{owner}' may do this.",
            code="UNAUTHORIZED",
        )
        self.caller = caller
        self.owner = owner


class IdSpaceExhaustedError(EternalogError):
    """Raised when the id counter has reached its ceiling and cannot advance."""

    def __init__(self, next_id: int) -> None:
        super().__init__(
            f"Entry id space exhausted at {next_id}; no further entries can be stored.",
            code="ID_SPACE_EXHAUSTED",
        )
        self.next_id = next_id
