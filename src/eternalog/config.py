# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

from eternalog.types import U64_MAX, U128_MAX

DEFAULT_FEE: int = 10


class EternalogConfig(BaseModel, frozen=True):
    """
    Construction-time settings for an :class:`~eternalog.contract.Eternalog`.

    Attributes:
        fee: Storage fee charged (and burned) per entry.
        max_entry_id: Saturation point of the id counter. The counter never
            issues this value; once it is reached every write fails.
        max_balance: Saturation point of the burned-amount accumulator.

    Example::

        config = EternalogConfig(fee=25)
        log = Eternalog(CallContext(caller="deployer"), config=config)
    """

    fee: Annotated[int, Field(ge=0, le=U128_MAX)] = DEFAULT_FEE
    max_entry_id: Annotated[int, Field(ge=1, le=U64_MAX)] = U64_MAX
    max_balance: Annotated[int, Field(ge=1, le=U128_MAX)] = U128_MAX
