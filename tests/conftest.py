# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for eternalog tests."""

from __future__ import annotations

import pytest

from eternalog.contract import Eternalog
from eternalog.types import CallContext
from helpers import ALICE, BOB, OWNER, paying


@pytest.fixture
def log() -> Eternalog:
    """A freshly initialised store with the default fee of 10, owned by OWNER."""
    return Eternalog.default(CallContext(caller=OWNER))


@pytest.fixture
def populated_log(log: Eternalog) -> Eternalog:
    """
    A store holding four entries:

    1. alice, category 1, "login ok"
    2. bob,   category 2, "disk error on sda"
    3. alice, category 2, "disk error on sdb"
    4. alice, category 1, "logout"
    """
    log.store(paying(ALICE, block_number=5), "login ok", 1)
    log.store(paying(BOB, block_number=6), "disk error on sda", 2)
    log.store(paying(ALICE, block_number=7), "disk error on sdb", 2)
    log.store(paying(ALICE, block_number=8), "logout", 1)
    return log
