# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation
"""Identities and call-context builders shared by the eternalog tests."""

from __future__ import annotations

from eternalog.types import CallContext

OWNER = "deployer"
ALICE = "alice"
BOB = "bob"


def paying(caller: str, value: int = 10, block_number: int = 1) -> CallContext:
    """Build a call context for ``caller`` attaching ``value``."""
    return CallContext(caller=caller, value=value, block_number=block_number)
