from __future__ import annotations

import random
from typing import Optional

from .config import BOUNDARY_LENGTH, MESSAGE_ID_LENGTH

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"

# Seeded once per process. Callers that need reproducible output pass their own.
_rng = random.Random()


def gen_boundary(rng: Optional[random.Random] = None) -> str:
    """Return a random MIME boundary token of 35 lowercase hex characters."""
    source = rng or _rng
    return "".join(source.choice(_LOWER_HEX) for _ in range(BOUNDARY_LENGTH))


def gen_id(rng: Optional[random.Random] = None) -> str:
    """Return a random 32 character uppercase hex id for the Message-ID header."""
    source = rng or _rng
    return "".join(source.choice(_UPPER_HEX) for _ in range(MESSAGE_ID_LENGTH))
