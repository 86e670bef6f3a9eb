"""Random identifiers in the project's short version-4 style."""

from __future__ import annotations

import random

__all__ = ["generate_uuid_v4"]

_rng = random.SystemRandom()
_HYPHEN_AFTER = frozenset({3, 5, 7, 9})


def generate_uuid_v4() -> str:
    """Return sixteen random hex digits grouped 4-2-2-2-6.

    The seventh digit is the version (4) and the ninth the variant (8 to b).
    """
    digits = [_rng.randint(0, 15) for _ in range(16)]
    digits[6] = 0x4
    digits[8] = _rng.randint(8, 11)
    parts = []
    for position, digit in enumerate(digits):
        parts.append(format(digit, "x"))
        if position in _HYPHEN_AFTER:
            parts.append("-")
    return "".join(parts)