"""Small numeric helpers."""

from __future__ import annotations

import math


def round_half_away(val: float) -> float:
    """Round to the nearest integer, with halves going away from zero.

    This differs from the built-in ``round``, which rounds halves to even.
    """
    if val < 0.0:
        return float(math.ceil(val - 0.5))
    return float(math.floor(val + 0.5))