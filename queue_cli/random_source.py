from __future__ import annotations

import math
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float: ...


def weighted_random(weight: float, rng: RandomSource) -> float:
    """
    Exponentially distributed draw with mean ``weight``: ``-weight * ln(u)``.

    A uniform draw of exactly 0 would give an infinite value, so it is drawn again.
    """
    if not math.isfinite(weight) or weight <= 0:
        raise ValueError(f"Weight must be a positive finite number, got {weight!r}")

    u = rng.random()
    while u == 0.0:
        u = rng.random()
    return -weight * math.log(u)
