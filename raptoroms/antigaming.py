"""Randomisation used to make order slicing harder to detect."""

from __future__ import annotations

import random

_rng = random.SystemRandom()


def randomize(a: int, b: int) -> int:
    """A uniformly random integer in the closed range [a, b]."""
    if a > b:
        raise ValueError(f"empty range: {a} > {b}")
    return _rng.randint(int(a), int(b))