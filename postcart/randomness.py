"""Seedable random selection helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_rng = random.Random()


def set_seed(seed: int) -> None:
    """Reseed the shared random source."""
    _rng.seed(seed)


def from_sequence(items: Sequence[T]) -> T:
    """Return a random element; raise IndexError when empty."""
    return _rng.choice(items)