"""Policies choosing one location among equally long candidates."""

from __future__ import annotations

import random
import threading
from typing import Optional, Protocol


class SelectionStrategy(Protocol):
    """Maps a candidate count ``n`` to the index of the chosen candidate."""

    def __call__(self, count: int) -> int:
        ...


def first_candidate(count: int) -> int:
    """Always pick the earliest inserted candidate."""

    return 0


class RandomSelection:
    """Uniform choice over ``[0, count)``; safe to share between threads."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random(seed)
        self._lock = threading.Lock()

    def __call__(self, count: int) -> int:
        with self._lock:
            return self._rng.randrange(count)


def clamp_choice(choice: int, count: int) -> int:
    return min(max(choice, 0), count - 1)
