"""
Helpers Functional Core: Pure collection and number utilities.

No I/O operations. Randomised helpers accept an optional random.Random so
callers (and tests) can make them deterministic.
"""

from __future__ import annotations

import operator
import random
from collections import Counter
from collections.abc import Hashable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

MAX_COLOR = 0xFFFFFF


# ═══════════════════════════════════════════════════════════════════════════
# MAPPINGS
# ═══════════════════════════════════════════════════════════════════════════


def is_empty_object(obj: Mapping[Any, Any]) -> bool:
    """Return True iff the mapping has no keys."""
    return len(obj) == 0


# ═══════════════════════════════════════════════════════════════════════════
# SEQUENCES
# ═══════════════════════════════════════════════════════════════════════════


def shuffle_array(items: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a new list with the items in uniformly random order.

    Uses Fisher-Yates (random.shuffle); the input is not modified.

    Args:
        items: Items to shuffle
        rng: Optional random source for reproducible output
    """
    shuffled = list(items)
    (rng or random).shuffle(shuffled)
    return shuffled


def most_frequent(items: Iterable[H]) -> H:
    """
    Return the most common element.

    Ties go to the element that first appears earliest in the input.

    Raises:
        ValueError: If items is empty.
    """
    counts = Counter(items)
    if not counts:
        raise ValueError("most_frequent() arg is an empty sequence")

    # Counter keeps first-seen order and max() keeps the first maximum.
    element, _ = max(counts.items(), key=operator.itemgetter(1))
    return element


# ═══════════════════════════════════════════════════════════════════════════
# NUMBERS
# ═══════════════════════════════════════════════════════════════════════════


def factorial(n: int) -> int:
    """
    Calculate n! iteratively.

    Raises:
        TypeError: If n is not an integer.
        ValueError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"factorial() only accepts integers, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"factorial() not defined for negative values, got {n}")

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


# ═══════════════════════════════════════════════════════════════════════════
# COLORS
# ═══════════════════════════════════════════════════════════════════════════


def generate_random_color(rng: random.Random | None = None) -> str:
    """Return a random "#rrggbb" color drawn uniformly from the 24-bit space."""
    value = (rng or random).randint(0, MAX_COLOR)
    return f"#{value:06x}"
