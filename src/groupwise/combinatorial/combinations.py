"""Exhaustive k-combination generation.

A combination is a selection of ``k`` items taken from distinct input
positions, keeping the relative input order. Items are identified by
position, not value, so duplicate names yield distinct combinations.

Combinations are emitted in lexicographic order of input positions:
fix the item at the lowest index, fill the remaining ``k - 1`` slots
from later indices, then advance.

Example:
    >>> from groupwise.combinatorial import combinations
    >>>
    >>> combinations(["A", "B", "C", "D"], 2)
    [['A', 'B'], ['A', 'C'], ['A', 'D'], ['B', 'C'], ['B', 'D'], ['C', 'D']]
    >>> combinations(["A", "B"], 3)
    []
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> list[list[T]]:
    """Generate all size-k combinations of ``items``.

    Args:
        items: Any finite ordered sequence. Values need not be unique.
        k: Combination size. Any integer is accepted.

    Returns:
        ``C(len(items), k)`` combinations in lexicographic order by input
        position, each a fresh list. Empty when ``k <= 0`` or
        ``k > len(items)``.
    """
    n = len(items)
    if k <= 0 or k > n:
        return []
    if k == 1:
        return [[item] for item in items]
    if k == n:
        return [list(items)]

    return [list(combo) for combo in itertools.combinations(items, k)]


def count_combinations(n: int, k: int) -> int:
    """Number of size-k combinations of n items, 0 when out of range."""
    if k <= 0 or k > n:
        return 0
    return math.comb(n, k)
