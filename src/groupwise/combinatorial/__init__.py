"""Combination generation for member lists."""

from groupwise.combinatorial.combinations import combinations, count_combinations

__all__ = [
    "combinations",
    "count_combinations",
]
