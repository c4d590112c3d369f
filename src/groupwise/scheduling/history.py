"""Pairing history for the group scheduler."""

from __future__ import annotations

import itertools
from collections.abc import Hashable, Iterable


class PairingHistory:
    """Tracks which members have already shared a group.

    Maps each member to the set of members it has co-occurred with.
    Entries only grow. Keys can be any hashable member identity; the
    scheduler uses input positions so duplicate names stay distinct.

    Example:
        >>> history = PairingHistory(["A", "B", "C"])
        >>> history.record(["A", "B"])
        >>> history.has_paired("B", "A")
        True
        >>> history.repeat_count(["A", "B", "C"])
        1
    """

    def __init__(self, members: Iterable[Hashable]) -> None:
        self._partners: dict[Hashable, set[Hashable]] = {m: set() for m in members}

    @property
    def members(self) -> list[Hashable]:
        return list(self._partners)

    def record(self, group: Iterable[Hashable]) -> None:
        """Record every pairwise co-occurrence within ``group``."""
        for a, b in itertools.combinations(group, 2):
            self._partners.setdefault(a, set()).add(b)
            self._partners.setdefault(b, set()).add(a)

    def partners(self, member: Hashable) -> frozenset[Hashable]:
        return frozenset(self._partners.get(member, ()))

    def has_paired(self, a: Hashable, b: Hashable) -> bool:
        return b in self._partners.get(a, ())

    def repeat_count(self, group: Iterable[Hashable]) -> int:
        """Number of pairs within ``group`` that have already co-occurred."""
        return sum(
            1 for a, b in itertools.combinations(group, 2)
            if self.has_paired(a, b)
        )

    def coverage(self, member: Hashable) -> int:
        """Number of distinct members ``member`` has shared a group with."""
        return len(self._partners.get(member, ()))

    def is_covered(self, min_partners: int) -> bool:
        """True when every member has at least ``min_partners`` partners."""
        return all(len(p) >= min_partners for p in self._partners.values())

    def __repr__(self) -> str:
        covered = sum(len(p) for p in self._partners.values()) // 2
        return f"PairingHistory(members={len(self._partners)}, pairs={covered})"
