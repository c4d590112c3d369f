"""Pair coverage statistics for a generated schedule."""

from __future__ import annotations

import itertools
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from groupwise.scheduling.round_robin import Schedule


def _pair_key(a: str, b: str) -> tuple[str, str]:
    return (a, b) if a <= b else (b, a)


@dataclass
class PairCoverage:
    """How well a schedule covers all member pairs.

    Pairs are counted by member name, so two occurrences of the same name
    count as one member here.

    Attributes:
        total_pairs: Distinct member pairs possible from the roster.
        covered_pairs: Distinct pairs that shared at least one group.
        repeated_pairs: Co-occurrences beyond the first for any pair.
        round_count: Number of rounds in the schedule.
        group_count: Number of groups across all rounds.
        per_member: Distinct partners met, per member name.
    """

    total_pairs: int
    covered_pairs: int
    repeated_pairs: int
    round_count: int
    group_count: int
    per_member: dict[str, int] = field(default_factory=dict)

    @property
    def coverage_pct(self) -> float:
        if self.total_pairs == 0:
            return 100.0
        return self.covered_pairs / self.total_pairs * 100

    @property
    def is_complete(self) -> bool:
        return self.covered_pairs == self.total_pairs

    @classmethod
    def from_schedule(cls, members: Sequence[str], schedule: Schedule) -> PairCoverage:
        """Measure ``schedule`` against the full roster ``members``."""
        roster = list(dict.fromkeys(members))
        possible = {_pair_key(a, b) for a, b in itertools.combinations(roster, 2)}

        seen: Counter[tuple[str, str]] = Counter()
        group_count = 0
        for rnd in schedule:
            for group in rnd:
                group_count += 1
                for a, b in itertools.combinations(group, 2):
                    if a != b:
                        seen[_pair_key(a, b)] += 1

        partners: dict[str, set[str]] = {m: set() for m in roster}
        for a, b in seen:
            partners.setdefault(a, set()).add(b)
            partners.setdefault(b, set()).add(a)

        return cls(
            total_pairs=len(possible),
            covered_pairs=len(possible.intersection(seen)),
            repeated_pairs=sum(count - 1 for count in seen.values()),
            round_count=len(schedule),
            group_count=group_count,
            per_member={m: len(p) for m, p in partners.items()},
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "total_pairs": self.total_pairs,
            "covered_pairs": self.covered_pairs,
            "repeated_pairs": self.repeated_pairs,
            "coverage_pct": round(self.coverage_pct, 2),
            "round_count": self.round_count,
            "group_count": self.group_count,
            "per_member": dict(self.per_member),
        }

    def __repr__(self) -> str:
        return (
            f"PairCoverage({self.covered_pairs}/{self.total_pairs} pairs covered "
            f"({self.coverage_pct:.1f}%), {self.repeated_pairs} repeats, "
            f"{self.round_count} rounds)"
        )
