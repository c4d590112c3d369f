"""groupwise - fair pairs and groups for a roster of members.

Turn an ordered member list into every size-k combination, or into a
round-robin schedule where members meet each other as evenly as possible.

Quick Start:
    from groupwise import generate_schedule, combinations

    members = ["Alice", "Bob", "Charlie", "Diana"]

    combinations(members, 2)        # all 6 pairs
    generate_schedule(members, 2)   # 3 rounds, 2 pairs each
    generate_schedule(members, 3)   # greedy rounds of 3, fewest repeats
"""

from __future__ import annotations

from groupwise.combinatorial import combinations, count_combinations
from groupwise.errors import (
    ConfigValidationError,
    ErrorCode,
    ErrorContext,
    GroupNotFoundError,
    GroupwiseError,
    InvalidMemberError,
    InvalidSizeError,
    StoreError,
    SubgroupNotFoundError,
    ValidationError,
)
from groupwise.models import Group, Subgroup, SubgroupRound, build_rounds
from groupwise.scheduling import (
    PairCoverage,
    PairingHistory,
    generate_schedule,
    max_rounds_for,
    round_robin_groups,
    round_robin_pairs,
    round_robin_subgroups,
)
from groupwise.storage import STORAGE_KEY, GroupStore

__version__ = "0.1.0"

__all__ = [
    # Generators
    "combinations",
    "count_combinations",
    "generate_schedule",
    "round_robin_pairs",
    "round_robin_subgroups",
    "round_robin_groups",
    "max_rounds_for",
    "PairingHistory",
    "PairCoverage",
    # Records
    "Group",
    "Subgroup",
    "SubgroupRound",
    "build_rounds",
    "GroupStore",
    "STORAGE_KEY",
    # Errors
    "GroupwiseError",
    "ErrorCode",
    "ErrorContext",
    "ValidationError",
    "InvalidSizeError",
    "InvalidMemberError",
    "ConfigValidationError",
    "StoreError",
    "GroupNotFoundError",
    "SubgroupNotFoundError",
]
