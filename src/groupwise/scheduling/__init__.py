"""Round-robin scheduling of members into pairs and groups.

Example:
    >>> from groupwise.scheduling import generate_schedule, PairCoverage
    >>>
    >>> members = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank"]
    >>> schedule = generate_schedule(members, 3)
    >>> print(PairCoverage.from_schedule(members, schedule))
"""

from groupwise.scheduling.coverage import PairCoverage
from groupwise.scheduling.dispatch import generate_schedule
from groupwise.scheduling.history import PairingHistory
from groupwise.scheduling.round_robin import (
    DEFAULT_COVERAGE_THRESHOLD,
    REPEAT_PENALTY,
    Group,
    Round,
    Schedule,
    max_rounds_for,
    round_robin_groups,
    round_robin_pairs,
    round_robin_subgroups,
)

__all__ = [
    # Entry point
    "generate_schedule",
    # Algorithms
    "round_robin_pairs",
    "round_robin_subgroups",
    "round_robin_groups",
    "max_rounds_for",
    "DEFAULT_COVERAGE_THRESHOLD",
    "REPEAT_PENALTY",
    # State and statistics
    "PairingHistory",
    "PairCoverage",
    # Types
    "Group",
    "Round",
    "Schedule",
]
