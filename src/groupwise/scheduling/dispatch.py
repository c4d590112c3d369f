"""Single entry point for schedule generation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from groupwise.scheduling.round_robin import (
    DEFAULT_COVERAGE_THRESHOLD,
    Schedule,
    round_robin_groups,
    round_robin_pairs,
)

logger = logging.getLogger(__name__)


def generate_schedule(
    members: Sequence[str],
    size: int,
    coverage_threshold: float = DEFAULT_COVERAGE_THRESHOLD,
) -> Schedule:
    """Generate a round-robin schedule of groups of ``size``.

    Out-of-range sizes are not an error: ``size <= 0`` or
    ``size > len(members)`` gives an empty schedule, which callers should
    show as "nothing to schedule". Size 2 uses the exact circle method;
    larger sizes use the greedy repeat-minimizing heuristic.

    Args:
        members: Member names, not modified.
        size: Target group size.
        coverage_threshold: Early-stop coverage for sizes above 2.

    Returns:
        List of rounds, each a list of groups of member names.
    """
    if size <= 0 or size > len(members):
        logger.debug(f"Size {size} out of range for {len(members)} members, nothing to schedule")
        return []
    if size == 2:
        return round_robin_pairs(members)
    return round_robin_groups(members, size, coverage_threshold=coverage_threshold)
