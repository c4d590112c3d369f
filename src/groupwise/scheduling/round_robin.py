"""Round-robin scheduling of members into pairs and larger groups.

Two algorithms live here:

- Pairs (size 2): the circle method. One position stays fixed while the
  rest rotate around a circle, so every unordered pair of members meets
  exactly once. An odd roster gets a bye placeholder, and whoever is
  paired with it sits that round out.
- Groups (size >= 3): a greedy, history-driven heuristic. Each round is
  filled with the group of available members that repeats the fewest
  earlier pairings, until most members have met most others. This is a
  best-effort minimizer, not a block design: it guarantees neither
  perfect coverage nor a minimal number of rounds.

A schedule is a list of rounds, each round a list of groups, each group a
list of member names.

Example:
    >>> from groupwise.scheduling import round_robin_pairs
    >>>
    >>> round_robin_pairs(["A", "B", "C", "D"])
    [[['A', 'D'], ['B', 'C']], [['A', 'B'], ['C', 'D']], [['A', 'C'], ['D', 'B']]]
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from groupwise.combinatorial import combinations
from groupwise.errors import ErrorContext, InvalidSizeError
from groupwise.scheduling.history import PairingHistory

logger = logging.getLogger(__name__)

Group = list[str]
Round = list[Group]
Schedule = list[Round]

# Coverage fraction of possible partners after which the group scheduler stops
DEFAULT_COVERAGE_THRESHOLD = 0.8

# Score added per already-seen pair in a candidate group
REPEAT_PENALTY = 10

# Placeholder that evens out an odd roster; never equal to a real member
_BYE = object()


def round_robin_pairs(members: Sequence[str]) -> Schedule:
    """Schedule every member against every other member exactly once.

    Args:
        members: Member names. Duplicates are scheduled as separate
            occurrences. The sequence is not modified.

    Returns:
        ``n - 1`` rounds for an even count, ``n`` rounds for an odd count,
        each a list of 2-member groups. Empty when fewer than 2 members.
    """
    if len(members) < 2:
        return []

    players: list[object] = list(members)
    if len(players) % 2 == 1:
        players.append(_BYE)

    m = len(players)
    num_rounds = m - 1
    pairs_per_round = m // 2
    rounds: Schedule = []

    for rnd in range(num_rounds):
        current: Round = []

        for pair in range(pairs_per_round):
            if pair == 0:
                # Fixed position meets the circle slot the other pairs
                # are centred on, so nobody appears twice in a round.
                # Pairing it with m - 1 - rnd instead covers every pair but
                # puts one member in two pairs of the same round.
                first = 0
                second = rnd if rnd else m - 1
            else:
                first = (pair + rnd) % (m - 1)
                if first == 0:
                    first = m - 1
                second = (m - 1 - pair + rnd) % (m - 1)
                if second == 0:
                    second = m - 1

            a = players[first]
            b = players[second]
            if a is _BYE or b is _BYE:
                continue
            current.append([a, b])

        rounds.append(current)

    logger.debug(f"Paired {len(members)} members over {len(rounds)} rounds")
    return rounds


def round_robin_subgroups(members: Sequence[str], size: int) -> Schedule:
    """Strict pairs-only round robin.

    Raises:
        InvalidSizeError: If ``size`` is anything other than 2.
    """
    if size != 2:
        raise InvalidSizeError(
            context=ErrorContext(operation="round_robin_subgroups"),
            size=size,
        )
    return round_robin_pairs(members)


def max_rounds_for(n: int, size: int) -> int:
    """Hard cap on rounds for the group scheduler.

    Total pair slots needed divided by the pair slots one group adds for
    each member, doubled as a safety margin.
    """
    if n < 2 or size < 2:
        return 0
    return math.ceil(n * (n - 1) / (2 * (size - 1))) * 2


def round_robin_groups(
    members: Sequence[str],
    size: int,
    coverage_threshold: float = DEFAULT_COVERAGE_THRESHOLD,
) -> Schedule:
    """Schedule members into rounds of groups of ``size``, minimizing repeats.

    Each round starts with every member available and repeatedly takes the
    lowest-scoring group of available members, where a candidate scores
    ``REPEAT_PENALTY`` per pair that has already met. Ties go to the first
    candidate in combination order. Members left over when fewer than
    ``size`` remain sit the round out.

    Stops when a round yields no group, when every member has met at least
    ``floor((n - 1) * coverage_threshold)`` others, or after
    ``max_rounds_for(n, size)`` rounds.

    Every candidate group of the available pool is scored on every pick, so
    cost grows combinatorially with member count and ``size``. There is no
    cap on this.

    Args:
        members: Member names, treated as read-only. Duplicates are
            distinct occurrences.
        size: Target group size, normally 3 or more.
        coverage_threshold: Fraction of possible partners each member must
            have met for the schedule to stop early.

    Returns:
        Schedule of rounds. Empty when ``size < 1`` or ``size > len(members)``;
        a single round of singletons when ``size == 1``.
    """
    n = len(members)
    if size < 1 or size > n:
        return []
    if size == 1:
        # Nobody can meet anyone, so one round of singletons is the schedule
        return [[[member] for member in members]]

    positions = list(range(n))
    history = PairingHistory(positions)
    max_rounds = max_rounds_for(n, size)
    min_partners = math.floor((n - 1) * coverage_threshold)

    logger.info(
        f"Scheduling {n} members into groups of {size} "
        f"(max {max_rounds} rounds, target {min_partners} partners each)"
    )

    rounds: Schedule = []
    for rnd in range(max_rounds):
        available = list(positions)
        current: Round = []

        while len(available) >= size:
            chosen = _select_group(available, size, history)
            if chosen is None:
                break

            taken = set(chosen)
            available = [p for p in available if p not in taken]
            history.record(chosen)
            current.append([members[p] for p in chosen])

            logger.debug(f"Round {rnd + 1}: chose {current[-1]}")

        if not current:
            logger.info(f"No group could be formed in round {rnd + 1}, stopping")
            break

        rounds.append(current)

        if history.is_covered(min_partners):
            logger.info(f"Coverage target reached after {len(rounds)} rounds")
            break
    else:
        logger.info(f"Stopped at round cap ({max_rounds}) before reaching coverage target")

    return rounds


def _select_group(
    available: list[int],
    size: int,
    history: PairingHistory,
) -> list[int] | None:
    """Pick the candidate group that repeats the fewest earlier pairings."""
    best: list[int] | None = None
    best_score = -1

    for candidate in combinations(available, size):
        score = REPEAT_PENALTY * history.repeat_count(candidate)
        if best is None or score < best_score:
            best = candidate
            best_score = score
            if score == 0:
                break

    return best
