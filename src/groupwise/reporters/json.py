"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from groupwise.scheduling import PairCoverage, Schedule


class JSONReporter:
    """Formats schedules and combinations as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def report_schedule(self, members: Sequence[str], schedule: Schedule, size: int) -> str:
        data: dict[str, Any] = {
            "size": size,
            "members": list(members),
            "rounds": [
                {"round_number": number, "groups": [list(g) for g in rnd]}
                for number, rnd in enumerate(schedule, start=1)
            ],
            "coverage": PairCoverage.from_schedule(members, schedule).to_dict(),
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def report_combinations(self, members: Sequence[str], combos: list[list[str]], size: int) -> str:
        data = {
            "size": size,
            "members": list(members),
            "combinations": combos,
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
