"""
Data models for groups and generated schedules.

A Group is the persisted roster: a name and an ordered member list. The
generators never see it, only its member list. Subgroup and SubgroupRound
wrap a generated schedule with ids and "completed" flags so a caller can
track which groups have met. Neither flag affects generation.

All models use Pydantic for validation and serialization.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator

from groupwise.errors import (
    ErrorContext,
    InvalidMemberError,
    SubgroupNotFoundError,
    ValidationError,
)
from groupwise.scheduling import Schedule

EMPTY_NAME_MESSAGE = "Group name cannot be empty"


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Group(BaseModel):
    """
    A named roster of members.

    Attributes:
        id: Unique identifier for the group
        name: Display name, never blank
        members: Member names in the order they were added. Duplicates are
            allowed and kept.
        created_at: When the group was created
    """

    id: str = Field(default_factory=_new_id, description="Unique group identifier")
    name: str = Field(..., description="Group name")
    members: List[str] = Field(default_factory=list, description="Ordered member names")
    created_at: datetime = Field(default_factory=_utcnow, description="Creation timestamp")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the name and reject blanks."""
        v = v.strip()
        if not v:
            raise ValueError(EMPTY_NAME_MESSAGE)
        return v

    @classmethod
    def create(cls, name: str, members: Iterable[str] = ()) -> Group:
        """Create a group, trimming member names and skipping blank ones."""
        if not name.strip():
            raise ValidationError(EMPTY_NAME_MESSAGE, context=ErrorContext(operation="create_group"))
        group = cls(name=name)
        for member in members:
            if member.strip():
                group.add_member(member)
        return group

    def add_member(self, name: str) -> None:
        """Append a member.

        Raises:
            InvalidMemberError: If the name is blank after trimming.
        """
        name = name.strip()
        if not name:
            raise InvalidMemberError(
                context=ErrorContext(group_id=self.id, operation="add_member"),
            )
        self.members.append(name)

    def remove_member(self, index: int) -> str:
        """Remove the member at ``index`` (0-based) and return its name.

        Removing by position keeps the other occurrences of a duplicate name.

        Raises:
            IndexError: If there is no member at ``index``.
        """
        if not 0 <= index < len(self.members):
            raise IndexError(f"No member at position {index} in group '{self.name}'")
        return self.members.pop(index)

    def rename(self, name: str) -> None:
        name = name.strip()
        if not name:
            raise ValidationError(
                EMPTY_NAME_MESSAGE,
                context=ErrorContext(group_id=self.id, operation="rename"),
            )
        self.name = name


class Subgroup(BaseModel):
    """
    One generated group within a round.

    Attributes:
        id: Unique identifier, stable for the lifetime of the record
        members: Member names in the order the scheduler chose them
        completed: Caller bookkeeping flag, false until marked
    """

    id: str = Field(default_factory=_new_id, description="Unique subgroup identifier")
    members: List[str] = Field(default_factory=list, description="Member names")
    completed: bool = Field(default=False, description="Marked as done by the caller")


class SubgroupRound(BaseModel):
    """
    One round of a generated schedule.

    Attributes:
        id: Unique identifier for the round
        round_number: 1-based position in the schedule
        subgroups: Disjoint groups meeting this round
        completed: True once every subgroup is completed
    """

    id: str = Field(default_factory=_new_id, description="Unique round identifier")
    round_number: int = Field(..., ge=1, description="1-based round number")
    subgroups: List[Subgroup] = Field(default_factory=list, description="Groups in this round")
    completed: bool = Field(default=False, description="All subgroups completed")

    def get_subgroup(self, subgroup_id: str) -> Subgroup:
        for subgroup in self.subgroups:
            if subgroup.id == subgroup_id:
                return subgroup
        raise SubgroupNotFoundError(
            f"Subgroup '{subgroup_id}' not found in round {self.round_number}",
            context=ErrorContext(operation="get_subgroup"),
        )

    def mark_completed(self, subgroup_id: str, completed: bool = True) -> Subgroup:
        """Set one subgroup's flag and recompute the round flag."""
        subgroup = self.get_subgroup(subgroup_id)
        subgroup.completed = completed
        self.completed = bool(self.subgroups) and all(s.completed for s in self.subgroups)
        return subgroup


def build_rounds(schedule: Schedule) -> list[SubgroupRound]:
    """Wrap a raw schedule into SubgroupRound records with fresh ids.

    The schedule itself is left untouched; every member list is copied.
    """
    return [
        SubgroupRound(
            round_number=index + 1,
            subgroups=[Subgroup(members=list(group)) for group in rnd],
        )
        for index, rnd in enumerate(schedule)
    ]
