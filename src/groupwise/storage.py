"""Key-value store for group records.

Groups are kept as one JSON document holding a single fixed key, so the
file stays readable and easy to move between machines:

    {"groupwise-groups": [{"id": "...", "name": "...", "members": [...],
                           "created_at": "2026-01-01T00:00:00+00:00"}]}

This is deliberately a single-user store: there is no locking, and every
write replaces the whole document.

Example:
    >>> from groupwise.models import Group
    >>> from groupwise.storage import GroupStore
    >>> store = GroupStore("groups.json")
    >>> group = store.add(Group.create("Book club", ["Ann", "Ben"]))
    >>> store.get(group.id).members
    ['Ann', 'Ben']
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from groupwise.errors import ErrorContext, GroupNotFoundError, StoreError
from groupwise.models import Group

logger = logging.getLogger(__name__)

STORAGE_KEY = "groupwise-groups"


class GroupStore:
    """CRUD access to groups persisted in a JSON file.

    Attributes:
        path: Location of the JSON document. Created on first write.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def list_groups(self) -> list[Group]:
        """All groups in insertion order."""
        return self._load()

    def get(self, group_id: str) -> Group:
        """Get a group by id.

        Raises:
            GroupNotFoundError: If no group has this id.
        """
        for group in self._load():
            if group.id == group_id:
                return group
        raise GroupNotFoundError(
            f"Group '{group_id}' not found",
            context=ErrorContext(group_id=group_id, operation="get"),
        )

    def add(self, group: Group) -> Group:
        groups = self._load()
        groups.append(group)
        self._save(groups)
        logger.info(f"Added group '{group.name}' ({group.id})")
        return group

    def update(self, group: Group) -> Group:
        """Replace the stored group with the same id.

        Raises:
            GroupNotFoundError: If no group has this id.
        """
        groups = self._load()
        for index, existing in enumerate(groups):
            if existing.id == group.id:
                groups[index] = group
                self._save(groups)
                logger.info(f"Updated group '{group.name}' ({group.id})")
                return group
        raise GroupNotFoundError(
            f"Group '{group.id}' not found",
            context=ErrorContext(group_id=group.id, operation="update"),
        )

    def delete(self, group_id: str) -> bool:
        """Delete a group. Unknown ids are ignored.

        Returns:
            True if a group was removed.
        """
        groups = self._load()
        remaining = [g for g in groups if g.id != group_id]
        if len(remaining) == len(groups):
            return False
        self._save(remaining)
        logger.info(f"Deleted group {group_id}")
        return True

    def _load(self) -> list[Group]:
        if not self.path.exists():
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(
                f"Store file is not valid JSON: {e}",
                context=ErrorContext(operation="load", extra={"path": str(self.path)}),
                cause=e,
            ) from e

        if not isinstance(document, dict):
            raise StoreError(
                f"Store must be a JSON object, got {type(document).__name__}",
                context=ErrorContext(operation="load", extra={"path": str(self.path)}),
            )

        records: Any = document.get(STORAGE_KEY, [])
        if not isinstance(records, list):
            raise StoreError(
                f"'{STORAGE_KEY}' must be a list of groups",
                context=ErrorContext(operation="load", extra={"path": str(self.path)}),
            )

        try:
            return [Group.model_validate(record) for record in records]
        except PydanticValidationError as e:
            raise StoreError(
                f"Store contains an invalid group record: {e.error_count()} error(s)",
                context=ErrorContext(operation="load", extra={"path": str(self.path)}),
                cause=e,
            ) from e

    def _save(self, groups: list[Group]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = {STORAGE_KEY: [g.model_dump(mode="json") for g in groups]}

        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".groupwise-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(
                f"Could not write store file: {e}",
                context=ErrorContext(operation="save", extra={"path": str(self.path)}),
                cause=e,
            ) from e

    def __repr__(self) -> str:
        return f"GroupStore({str(self.path)!r})"
