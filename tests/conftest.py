"""Pytest fixtures for groupwise tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from groupwise.storage import GroupStore


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Keep stray config files and GROUPWISE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("GROUPWISE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def four_members() -> list[str]:
    return ["A", "B", "C", "D"]


@pytest.fixture
def five_members() -> list[str]:
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def six_members() -> list[str]:
    return ["A", "B", "C", "D", "E", "F"]


@pytest.fixture
def team() -> list[str]:
    return ["Alice", "Bob", "Charlie", "Diana"]


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "store" / "groups.json"


@pytest.fixture
def store(store_path: Path) -> GroupStore:
    return GroupStore(store_path)

