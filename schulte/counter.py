"""Tracks which number the player has to click next."""

from __future__ import annotations

from dataclasses import dataclass

START_LEVEL = 0


class CheckResult:
    """Outcome of clicking a cell."""


@dataclass(frozen=True)
class Correct(CheckResult):
    """The cell was the next one; ``is_first`` marks the start of a run."""

    is_first: bool


@dataclass(frozen=True)
class Visited(CheckResult):
    """The cell was already cleared."""


@dataclass(frozen=True)
class Incorrect(CheckResult):
    """The cell is further ahead than the next number."""


class SequentialCounter:
    """Counts progress through the numbers 1..max_level in order."""

    def __init__(self, max_level: int) -> None:
        if max_level < 0:
            raise ValueError("max_level must not be negative")
        self._current_level = START_LEVEL
        self._max_level = max_level

    def __repr__(self) -> str:
        return (
            f"SequentialCounter(current_level={self._current_level}, "
            f"max_level={self._max_level})"
        )

    @property
    def current_level(self) -> int:
        """The highest number cleared so far."""
        return self._current_level

    @property
    def max_level(self) -> int:
        return self._max_level

    def visited(self, cell_index: int) -> bool:
        return cell_index <= self._current_level

    def is_level_completed(self) -> bool:
        return self._current_level >= self._max_level

    def check_cell(self, cell_index: int) -> CheckResult:
        """Check a clicked cell, advancing the counter when it is the next one."""
        if cell_index == self._current_level + 1:
            is_first = self._current_level == START_LEVEL
            self._current_level += 1
            return Correct(is_first=is_first)
        if cell_index <= self._current_level:
            return Visited()
        return Incorrect()