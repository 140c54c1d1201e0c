"""Stopwatch used to time a Schulte run."""

from __future__ import annotations

import time
from enum import Enum, auto


class TimerState(Enum):
    RUNNING = auto()
    PAUSED = auto()
    STOPPED = auto()


class GameplayTimer:
    """A stopwatch measured in seconds.

    Times are monotonic clock readings in seconds. Every mutating method
    returns the timer itself so calls can be chained.
    """

    def __init__(self) -> None:
        self._state = TimerState.PAUSED
        self._elapsed = 0.0
        self._last_update = time.monotonic()

    def __repr__(self) -> str:
        return f"GameplayTimer(state={self._state.name}, elapsed={self._elapsed!r})"

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def elapsed(self) -> float:
        """Seconds accumulated so far."""
        return self._elapsed

    def resume_at(self, at: float) -> GameplayTimer:
        """Start running from the instant ``at`` if currently paused."""
        if self._state is TimerState.PAUSED:
            self._state = TimerState.RUNNING
            self._last_update = at
        return self

    def resume(self) -> GameplayTimer:
        return self.resume_at(time.monotonic())

    def pause(self) -> GameplayTimer:
        if self._state is TimerState.RUNNING:
            self._state = TimerState.PAUSED
        return self

    def stop(self) -> GameplayTimer:
        self._state = TimerState.STOPPED
        return self

    def reset(self) -> GameplayTimer:
        self._state = TimerState.PAUSED
        self._elapsed = 0.0
        return self

    def tick_at(self, at: float) -> GameplayTimer:
        """Accumulate time up to ``at`` if running."""
        if self._state is TimerState.RUNNING:
            self.force_tick_at(at)
        return self

    def tick_duration(self, dur: float) -> GameplayTimer:
        """Accumulate ``dur`` seconds if running."""
        if self._state is TimerState.RUNNING:
            self.force_tick_duration(dur)
        return self

    def tick(self) -> GameplayTimer:
        return self.tick_at(time.monotonic())

    def force_tick_duration(self, dur: float) -> GameplayTimer:
        """Accumulate ``dur`` seconds regardless of state."""
        self._elapsed += dur
        self._last_update += dur
        return self

    def force_tick_at(self, at: float) -> GameplayTimer:
        """Accumulate time up to ``at`` regardless of state.

        An instant earlier than the last update adds nothing.
        """
        self._elapsed += max(0.0, at - self._last_update)
        self._last_update = at
        return self


def format_elapsed(elapsed: float) -> str:
    """Format seconds as ``MM:SS.mmm``; whole hours wrap around."""
    total_micros = round(max(0.0, elapsed) * 1_000_000)
    total_seconds, micros = divmod(total_micros, 1_000_000)
    minutes = (total_seconds // 60) % 60
    seconds = total_seconds % 60
    return f"{minutes:02}:{seconds:02}.{micros // 1000:03}"