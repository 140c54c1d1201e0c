"""Colours of the Schulte board and the tween that fades cell backgrounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgb8(self) -> tuple[int, int, int]:
        """Return the colour as an 8-bit (red, green, blue) tuple."""
        return tuple(
            round(min(1.0, max(0.0, c)) * 255) for c in (self.r, self.g, self.b)
        )

    def lerp(self, other: Color, t: float) -> Color:
        """Blend linearly towards ``other``; ``t`` of 0 is self, 1 is other."""
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )


DEFAULT_BUTTON_COLOR = Color(0.85, 0.53, 0.54)
HOVERED_BUTTON_COLOR = Color(0.4, 0.4, 0.4)
PRESSED_BUTTON_COLOR = Color(0.2, 0.2, 0.2)
DISABLED_BUTTON_COLOR = Color(0.2, 0.2, 0.2)

CORRECT_START_COLOR = Color(0.21, 0.36, 0.22)
INCORRECT_START_COLOR = Color(0.69, 0.32, 0.36)

GRID_CONTAINER_COLOR = Color(0.24, 0.24, 0.24)

FEEDBACK_TWEEN_SECONDS = 0.5


def ease_cubic_in(t: float) -> float:
    """Cubic ease-in: slow start, fast finish."""
    return t * t * t


@dataclass
class ColorTween:
    """Animates a colour from ``start`` to ``end`` over ``duration`` seconds."""

    start: Color
    end: Color
    duration: float = FEEDBACK_TWEEN_SECONDS
    easing: Callable[[float], float] = ease_cubic_in
    elapsed: float = 0.0

    @property
    def progress(self) -> float:
        """Fraction of the animation done, clamped to 0.0..1.0."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, self.elapsed / self.duration))

    @property
    def finished(self) -> bool:
        return self.progress >= 1.0

    def advance(self, dt: float) -> Color:
        """Move the animation forward by ``dt`` seconds and return the colour."""
        self.elapsed = min(self.elapsed + dt, max(self.duration, 0.0))
        return self.current()

    def current(self) -> Color:
        """The colour at the current point of the animation."""
        return self.start.lerp(self.end, self.easing(self.progress))