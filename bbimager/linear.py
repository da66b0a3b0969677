"""State and geometry of a sliding linear progress indicator."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

Color = Tuple[float, float, float, float]


@dataclass
class LinearState:
    """Redraw timestamps of a linear indicator, in seconds."""

    start: Optional[float] = None
    last_redraw: Optional[float] = None

    def redraw(self, now: float) -> None:
        """Record a redraw; the first one also marks the start."""
        self.last_redraw = now
        if self.start is None:
            self.start = now

    def progress(self, cycle_duration: float) -> float:
        """Fraction of the current cycle that has passed."""
        if self.start is None or self.last_redraw is None:
            return 0.0
        elapsed = max(self.last_redraw - self.start, 0.0)
        return (elapsed % cycle_duration) / cycle_duration


@dataclass(frozen=True)
class Linear:
    """Configuration of a linear indicator; durations are in seconds."""

    height: float = 8.0
    cycle_duration: float = 1.0
    bar_width_ratio: float = 0.3
    color: Color = (0.0, 0.5, 1.0, 1.0)

    def with_height(self, height: float) -> "Linear":
        return replace(self, height=height)

    def with_cycle_duration(self, duration: float) -> "Linear":
        return replace(self, cycle_duration=duration)

    def with_bar_width_ratio(self, ratio: float) -> "Linear":
        """Set the bar's share of the width, clamped to 0.1..0.8."""
        return replace(self, bar_width_ratio=min(max(ratio, 0.1), 0.8))

    def with_color(self, color: Color) -> "Linear":
        return replace(self, color=tuple(color))

    def bar_bounds(
        self, state: LinearState, x: float, y: float, width: float, height: float
    ) -> tuple[float, float, float, float]:
        """Return (x, y, width, height) of the moving bar within the given bounds."""
        bar_width = width * self.bar_width_ratio
        offset = (width - bar_width) * state.progress(self.cycle_duration)
        return (x + offset, y, bar_width, height)