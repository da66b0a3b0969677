"""State and geometry of a spinning circular progress indicator."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace

from bbimager.easing import STANDARD, Easing

U32_MAX = 0xFFFF_FFFF
_U32_MOD = 1 << 32

MIN_ANGLE = math.pi / 8.0
WRAP_ANGLE = 2.0 * math.pi - math.pi / 4.0
BASE_ROTATION_SPEED = U32_MAX // 80

_WRAP_ROTATION = int(WRAP_ANGLE / (2.0 * math.pi) * U32_MAX)


def _to_u32(value: float) -> int:
    """Convert a float to an unsigned 32-bit integer, saturating at the bounds."""
    if math.isnan(value) or value <= 0.0:
        return 0
    return min(int(value), U32_MAX)


def _wrapping_add(a: int, b: int) -> int:
    return (a + b) % _U32_MOD


class AnimationPhase(enum.Enum):
    EXPANDING = "expanding"
    CONTRACTING = "contracting"


@dataclass(frozen=True)
class Animation:
    """One phase of the arc animation; times are in seconds."""

    phase: AnimationPhase
    start: float
    progress: float
    rotation: int
    last: float

    @staticmethod
    def initial(now: float) -> "Animation":
        return Animation(AnimationPhase.EXPANDING, now, 0.0, 0, now)

    def next(self, additional_rotation: int, now: float) -> "Animation":
        """Switch to the other phase, starting at ``now``."""
        if self.phase is AnimationPhase.EXPANDING:
            return Animation(
                AnimationPhase.CONTRACTING,
                now,
                0.0,
                _wrapping_add(self.rotation, additional_rotation),
                now,
            )
        return Animation(
            AnimationPhase.EXPANDING,
            now,
            0.0,
            _wrapping_add(self.rotation, _wrapping_add(BASE_ROTATION_SPEED, _WRAP_ROTATION)),
            now,
        )

    def timed_transition(
        self, cycle_duration: float, rotation_duration: float, now: float
    ) -> "Animation":
        """Advance the animation to ``now``."""
        elapsed = max(now - self.start, 0.0)
        additional_rotation = _to_u32((now - self.last) / rotation_duration * U32_MAX)
        if elapsed > cycle_duration:
            return self.next(additional_rotation, now)
        return self.with_elapsed(cycle_duration, additional_rotation, elapsed, now)

    def with_elapsed(
        self, cycle_duration: float, additional_rotation: int, elapsed: float, now: float
    ) -> "Animation":
        return replace(
            self,
            progress=elapsed / cycle_duration,
            rotation=_wrapping_add(self.rotation, additional_rotation),
            last=now,
        )

    def rotation_fraction(self) -> float:
        """Rotation as a fraction of a full turn."""
        return self.rotation / U32_MAX


@dataclass(frozen=True)
class Circular:
    """Configuration of a circular indicator; durations are in seconds."""

    size: float = 40.0
    bar_height: float = 4.0
    easing: Easing = field(default_factory=lambda: STANDARD)
    cycle_duration: float = 0.6
    rotation_duration: float = 2.0

    def with_size(self, size: float) -> "Circular":
        return replace(self, size=size)

    def with_bar_height(self, bar_height: float) -> "Circular":
        return replace(self, bar_height=bar_height)

    def with_easing(self, easing: Easing) -> "Circular":
        return replace(self, easing=easing)

    def with_cycle_duration(self, duration: float) -> "Circular":
        """Set a full expand-and-contract cycle; each phase takes half of it."""
        return replace(self, cycle_duration=duration / 2)

    def with_rotation_duration(self, duration: float) -> "Circular":
        return replace(self, rotation_duration=duration)

    def track_radius(self, width: float) -> float:
        return width / 2.0 - self.bar_height

    def arc(self, animation: Animation) -> tuple[float, float]:
        """Return the (start, end) angles in radians of the bar for ``animation``."""
        start = animation.rotation_fraction() * 2.0 * math.pi
        eased = self.easing.y_at_x(animation.progress)
        if animation.phase is AnimationPhase.EXPANDING:
            return start, start + MIN_ANGLE + WRAP_ANGLE * eased
        return start + WRAP_ANGLE * eased, start + MIN_ANGLE + WRAP_ANGLE