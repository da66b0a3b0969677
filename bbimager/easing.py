"""Easing curves sampled by normalised arc length along a path in the unit square."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate, pairwise
from math import hypot
from typing import Sequence, Tuple

Point = Tuple[float, float]

_CURVE_STEPS = 64


def _clamp_point(p: Sequence[float]) -> Point:
    x, y = p
    return (min(max(float(x), 0.0), 1.0), min(max(float(y), 0.0), 1.0))


class Easing:
    """A curve from (0, 0) to (1, 1); ``y_at_x`` samples it by travelled length."""

    def __init__(self, points: Sequence[Point]) -> None:
        if not points:
            raise ValueError("an easing path needs at least one point")
        self._points = list(points)
        self._lengths = [0.0, *accumulate(hypot(bx - ax, by - ay) for (ax, ay), (bx, by) in pairwise(self._points))]

    @staticmethod
    def builder() -> "EasingBuilder":
        """Start a new path at (0, 0)."""
        return EasingBuilder()

    @property
    def length(self) -> float:
        return self._lengths[-1]

    def y_at_x(self, x: float) -> float:
        """Return the y of the point found at fraction ``x`` of the path's length."""
        total = self.length
        if total == 0.0 or len(self._points) == 1:
            return self._points[0][1]
        target = min(max(x, 0.0), 1.0) * total
        i = min(bisect_right(self._lengths, target) - 1, len(self._points) - 2)
        seg_start, seg_end = self._lengths[i], self._lengths[i + 1]
        (_, ay), (_, by) = self._points[i], self._points[i + 1]
        span = seg_end - seg_start
        if span == 0.0:
            return by
        t = (target - seg_start) / span
        return ay + (by - ay) * t


class EasingBuilder:
    """Builds an :class:`Easing`; every point is clamped into the unit square."""

    def __init__(self) -> None:
        self._points: list[Point] = [(0.0, 0.0)]

    @property
    def _current(self) -> Point:
        return self._points[-1]

    def line_to(self, to: Sequence[float]) -> "EasingBuilder":
        """Add a straight segment."""
        self._points.append(_clamp_point(to))
        return self

    def quadratic_bezier_to(self, ctrl: Sequence[float], to: Sequence[float]) -> "EasingBuilder":
        """Add a quadratic Bézier curve."""
        (x0, y0), (x1, y1), (x2, y2) = self._current, _clamp_point(ctrl), _clamp_point(to)
        for step in range(1, _CURVE_STEPS + 1):
            t = step / _CURVE_STEPS
            u = 1.0 - t
            self._points.append(
                (u * u * x0 + 2 * u * t * x1 + t * t * x2, u * u * y0 + 2 * u * t * y1 + t * t * y2)
            )
        return self

    def cubic_bezier_to(
        self, ctrl1: Sequence[float], ctrl2: Sequence[float], to: Sequence[float]
    ) -> "EasingBuilder":
        """Add a cubic Bézier curve."""
        (x0, y0) = self._current
        (x1, y1), (x2, y2), (x3, y3) = _clamp_point(ctrl1), _clamp_point(ctrl2), _clamp_point(to)
        for step in range(1, _CURVE_STEPS + 1):
            t = step / _CURVE_STEPS
            u = 1.0 - t
            a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
            self._points.append(
                (a * x0 + b * x1 + c * x2 + d * x3, a * y0 + b * y1 + c * y2 + d * y3)
            )
        return self

    def build(self) -> Easing:
        """Close the path at (1, 1) and return the easing."""
        return Easing([*self._points, (1.0, 1.0)])


EMPHASIZED = (
    Easing.builder()
    .cubic_bezier_to((0.05, 0.0), (0.133333, 0.06), (0.166666, 0.4))
    .cubic_bezier_to((0.208333, 0.82), (0.25, 1.0), (1.0, 1.0))
    .build()
)

EMPHASIZED_DECELERATE = (
    Easing.builder().cubic_bezier_to((0.05, 0.7), (0.1, 1.0), (1.0, 1.0)).build()
)

EMPHASIZED_ACCELERATE = (
    Easing.builder().cubic_bezier_to((0.3, 0.0), (0.8, 0.15), (1.0, 1.0)).build()
)

STANDARD = Easing.builder().cubic_bezier_to((0.2, 0.0), (0.0, 1.0), (1.0, 1.0)).build()

STANDARD_DECELERATE = (
    Easing.builder().cubic_bezier_to((0.0, 0.0), (0.0, 1.0), (1.0, 1.0)).build()
)

STANDARD_ACCELERATE = (
    Easing.builder().cubic_bezier_to((0.3, 0.0), (1.0, 1.0), (1.0, 1.0)).build()
)