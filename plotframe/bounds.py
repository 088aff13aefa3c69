"""Axis-aligned rectangular bounds in data or canvas coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Bounds:
    """A rectangle given by its minimum and maximum corners.

    The "none" bounds hold NaN coordinates and stand for an empty extent.
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> "Bounds":
        """Build bounds from two opposite corners in any order."""
        return cls(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    @classmethod
    def none(cls) -> "Bounds":
        """Return the empty bounds."""
        nan = math.nan
        return cls(nan, nan, nan, nan)

    @classmethod
    def unit(cls) -> "Bounds":
        """Return the unit square from (0, 0) to (1, 1)."""
        return cls(0.0, 0.0, 1.0, 1.0)

    def is_none(self) -> bool:
        return any(math.isnan(v) for v in self._coords())

    def width(self) -> float:
        return self.xmax - self.xmin

    def height(self) -> float:
        return self.ymax - self.ymin

    def xmid(self) -> float:
        return 0.5 * (self.xmin + self.xmax)

    def ymid(self) -> float:
        return 0.5 * (self.ymin + self.ymax)

    def union(self, other: "Bounds") -> "Bounds":
        """Return the smallest bounds holding both; empty bounds are ignored."""
        if self.is_none():
            return other
        if other.is_none():
            return self
        return Bounds(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def or_else(self, other: "Bounds") -> "Bounds":
        """Return these bounds, or ``other`` when these are empty."""
        return other if self.is_none() else self

    def _coords(self) -> tuple[float, float, float, float]:
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()
        return self._coords() == other._coords()

    def __hash__(self) -> int:
        if self.is_none():
            return hash("Bounds.none")
        return hash(self._coords())