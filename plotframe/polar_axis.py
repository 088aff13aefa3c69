"""Tick placement and label alignment for the angular and radial axes of a polar chart."""

from __future__ import annotations

import math
from enum import Enum

from plotframe.axis import Axis, value_delta

_N_ANGLE_TICKS = 6
_N_RADIUS_TICKS = 4


class HorizAlign(Enum):
    """Horizontal anchoring of a text label."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VertAlign(Enum):
    """Vertical anchoring of a text label."""

    BOTTOM = "bottom"
    BASELINE_BOTTOM = "baseline_bottom"
    CENTER = "center"
    TOP = "top"


def text_angle_align(theta: float) -> tuple[HorizAlign, VertAlign]:
    """Return the label alignment for a label placed outward at angle ``theta`` (radians)."""
    tau = 2.0 * math.pi
    theta = math.fmod(theta + tau, tau)
    center = math.pi / 12.0

    if math.pi / 2.0 - center < theta < math.pi / 2.0 + center:
        halign = HorizAlign.CENTER
    elif math.pi / 2.0 < theta < 3.0 * math.pi / 2.0:
        halign = HorizAlign.RIGHT
    else:
        halign = HorizAlign.LEFT

    if theta < center or tau - center < theta:
        valign = VertAlign.CENTER
    elif math.pi - center < theta < math.pi + center:
        valign = VertAlign.CENTER
    elif theta < math.pi:
        valign = VertAlign.BOTTOM
    else:
        valign = VertAlign.TOP

    return halign, valign


def _label(axis: Axis, index: int, value: float, delta: float) -> str:
    if axis.labels is not None:
        if index >= len(axis.labels):
            raise IndexError(f"no label for tick {index}")
        return axis.labels[index]
    return axis.major.format(axis, value, delta)


def polar_x_ticks(axis: Axis, xmin: float, xmax: float) -> list[tuple[float, str]]:
    """Return the angular ticks inside ``[xmin, xmax]`` with their labels.

    Without fixed ticks, six evenly spaced values starting at zero are used.
    """
    if axis.ticks is not None:
        values = list(axis.ticks)
    else:
        dx = (xmax - xmin) / _N_ANGLE_TICKS
        values = [i * dx for i in range(_N_ANGLE_TICKS)]

    delta = value_delta(values)
    return [
        (value, _label(axis, i, value, delta))
        for i, value in enumerate(values)
        if xmin <= value <= xmax
    ]


def polar_y_ticks(axis: Axis, ymin: float, ymax: float) -> list[tuple[float, str]]:
    """Return the radial ticks within the largest absolute radius, with their labels.

    Without fixed ticks, four evenly spaced radii ending at that radius are used.
    """
    radius = max(abs(ymin), abs(ymax))

    if axis.ticks is not None:
        values = list(axis.ticks)
    else:
        dy = radius / _N_RADIUS_TICKS
        values = [i * dy for i in range(1, _N_RADIUS_TICKS + 1)]

    delta = value_delta(values)
    return [
        (value, _label(axis, i, value, delta))
        for i, value in enumerate(values)
        if abs(value) <= radius
    ]