"""Tick label formatting."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

_f32 = np.float32


@runtime_checkable
class TickFormatter(Protocol):
    """Turns a tick value into a label, given the spacing between ticks."""

    def format(self, value: float, delta: float) -> str:
        """Return the label for ``value`` when ticks are ``delta`` apart."""


class Formatter(Enum):
    """Built-in tick formatters."""

    PLAIN = "plain"

    def format(self, value: float, delta: float) -> str:
        if self is Formatter.PLAIN:
            return format_tick(value, delta)
        raise ValueError(f"unknown formatter {self!r}")


def format_tick(value: float, delta: float) -> str:
    """Format ``value`` with just enough decimals to tell ticks ``delta`` apart."""
    spacing = _f32(delta)
    # nudge up so that 0.19999 and 0.2004 both read as 0.2
    spacing = spacing + spacing * _f32(1e-2)
    if spacing == 0:
        raise ValueError("tick spacing must be nonzero")

    with np.errstate(all="ignore"):
        magnitude = np.log10(spacing)
    precision = 0 if np.isnan(magnitude) else max(-np.floor(magnitude), 0.0)
    precision = int(precision) if np.isfinite(precision) else 0

    # spacings such as 0.25 need one more digit than their magnitude suggests
    with np.errstate(all="ignore"):
        p_digit = _f32(10.0) ** _f32(-precision)
        rem = np.fmod(spacing, p_digit)
        rem = np.fmin(rem, p_digit - rem)
        if rem > 0:
            rem_magnitude = np.log10(rem)
            if -2.0 < rem_magnitude < -1.0:
                precision += 1

    number = float(_f32(value))
    if np.isnan(number):
        return "NaN"
    if np.isinf(number):
        return "inf" if number > 0 else "-inf"
    return f"{number:.{precision}f}"