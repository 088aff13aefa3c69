"""Tick locators: choose where axis ticks fall for a given value range."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np

_f32 = np.float32


def _round_half_away(x: np.float32) -> np.float32:
    """Round to the nearest integer, halves away from zero."""
    whole = np.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += np.copysign(_f32(1.0), x)
    return _f32(whole)


class TickLocator(ABC):
    """Chooses tick positions and view limits for an axis."""

    @abstractmethod
    def tick_values(self, vmin, vmax) -> np.ndarray:
        """Return the tick positions for the range ``vmin`` to ``vmax``."""

    def view_limits(self, vmin, vmax) -> tuple[float, float]:
        """Return the view limits for a data range; the range itself by default."""
        return float(vmin), float(vmax)


class IndexLocator(TickLocator):
    """Ticks every ``base`` units, starting ``offset`` past the minimum."""

    MAX_TICKS = 1000

    def __init__(self, base: float, offset: float) -> None:
        self.base = base
        self.offset = offset

    def tick_values(self, vmin, vmax) -> np.ndarray:
        ticks = np.arange(
            _f32(vmin) + _f32(self.offset),
            _f32(vmax) + _f32(1.0),
            _f32(self.base),
            dtype=np.float32,
        )
        if len(ticks) >= self.MAX_TICKS:
            raise ValueError(f"too many ticks: {len(ticks)}")
        return ticks


class LinearLocator(TickLocator):
    """A fixed number of evenly spaced ticks."""

    MAX_TICKS = 1000

    def __init__(self, n_ticks: int | None = None) -> None:
        self.n_ticks = 11 if n_ticks is None else n_ticks

    def tick_values(self, vmin, vmax) -> np.ndarray:
        ticks = np.linspace(_f32(vmin), _f32(vmax), self.n_ticks, dtype=np.float32)
        if len(ticks) >= self.MAX_TICKS:
            raise ValueError(f"too many ticks: {len(ticks)}")
        return ticks

    def view_limits(self, vmin, vmax) -> tuple[float, float]:
        if vmin < vmax:
            return float(vmin), float(vmax)
        if vmin == vmax:
            return float(vmin) - 1.0, float(vmax) + 1.0
        return float(vmax), float(vmin)


class MaxNLocator(TickLocator):
    """Finds up to ``n_bins`` intervals with ticks on round step multiples."""

    def __init__(self, n_bins: int | None = None) -> None:
        self.n_bins = 9 if n_bins is None else n_bins
        self.min_ticks = 2
        self._steps = np.array([1.0, 2.0, 2.5, 5.0, 10.0], dtype=np.float32)

    def with_steps(self, steps: Iterable[float]) -> "MaxNLocator":
        """Use the given step multiples, each between 1 and 10."""
        values = list(steps)
        if not values:
            raise ValueError("steps must not be empty")
        for step in values:
            if not 1.0 <= step <= 10.0:
                raise ValueError(f"step {step} is outside [1, 10]")
        self._steps = np.array(values, dtype=np.float32)
        return self

    def _raw_ticks(self, vmin, vmax) -> np.ndarray:
        scale, offset = scale_range(vmin, vmax, self.n_bins)
        scale, offset = _f32(scale), _f32(offset)

        vmin = _f32(vmin) - offset
        vmax = _f32(vmax) - offset
        raw_step = (vmax - vmin) / _f32(self.n_bins)
        steps = self._steps * scale
        istep = next((i for i, s in enumerate(steps) if raw_step < s), 0)

        ticks = np.array([1.0], dtype=np.float32)
        for step in steps[istep::-1]:
            best_vmin = np.trunc(vmin / step) * step
            low = _round_half_away((vmin - best_vmin) / step)
            high = _round_half_away((vmax - best_vmin) / step)
            ticks = np.arange(low, high + _f32(1.0), _f32(1.0), dtype=np.float32) * step + best_vmin

            in_range = np.count_nonzero((vmin <= ticks) & (ticks <= vmax))
            if in_range >= self.min_ticks:
                break

        return ticks + offset

    def tick_values(self, vmin, vmax) -> np.ndarray:
        vmin, vmax = nonsingular(vmin, vmax, 1e-13, 1e-14)
        return self._raw_ticks(vmin, vmax)

    def view_limits(self, vmin, vmax) -> tuple[float, float]:
        if vmin < vmax:
            lo, hi = vmin, vmax
        elif vmin == vmax:
            lo, hi = vmin - 1.0, vmax + 1.0
        else:
            lo, hi = vmax, vmin

        lo, hi = nonsingular(lo, hi, 1e-12, 1e-13)
        ticks = self._raw_ticks(lo, hi)
        return float(ticks[0]), float(ticks[-1])


def nonsingular(vmin, vmax, expander, tiny) -> tuple[float, float]:
    """Widen a degenerate or non-finite range so it can hold ticks."""
    vmin, vmax = _f32(vmin), _f32(vmax)
    expander, tiny = _f32(expander), _f32(tiny)

    if not (np.isfinite(vmin) and np.isfinite(vmax)):
        return float(-expander), float(expander)

    if tiny < vmax - vmin:
        return float(vmin), float(vmax)
    if vmin == 0 and vmax == 0:
        return float(-expander), float(expander)
    return float(vmin - abs(vmin) * expander), float(vmax + abs(vmax) * expander)


def scale_range(vmin, vmax, n_bins) -> tuple[float, float]:
    """Return the power-of-ten step scale and the offset for a range."""
    threshold = _f32(100.0)
    vmin, vmax = _f32(vmin), _f32(vmax)

    dv = abs(vmax - vmin)
    if dv == 0:
        return 1.0, 0.0

    with np.errstate(over="ignore"):
        vmid = (vmin + vmax) / _f32(2.0)

    if abs(vmid) / dv < threshold:
        offset = _f32(0.0)
    else:
        offset = np.copysign(_f32(10.0) ** np.floor(np.log10(abs(vmid))), vmid)

    scale = _f32(10.0) ** np.floor(np.log10(dv / _f32(n_bins)))
    return float(scale), float(offset)