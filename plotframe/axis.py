"""Axis tick configuration, tick placement and tick labelling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Sequence

import numpy as np

from plotframe.config import Config
from plotframe.style import PathStyle
from plotframe.tick_formatter import Formatter, TickFormatter
from plotframe.tick_locator import MaxNLocator, TickLocator


class ShowGrid(Enum):
    """Which grid lines an axis draws."""

    NONE = "none"
    MAJOR = "major"
    MINOR = "minor"
    BOTH = "both"

    @classmethod
    def from_bool(cls, value: bool) -> "ShowGrid":
        """``True`` shows the major grid, ``False`` shows none."""
        return cls.MAJOR if value else cls.NONE

    def is_show_major(self) -> bool:
        return self in (ShowGrid.MAJOR, ShowGrid.BOTH)

    def is_show_minor(self) -> bool:
        return self in (ShowGrid.MINOR, ShowGrid.BOTH)


def value_delta(values: Sequence[float]) -> float:
    """Return the smallest gap between neighbouring values; 1 for fewer than two."""
    if len(values) <= 1:
        return 1.0

    delta = abs(values[-1] - values[0])
    return float(min([delta, *(abs(b - a) for a, b in zip(values, values[1:]))]))


@dataclass
class AxisTicks:
    """Styles, sizes and optional overrides for one set of ticks (major or minor)."""

    grid_style: PathStyle = field(default_factory=PathStyle)
    ticks_style: PathStyle = field(default_factory=PathStyle)
    size: float = 0.0
    pad: float = 0.0
    locator: Optional[TickLocator] = None
    formatter: Optional[TickFormatter] = None

    @classmethod
    def from_config(cls, cfg: Config, prefix: str) -> "AxisTicks":
        """Read tick sizes and the grid and tick styles under ``prefix``."""
        size = cfg.get_as_type(prefix, "size", float)
        pad = cfg.get_as_type(prefix, "pad", float)
        ticks = cls(
            grid_style=PathStyle.from_config(cfg, cfg.join(prefix, "grid")),
            ticks_style=PathStyle.from_config(cfg, cfg.join(prefix, "ticks")),
            size=0.0 if size is None else size,
            pad=0.0 if pad is None else pad,
        )

        width = cfg.get_as_type(prefix, "width", float)
        if width is not None:
            ticks.ticks_style.line_width = width

        return ticks

    def format(self, axis: "Axis", value: float, delta: float) -> str:
        """Label ``value`` with this tick set's formatter, else the axis formatter."""
        formatter = self.formatter if self.formatter is not None else axis.formatter
        return formatter.format(value, delta)


@dataclass
class Axis:
    """One axis: grid display, tick locator and formatter, and fixed ticks or labels."""

    major: AxisTicks = field(default_factory=AxisTicks)
    minor: AxisTicks = field(default_factory=AxisTicks)
    show_grid: ShowGrid = ShowGrid.NONE
    locator: TickLocator = field(default_factory=MaxNLocator)
    formatter: TickFormatter = Formatter.PLAIN
    ticks: Optional[list[float]] = None
    labels: Optional[list[str]] = None
    is_visible: bool = True

    @classmethod
    def from_config(cls, cfg: Config, prefix: str) -> "Axis":
        """Build an axis whose major and minor ticks are read under ``prefix``."""
        return cls(
            major=AxisTicks.from_config(cfg, cfg.join(prefix, "major")),
            minor=AxisTicks.from_config(cfg, cfg.join(prefix, "minor")),
        )

    def set_ticks(self, ticks: Iterable[float]) -> "Axis":
        """Fix the tick positions; labels come from the formatter."""
        self.ticks = [float(t) for t in ticks]
        self.labels = None
        return self

    def set_tick_labels(self, tick_labels: Iterable[tuple[float, str]]) -> "Axis":
        """Fix the tick positions together with their labels."""
        pairs = list(tick_labels)
        self.ticks = [float(value) for value, _ in pairs]
        self.labels = [str(label) for _, label in pairs]
        return self

    def tick_values(self, vmin: float, vmax: float) -> list[float]:
        """Return candidate tick positions for the view range ``vmin`` to ``vmax``."""
        if np.isnan(vmin) or np.isnan(vmax):
            return []
        if self.ticks is not None:
            return list(self.ticks)

        lo, hi = self.locator.view_limits(vmin, vmax)
        return [float(v) for v in self.locator.tick_values(lo, hi)]

    def labeled_ticks(self, vmin: float, vmax: float) -> list[tuple[float, str]]:
        """Return the ticks inside ``[vmin, vmax]`` paired with their labels."""
        values = self.tick_values(vmin, vmax)
        delta = value_delta(values)

        result = []
        for i, value in enumerate(values):
            if not vmin <= value <= vmax:
                continue
            if self.labels is not None:
                if i >= len(self.labels):
                    raise IndexError(f"no label for tick {i}")
                label = self.labels[i]
            else:
                label = self.major.format(self, value, delta)
            result.append((value, label))
        return result