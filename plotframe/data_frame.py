"""The data area of a chart: view limits, margins, aspect and data-to-canvas mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from plotframe.bounds import Bounds
from plotframe.config import Config

# Smallest relative float32 step; guards ratios against zero heights.
_EPSILON = float(np.finfo(np.float32).eps)


class Scaling(Enum):
    """How the view is fitted around the data."""

    AUTO = "auto"
    IMAGE = "image"


class AspectMode(Enum):
    """What is adjusted to honour a fixed aspect ratio."""

    BOUNDING_BOX = "bounding_box"
    VIEW = "view"


@dataclass(frozen=True)
class FrameMargins:
    """Fractions of the available area that a frame occupies."""

    top: float = 1.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 1.0

    @classmethod
    def from_config(cls, cfg: Config) -> "FrameMargins":
        """Read ``figure.subplot`` margins, defaulting to the whole area."""

        def read(name: str, default: float) -> float:
            value = cfg.get_as_type("figure.subplot", name, float)
            return default if value is None else value

        return cls(
            top=read("top", 1.0),
            bottom=read("bottom", 0.0),
            left=read("left", 0.0),
            right=read("right", 1.0),
        )

    def apply(self, pos: Bounds) -> Bounds:
        """Return the part of ``pos`` inside these margins."""
        width, height = pos.width(), pos.height()
        return Bounds.from_corners(
            pos.xmin + width * self.left,
            pos.ymin + height * self.top,
            pos.xmin + width * self.right,
            pos.ymin + height * self.bottom,
        )


def _affine_to(src: Bounds, dst: Bounds) -> np.ndarray:
    """Return the 3x3 affine matrix mapping ``src`` onto ``dst``."""
    sx = dst.width() / src.width()
    sy = dst.height() / src.height()
    return np.array(
        [
            [sx, 0.0, dst.xmin - src.xmin * sx],
            [0.0, sy, dst.ymin - src.ymin * sy],
            [0.0, 0.0, 1.0],
        ]
    )


def _flip_y(pos: Bounds) -> np.ndarray:
    """Return the affine matrix that mirrors the canvas vertically within ``pos``."""
    return np.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, -1.0, pos.ymax + pos.ymin],
            [0.0, 0.0, 1.0],
        ]
    )


@dataclass
class DataFrame:
    """The plotting area: fits a view around the data and maps it to the canvas."""

    x_margin: Optional[float] = None
    y_margin: Optional[float] = None
    x_lim: Optional[tuple[float, float]] = None
    y_lim: Optional[tuple[float, float]] = None
    scaling: Scaling = Scaling.AUTO
    aspect: Optional[float] = None
    aspect_mode: AspectMode = AspectMode.BOUNDING_BOX
    is_flip_y: bool = False
    pan_zoom_bounds: Optional[Bounds] = None

    pos: Bounds = field(default_factory=Bounds.none)
    raw_data_bounds: Bounds = field(default_factory=Bounds.unit)
    view_bounds: Bounds = field(default_factory=Bounds.unit)
    to_canvas: np.ndarray = field(default_factory=lambda: np.eye(3))
    stale_data_bounds: int = 0

    @classmethod
    def from_config(cls, cfg: Config, prefix: str) -> "DataFrame":
        """Read the ``x_margin`` and ``y_margin`` settings under ``prefix``."""
        return cls(
            x_margin=cfg.get_as_type(prefix, "x_margin", float),
            y_margin=cfg.get_as_type(prefix, "y_margin", float),
        )

    def xlim(self, x_min: float, x_max: float) -> "DataFrame":
        """Fix the horizontal view limits."""
        if not x_min < x_max:
            raise ValueError(f"xlim needs x_min < x_max, got {x_min}, {x_max}")
        self.x_lim = (x_min, x_max)
        return self

    def ylim(self, y_min: float, y_max: float) -> "DataFrame":
        """Fix the vertical view limits."""
        if not y_min < y_max:
            raise ValueError(f"ylim needs y_min < y_max, got {y_min}, {y_max}")
        self.y_lim = (y_min, y_max)
        return self

    def update_view(self, data_bounds: Bounds) -> Bounds:
        """Compute and store the view around ``data_bounds``; return it."""
        xmin, xmax = data_bounds.xmin, data_bounds.xmax
        ymin, ymax = data_bounds.ymin, data_bounds.ymax
        width, height = data_bounds.width(), data_bounds.height()

        if self.scaling is Scaling.AUTO and self.aspect is None:
            if self.x_margin is not None:
                xmin -= self.x_margin * width
                xmax += self.x_margin * width
            if self.y_margin is not None:
                ymin -= self.y_margin * height
                ymax += self.y_margin * height

        if xmin == xmax:
            xmin, xmax = xmin - 1.0, xmax + 1.0
        if ymin == ymax:
            ymin, ymax = ymin - 1.0, ymax + 1.0

        if self.x_lim is not None:
            xmin, xmax = self.x_lim
        if self.y_lim is not None:
            ymin, ymax = self.y_lim

        self.view_bounds = Bounds(xmin, ymin, xmax, ymax)
        return self.view_bounds

    def update_pos(self, pos: Bounds, data_bounds: Bounds = Bounds.none()) -> Bounds:
        """Fit the view to ``data_bounds`` inside canvas ``pos``; return the used area."""
        bounds = data_bounds.or_else(Bounds.unit())
        if bounds != self.raw_data_bounds:
            self.stale_data_bounds += 1
        self.raw_data_bounds = bounds

        self.update_view(bounds)
        self.pos = pos

        if self.aspect_mode is AspectMode.BOUNDING_BOX:
            self._update_aspect_pos()
        else:
            self._update_aspect_view()

        affine = _affine_to(self.data_bounds(), self.pos)
        if self.is_flip_y:
            affine = _flip_y(self.pos) @ affine
        self.to_canvas = affine
        return self.pos

    def data_bounds(self) -> Bounds:
        """The visible data range: the pan/zoom bounds if set, else the view."""
        if self.pan_zoom_bounds is not None:
            return self.pan_zoom_bounds
        return self.view_bounds

    def _update_aspect_view(self) -> None:
        if self.aspect is None:
            return
        view = self.view_bounds
        if view.height() < view.width():
            h2 = view.width() * 0.5
            ymid = view.ymid()
            self.view_bounds = Bounds(view.xmin, ymid - h2, view.xmax, ymid + h2)
        else:
            w2 = view.height() * 0.5
            xmid = view.xmid()
            self.view_bounds = Bounds(xmid - w2, view.ymin, xmid + w2, view.ymax)

    def _update_aspect_pos(self) -> None:
        if self.aspect is None:
            return
        view = self.view_bounds
        view_ratio = view.width() / max(view.height(), _EPSILON)
        pos = self.pos
        pos_ratio = pos.width() / max(pos.height(), _EPSILON)

        if pos_ratio < view_ratio:
            h2 = pos.width() * 0.5 / view_ratio
            ymid = pos.ymid()
            self.pos = Bounds(pos.xmin, ymid - h2, pos.xmax, ymid + h2)
        else:
            w2 = pos.height() * 0.5 * view_ratio
            xmid = pos.xmid()
            self.pos = Bounds(xmid - w2, pos.ymin, xmid + w2, pos.ymax)

    def __repr__(self) -> str:
        view = self.view_bounds
        return f"DataBox({view.xmin},{view.ymin}; {view.width()}x{view.height()})"