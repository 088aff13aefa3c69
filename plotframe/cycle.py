"""Style cycles: per-series colors, widths and line styles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from plotframe.config import Config
from plotframe.style import PathStyle

DEFAULT_COLORS: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


def parse_palette(text: str) -> tuple[str, ...]:
    """Parse a comma separated list of colors."""
    colors = tuple(
        part.strip().strip("\"'") for part in text.strip().strip("[]").split(",")
    )
    colors = tuple(c for c in colors if c)
    if not colors:
        raise ValueError("palette has no colors")
    return colors


def _pick(values: Optional[Sequence], index: int):
    if not values:
        return None
    return values[index % len(values)]


@dataclass
class StyleCycle:
    """Property lists indexed by series number, wrapping around."""

    colors: Optional[tuple[str, ...]] = None
    fill_colors: Optional[tuple[str, ...]] = None
    edge_colors: Optional[tuple[str, ...]] = None
    line_widths: tuple[float, ...] = field(default_factory=tuple)
    line_styles: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(cls, cfg: Config, prefix: str) -> "StyleCycle":
        """Read ``colors`` under ``prefix``, using the default palette if absent."""
        palette = cfg.get_as_type(prefix, "colors", parse_palette)
        return cls(colors=palette if palette is not None else DEFAULT_COLORS)

    def style_for(self, prev: PathStyle, index: int, n: int) -> PathStyle:
        """Return the style of series ``index`` out of ``n`` drawn over ``prev``."""
        if n <= 0:
            raise ValueError("number of series must be positive")

        color = _pick(self.colors, index)
        fill = _pick(self.fill_colors, index)
        edge = _pick(self.edge_colors, index)

        face_color = fill if fill is not None else color
        if face_color is None:
            face_color = prev.fill()
        edge_color = edge if edge is not None else color
        if edge_color is None:
            edge_color = prev.edge()

        return PathStyle(
            face_color=face_color,
            edge_color=edge_color,
            line_style=(
                _pick(self.line_styles, index) if self.line_styles else prev.line_style
            ),
            line_width=(
                _pick(self.line_widths, index) if self.line_widths else prev.line_width
            ),
            join_style=prev.join_style,
            cap_style=prev.cap_style,
            alpha=prev.alpha,
            texture=prev.texture,
            hatch=prev.hatch,
        )