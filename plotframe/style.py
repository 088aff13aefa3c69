"""Path drawing styles whose unset properties fall back to an outer style."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from plotframe.config import Config


@dataclass
class PathStyle:
    """Colors, line and fill properties for drawing a path; ``None`` means unset."""

    color: Optional[str] = None
    face_color: Optional[str] = None
    edge_color: Optional[str] = None

    line_width: Optional[float] = None
    join_style: Optional[str] = None
    cap_style: Optional[str] = None

    line_style: Optional[str] = None
    alpha: Optional[float] = None
    texture: Optional[Any] = None
    hatch: Optional[str] = None

    gap_color: Optional[str] = None

    marker: Optional[str] = None

    @classmethod
    def from_config(cls, cfg: Config, prefix: str) -> "PathStyle":
        """Read the style properties found under ``prefix`` in ``cfg``."""
        return cls(
            color=cfg.get_as_type(prefix, "color"),
            face_color=cfg.get_as_type(prefix, "face_color"),
            edge_color=cfg.get_as_type(prefix, "edge_color"),
            gap_color=cfg.get_as_type(prefix, "gap_color"),
            line_width=cfg.get_as_type(prefix, "line_width", float),
            line_style=cfg.get_as_type(prefix, "line_style"),
            join_style=cfg.get_as_type(prefix, "join_style"),
            cap_style=cfg.get_as_type(prefix, "cap_style"),
            alpha=cfg.get_as_type(prefix, "alpha", float),
            marker=cfg.get_as_type(prefix, "marker"),
        )

    def fill(self) -> Optional[str]:
        """The fill color: the face color, else the general color."""
        return self.face_color if self.face_color is not None else self.color

    def edge(self) -> Optional[str]:
        """The stroke color: the edge color, else the general color."""
        return self.edge_color if self.edge_color is not None else self.color

    def push(self, prev: "PathStyle") -> "PathStyle":
        """Return the effective style: this style's settings over ``prev``'s."""

        def pick(mine, theirs):
            return mine if mine is not None else theirs

        return PathStyle(
            color=pick(self.color, prev.color),
            face_color=pick(self.fill(), prev.fill()),
            edge_color=pick(self.edge(), prev.edge()),
            line_width=pick(self.line_width, prev.line_width),
            join_style=pick(self.join_style, prev.join_style),
            cap_style=pick(self.cap_style, prev.cap_style),
            line_style=pick(self.line_style, prev.line_style),
            alpha=pick(self.alpha, prev.alpha),
            texture=pick(self.texture, prev.texture),
            hatch=pick(self.hatch, prev.hatch),
            gap_color=self.gap_color,
            marker=self.marker,
        )

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in vars(self).items()
            if value is not None
        )
        return f"PathStyle({fields})"