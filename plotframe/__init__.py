"""Chart frame layout: tick placement and labels, configuration, styles, bounds, axes and polar axes."""

__version__ = "0.1.0"

__all__ = [
    "axis",
    "bounds",
    "config",
    "cycle",
    "data_frame",
    "polar_axis",
    "style",
    "tick_formatter",
    "tick_locator",
]