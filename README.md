# plotframe

Building blocks for laying out a chart frame. The package picks tick
positions and formats tick labels. It reads style settings from
configuration text and works out data and canvas bounds. It also places
ticks on polar axes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tick locators (`plotframe.tick_locator`)

`MaxNLocator` picks "round" tick positions for a range. By default it uses
at most 9 bins and steps of 1, 2, 2.5, 5 and 10 times a power of ten:

```python
from plotframe.tick_locator import MaxNLocator

locator = MaxNLocator()
locator.view_limits(0.0, 1.0)     # (0.0, 1.0)
locator.tick_values(10.0, 13.0)   # 10.0, 10.5, 11.0, ... 13.0
```

`MaxNLocator.with_steps(steps)` replaces the step multiples. Each step must
lie between 1 and 10, and the list must not be empty; otherwise it raises
`ValueError`.

Two other locators are available:

- `IndexLocator(base, offset)` steps by `base`, starting at `vmin + offset`.
- `LinearLocator(n_ticks)` places `n_ticks` evenly spaced ticks. The default
  is 11.

All locators share the `TickLocator` interface: `tick_values(vmin, vmax)`
returns a float32 NumPy array, and `view_limits(vmin, vmax)` returns a pair
of floats. `IndexLocator` and `LinearLocator` raise `ValueError` when asked
for 1000 or more ticks.

The helper functions are also available on their own:

- `nonsingular(vmin, vmax, expander, tiny)` widens a degenerate or
  non-finite range.
- `scale_range(vmin, vmax, n_bins)` returns the step scale and offset for a
  range.

## Tick labels (`plotframe.tick_formatter`)

```python
from plotframe.tick_formatter import Formatter, format_tick

format_tick(0.25, 0.25)              # "0.25"
Formatter.PLAIN.format(2.0, 0.5)     # "2.0"
```

The number of decimals follows the spacing between neighbouring ticks. A
spacing of zero raises `ValueError`. Any object with a
`format(value, delta)` method satisfies the `TickFormatter` protocol.

## Configuration (`plotframe.config`)

`Config.parse` reads text made of `name: value` lines:

- `#` starts a comment.
- A value in double quotes may itself contain `#`.

```python
from plotframe.config import Config

cfg = Config.parse("""
grid.line_width: 0.8
grid.color: "#b0b0b0"
""")
cfg.get("major.grid.line_width")              # "0.8"
cfg.get("grid.color")                         # "#b0b0b0"
cfg.get_as_type("major.grid", "line_width", float)   # 0.8
```

When `get` finds no exact name, it retries with leading dotted parts
removed. General settings therefore serve more specific names.

- `get_with_prefix(prefix, name)` looks up `prefix.name`.
- `get_as_type(prefix, name, kind)` converts the value with `kind` and
  returns `None` when the name is absent.

Malformed text or a value that cannot be converted raises `ConfigError`, a
subclass of `ValueError`.

## Styles and cycles

`plotframe.style.PathStyle` is a dataclass of optional path properties:

- colours: `color`, `face_color`, `edge_color`, `gap_color`;
- line properties: `line_width`, `line_style`, `join_style`, `cap_style`;
- other properties: `alpha`, `texture`, `hatch`, `marker`.

Its methods are:

- `from_config(cfg, prefix)` reads these properties from a `Config`.
- `fill()` and `edge()` give the effective face and edge colour.
- `push(prev)` layers the style over `prev`, keeping its own settings where
  they are set.

`plotframe.cycle.StyleCycle` holds per-series lists of colours, fill
colours, edge colours, line widths and line styles, which wrap around.
`style_for(prev, index, n)` returns the style of series `index` drawn over
`prev`. `StyleCycle.from_config(cfg, prefix)` reads a comma-separated
`colors` list. When that list is absent it uses `DEFAULT_COLORS`.
`parse_palette` parses such a list.

## Bounds (`plotframe.bounds`)

`Bounds(xmin, ymin, xmax, ymax)` is an immutable rectangle. It provides:

- the constructors `from_corners`, `none()` (empty, NaN coordinates) and
  `unit()`;
- the queries `is_none()`, `width()`, `height()`, `xmid()` and `ymid()`;
- `union(other)`, which ignores empty bounds;
- `or_else(other)`.

Two empty bounds compare equal.

## Axes (`plotframe.axis`)

`ShowGrid` chooses which grid lines to show: `NONE`, `MAJOR`, `MINOR` or
`BOTH`. `ShowGrid.from_bool` maps `True` to `MAJOR`.

`AxisTicks` holds the grid and tick styles, size, pad and an optional
locator and formatter for one set of ticks.

`Axis` combines major and minor `AxisTicks`, a locator (by default
`MaxNLocator`), a formatter (by default `Formatter.PLAIN`) and optional
fixed ticks and labels:

```python
from plotframe.axis import Axis

axis = Axis()
axis.labeled_ticks(0.0, 1.0)   # [(0.0, "0.0"), (0.2, "0.2"), ...]

axis.set_tick_labels([(0.0, "low"), (1.0, "high")])
axis.labeled_ticks(0.0, 1.0)   # [(0.0, "low"), (1.0, "high")]
```

- `set_ticks` fixes the tick positions.
- `tick_values` lists the candidate positions.
- `labeled_ticks` keeps those inside the range and pairs each with its
  label.
- `value_delta(values)` gives the smallest gap between neighbouring values.

## Data area (`plotframe.data_frame`)

`DataFrame` fits a view around the bounds of the plotted data. It honours:

- `x_margin` and `y_margin`;
- fixed limits set with `xlim` and `ylim`, which raise `ValueError` unless
  min < max;
- `Scaling` (`AUTO` or `IMAGE`);
- an optional `aspect` with an `AspectMode` (`BOUNDING_BOX` or `VIEW`);
- `is_flip_y`.

`update_view(data_bounds)` computes the view. `update_pos(pos, data_bounds)`
also fits the canvas area and stores a 3x3 affine matrix in `to_canvas`
that maps data coordinates onto the canvas. `FrameMargins` reads
`figure.subplot` margins and applies them to a canvas rectangle.

## Polar axes (`plotframe.polar_axis`)

- `polar_x_ticks(axis, xmin, xmax)` gives the angular ticks with labels.
  Without fixed ticks it uses six evenly spaced values from zero.
- `polar_y_ticks(axis, ymin, ymax)` gives the radial ticks. Without fixed
  ticks it uses four evenly spaced radii up to the largest absolute radius.
- `text_angle_align(theta)` returns the `HorizAlign` and `VertAlign` for a
  label placed outward at angle `theta` in radians.

## What this package does not do

The package computes layout only. It has no renderer, and it does not open
windows or save images. There are no chart or figure objects, artists or
legends, and no command-line program. It ships no default configuration
file: build settings with `Config.parse` or `Config(values)`.