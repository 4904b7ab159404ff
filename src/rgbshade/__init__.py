"""
rgbshade - Relative RGB lightening and darkening

Lighten or darken colours by a factor in [-1, 1] and compare the result
against the originals.

Features:
- Per-channel linear interpolation toward white (lighten) or black (darken)
- Accepts colour names, hex strings, RGB tuples and channel arrays
- Numba-compiled transform with an exact NumPy reference
- Optional before/after comparison plot (matplotlib)

Example:
    >>> from rgbshade import adjust_colours
    >>>
    >>> adjust_colours(["#FF0000", "#000000"], adj=-0.2)
    ['#CC0000', '#000000']
    >>>
    >>> # Lighten and plot originals above results
    >>> adjust_colours(["tab:blue", "tab:green"], adj=0.4, plot=True)

Example - Fluent adjuster:
    >>> from rgbshade import ColorAdjuster
    >>>
    >>> darker = ColorAdjuster().darken(0.25)
    >>> darker(["white", "gold"])
"""

__version__ = "0.1.0"

# Adjustment
from rgbshade.adjust import ColorAdjuster, adjust_colors, adjust_colours

# Colour parsing
from rgbshade.color import Color, parse_colors, to_hex

# Plotting
from rgbshade.config import PlotConfig
from rgbshade.plotting import plot_comparison

# Protocols
from rgbshade.protocols import Renderer

__all__ = [
    # Version
    "__version__",
    # Adjustment
    "adjust_colours",
    "adjust_colors",
    "ColorAdjuster",
    # Colour parsing
    "Color",
    "parse_colors",
    "to_hex",
    # Plotting
    "plot_comparison",
    "PlotConfig",
    # Protocols
    "Renderer",
]
