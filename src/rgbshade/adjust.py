"""
ColorAdjuster: relative lightening and darkening of RGB colours.

Each channel is interpolated linearly toward white (factor > 0) or black
(factor <= 0), independently of the other channels and colours:

    lighten: v' = v + f * (255 - v)
    darken:  v' = v + f * v

f=1 gives pure white, f=-1 pure black, f=0 leaves colours unchanged.
Adjustments are made in RGB space, not a perceptual colour space.

Example:
    >>> adjust_colours(["#FF0000", "navy"], adj=-0.2)
    ['#CC0000', '#000066']
    >>>
    >>> # Fluent form, with a before/after comparison plot
    >>> ColorAdjuster().lighten(0.3).apply(["tab:blue", "tab:orange"], plot=True)
"""

from __future__ import annotations

import logging
from typing import Any, Self

import numpy as np

from rgbshade.color import parse_colors, to_hex
from rgbshade.constants import AMOUNT_MAX, AMOUNT_MIN, CHANNEL_MAX, DEFAULT_FACTOR
from rgbshade.kernels import adjust_lightness_numba
from rgbshade.plotting import plot_comparison
from rgbshade.protocols import Renderer
from rgbshade.validators import coerce_factor, coerce_flag, validate_range

logger = logging.getLogger(__name__)


def _adjust_numpy(channels: np.ndarray, factor: float) -> np.ndarray:
    """
    Pure NumPy lighten/darken (reference for the Numba kernel).

    Args:
        channels: Input channels [N, 3] (uint8)
        factor: Adjustment factor in [-1, 1]

    Returns:
        Adjusted channels [N, 3] (uint8)
    """
    values = channels.astype(np.float64)
    if factor > 0:
        values = values + factor * (CHANNEL_MAX - values)
    else:
        values = values + factor * values

    return np.clip(np.floor(values + 0.5), 0, CHANNEL_MAX).astype(np.uint8)


class ColorAdjuster:
    """
    Lighten or darken batches of colours by a relative factor.

    Colours may be given as names, hex strings, RGB tuples or a channel
    array (see rgbshade.color). Results are ``#RRGGBB`` strings in input order.

    Example:
        >>> adjuster = ColorAdjuster(-0.2)
        >>> adjuster(["#FF0000", "#FFFFFF"])
        ['#CC0000', '#CCCCCC']
        >>> ColorAdjuster().darken(0.2)(["#FF0000"])
        ['#CC0000']
    """

    __slots__ = ("_factor", "renderer")

    def __init__(self, factor: float = DEFAULT_FACTOR, renderer: Renderer | None = None):
        """
        Initialize the adjuster.

        Args:
            factor: Adjustment in [-1, 1] (negative darkens, positive lightens)
            renderer: Comparison renderer used when plotting,
                defaults to rgbshade.plotting.plot_comparison

        Raises:
            ValueError: If factor is NA, unparseable, or outside [-1, 1]
            TypeError: If factor is not a number or string
        """
        self._factor = coerce_factor(factor, "factor")
        self.renderer = renderer if renderer is not None else plot_comparison

        logger.debug("[ColorAdjuster] Initialized with factor=%+.3f", self._factor)

    @property
    def factor(self) -> float:
        return self._factor

    @validate_range(AMOUNT_MIN, AMOUNT_MAX, "amount")
    def lighten(self, amount: float) -> Self:
        """
        Move colours toward white.

        Args:
            amount: 0.0 = no change, 1.0 = pure white

        Returns:
            Self for chaining
        """
        self._factor = float(amount)
        return self

    @validate_range(AMOUNT_MIN, AMOUNT_MAX, "amount")
    def darken(self, amount: float) -> Self:
        """
        Move colours toward black.

        Args:
            amount: 0.0 = no change, 1.0 = pure black

        Returns:
            Self for chaining
        """
        self._factor = -float(amount)
        return self

    def apply(self, cols: Any, plot: Any = False) -> list[str] | None:
        """
        Adjust a batch of colours.

        Args:
            cols: Colour spec, sequence of colour specs, or channel array.
                None is passed through.
            plot: If True, render a before/after comparison. None is passed through.

        Returns:
            Adjusted colours as ``#RRGGBB`` strings, or None

        Raises:
            ValueError: If cols is empty, holds an NA or invalid colours,
                or plot is NA or not a logical value
            TypeError: If plot has a type with no logical meaning
        """
        if cols is None:
            return None
        channels = parse_colors(cols)
        return self._apply_to_channels(channels, plot)

    def _apply_to_channels(self, channels: np.ndarray, plot: Any = False) -> list[str] | None:
        if plot is None:
            return None
        plot = coerce_flag(plot, "plot")

        out = np.empty_like(channels)
        adjust_lightness_numba(np.ascontiguousarray(channels), self._factor, out)
        logger.debug("[ColorAdjuster] Adjusted %d colours by %+.3f", len(channels), self._factor)

        old_hex = to_hex(channels)
        new_hex = to_hex(out)
        if plot:
            self.renderer(old_hex, new_hex)

        return new_hex

    def __call__(self, cols: Any, plot: Any = False) -> list[str] | None:
        """Adjust colours (callable interface). See apply()."""
        return self.apply(cols, plot)

    def __repr__(self) -> str:
        return f"ColorAdjuster(factor={self._factor})"


def adjust_colours(cols: Any, adj: Any = DEFAULT_FACTOR, plot: Any = False) -> list[str] | None:
    """
    Lighten or darken colours by a relative amount.

    Arguments are checked in order (cols, adj, plot). A None for any of them
    returns None once the arguments before it have been checked.

    Args:
        cols: Colours to adjust: names, hex strings, RGB tuples, or a
            channel array [N, 3]
        adj: Amount in [-1, 1]; positive lightens, negative darkens
        plot: If True, plot original and adjusted colours for comparison

    Returns:
        Adjusted colours as ``#RRGGBB`` strings, in input order

    Raises:
        ValueError: For empty, NA or invalid colours, an NA or
            out-of-range adj, or a plot value with no logical meaning
        TypeError: If adj or plot has an unusable type

    Example:
        >>> adjust_colours(["#000000"], adj=0.5)
        ['#808080']
    """
    if cols is None:
        return None
    channels = parse_colors(cols)

    if adj is None:
        return None
    factor = coerce_factor(adj, "adj")

    return ColorAdjuster(factor)._apply_to_channels(channels, plot)


# British/American spelling alias
adjust_colors = adjust_colours
