"""
Comparison plotting for rgbshade.

Draws original and adjusted colours as two stacked strips so a lightness
adjustment can be checked by eye.
"""

import logging
from collections.abc import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from rgbshade.config import PlotConfig

logger = logging.getLogger(__name__)


def plot_comparison(
    old: Sequence[str],
    new: Sequence[str],
    config: PlotConfig | None = None,
    ax: Axes | None = None,
    show: bool = True,
) -> Figure | None:
    """
    Plot original colours above adjusted colours.

    Each colour gets an equal-width cell; the top row holds ``old`` and the
    bottom row ``new``. A semi-transparent band across the middle of each row
    carries its label ("old" / "new" by default).

    Args:
        old: Original colours, any matplotlib colour spec
        new: Adjusted colours, same length as ``old``
        config: Layout and styling, defaults to ``PlotConfig()``
        ax: Axes to draw on. A new figure is created when omitted
        show: Call ``plt.show()`` when True, otherwise return the figure
    """
    if len(old) != len(new):
        raise ValueError(
            f"old and new must have the same length, got {len(old)} and {len(new)}"
        )
    if len(old) == 0:
        raise ValueError("Nothing to plot: no colours given")

    config = config or PlotConfig()
    n = len(old)

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=config.figsize)
        fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    else:
        fig = ax.get_figure()

    ax.set_xlim(0, n)
    ax.set_ylim(0, 2)
    ax.margins(0)
    ax.set_axis_off()

    for i, (col_old, col_new) in enumerate(zip(old, new)):
        ax.add_patch(Rectangle((i, 1), 1, 1, facecolor=col_old, edgecolor="none"))
        ax.add_patch(Rectangle((i, 0), 1, 1, facecolor=col_new, edgecolor="none"))

    half = config.band_height / 2
    for y, label in zip((1.5, 0.5), config.labels):
        ax.add_patch(
            Rectangle(
                (0, y - half),
                n,
                config.band_height,
                facecolor=config.band_color,
                alpha=config.band_alpha,
                edgecolor="none",
            )
        )
        ax.text(n / 2, y, label, ha="center", va="center", fontsize=config.fontsize)

    logger.debug("[plot_comparison] Drew %d colour pairs", n)

    if show:
        plt.show()
    else:
        return fig
