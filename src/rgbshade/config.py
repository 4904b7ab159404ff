"""
Plot configuration for before/after comparison strips.

Provides the layout and styling used by rgbshade.plotting.
"""

from dataclasses import dataclass

from rgbshade.constants import (
    DEFAULT_BAND_ALPHA,
    DEFAULT_BAND_COLOR,
    DEFAULT_BAND_HEIGHT,
    DEFAULT_FIGSIZE,
    DEFAULT_FONTSIZE,
    DEFAULT_LABELS,
)


@dataclass
class PlotConfig:
    """
    Configuration for the comparison plot.

    The plot has two rows of unit height: original colours on top, adjusted
    colours below. Each row carries a horizontal label band at its centre.

    Attributes:
        figsize: Figure size in inches (width, height)
        band_height: Height of each label band (0.0 to 1.0 of a row)
        band_alpha: Opacity of the label bands (0.0 to 1.0)
        band_color: Fill colour of the label bands
        labels: Labels for the top and bottom rows
        fontsize: Label font size in points
    """

    figsize: tuple[float, float] = DEFAULT_FIGSIZE
    band_height: float = DEFAULT_BAND_HEIGHT  # Range: 0.0 to 1.0
    band_alpha: float = DEFAULT_BAND_ALPHA  # Range: 0.0 to 1.0
    band_color: str = DEFAULT_BAND_COLOR
    labels: tuple[str, str] = DEFAULT_LABELS
    fontsize: float = DEFAULT_FONTSIZE

    def __post_init__(self):
        """Validate configuration parameters."""
        if not 0.0 <= self.band_height <= 1.0:
            raise ValueError("band_height must be between 0.0 and 1.0")

        if not 0.0 <= self.band_alpha <= 1.0:
            raise ValueError("band_alpha must be between 0.0 and 1.0")

        if len(self.labels) != 2:
            raise ValueError(
                f"labels must hold exactly 2 entries (top, bottom), got {len(self.labels)}"
            )

        if self.fontsize <= 0:
            raise ValueError("fontsize must be positive")

        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError(f"Invalid figsize: {self.figsize}. Must be two positive numbers")
