"""
Constants and default values for rgbshade.

Centralizes magic numbers and configuration defaults for better maintainability.
"""

from __future__ import annotations

# =============================================================================
# Adjustment Constants
# =============================================================================

# Relative lightness factor
DEFAULT_FACTOR = 0.0  # No change
FACTOR_MIN = -1.0  # Pure black
FACTOR_MAX = 1.0  # Pure white

# Fluent lighten/darken amounts
AMOUNT_MIN = 0.0  # No change
AMOUNT_MAX = 1.0  # Full white/black

# =============================================================================
# Channel Constants
# =============================================================================

CHANNEL_MIN = 0
CHANNEL_MAX = 255  # 8-bit channels
NUM_CHANNELS = 3  # R, G, B
RGBA_CHANNELS = 4  # Alpha is accepted on input and dropped

# Spellings accepted for logical flags (R-style logical strings included)
TRUE_STRINGS = {"TRUE", "true", "True", "T"}
FALSE_STRINGS = {"FALSE", "false", "False", "F"}

# =============================================================================
# Plot Constants
# =============================================================================

DEFAULT_FIGSIZE = (6.0, 2.0)
DEFAULT_BAND_HEIGHT = 0.2  # Label band height, in row units
DEFAULT_BAND_ALPHA = 0.5  # Semi-transparent white
DEFAULT_BAND_COLOR = "white"
DEFAULT_LABELS = ("old", "new")
DEFAULT_FONTSIZE = 12
