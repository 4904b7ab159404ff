"""
Numba-optimized kernels for lightness adjustment.

Provides the JIT-compiled per-channel lighten/darken kernel used by
ColorAdjuster. The NumPy reference lives in rgbshade.adjust.
"""

import numpy as np
from numba import njit

# ============================================================================
# Lightness Kernels
# ============================================================================


# No fastmath: half-up rounding must be exact at .5.
# No parallel: the default workqueue threading layer aborts on concurrent launches.
@njit(cache=True, nogil=True)
def adjust_lightness_numba(
    channels: np.ndarray,
    factor: float,
    out: np.ndarray,
) -> None:
    """
    Lighten (factor > 0) or darken (factor <= 0) 8-bit RGB channels.

    Each channel moves linearly toward 255 or 0:
        lighten: v + factor * (255 - v)
        darken:  v + factor * v

    The result is rounded half up and clamped to [0, 255].

    Args:
        channels: Input channels [N, 3] (uint8)
        factor: Adjustment factor in [-1, 1]
        out: Output buffer [N, 3] (uint8)
    """
    N = channels.shape[0]

    for i in range(N):
        for c in range(3):
            v = float(channels[i, c])
            if factor > 0.0:
                v = v + factor * (255.0 - v)
            else:
                v = v + factor * v

            v = np.floor(v + 0.5)
            out[i, c] = np.uint8(min(max(v, 0.0), 255.0))
