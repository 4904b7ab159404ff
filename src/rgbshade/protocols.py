"""
Protocol definitions for rgbshade collaborator interfaces.

Defines the interface ColorAdjuster expects from a comparison renderer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    """
    Protocol for before/after comparison renderers.

    The default renderer is rgbshade.plotting.plot_comparison. Any callable
    with this signature can be passed to ColorAdjuster instead.
    """

    def __call__(self, old: Sequence[str], new: Sequence[str]) -> Any:
        """
        Draw original and adjusted colours for visual comparison.

        Args:
            old: Original colours as hex strings
            new: Adjusted colours as hex strings (same length as old)

        Returns:
            Backend-specific handle, or None. Ignored by ColorAdjuster.
        """
        ...
