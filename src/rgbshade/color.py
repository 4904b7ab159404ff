"""
Color parsing and hex encoding.

Resolves colour specifications into 8-bit RGB channels and serializes them
back to ``#RRGGBB`` strings. Accepted specifications:

- Strings understood by matplotlib: named colours ("red", "tab:blue"),
  "#RGB", "#RRGGBB", "#RRGGBBAA" (alpha is dropped), grey levels ("0.5")
- Integer triples (or quadruples) of 8-bit channels: (255, 0, 0)
- Float triples (or quadruples) of normalized channels: (1.0, 0.0, 0.0)
- 2D arrays [N, 3] or [N, 4]: integer dtype holds 8-bit channels,
  float dtype holds normalized channels

A batch is stored as a uint8 array [N, 3], one row per colour.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import matplotlib.colors as mc
import numpy as np

from rgbshade.constants import CHANNEL_MAX, CHANNEL_MIN, NUM_CHANNELS, RGBA_CHANNELS
from rgbshade.validators import is_na


def _is_numeric_spec(spec: Any) -> bool:
    """True for a 1D run of 3 or 4 real numbers (an RGB or RGBA tuple)."""
    if isinstance(spec, np.ndarray):
        return spec.ndim == 1 and spec.shape[0] in (NUM_CHANNELS, RGBA_CHANNELS) and (
            np.issubdtype(spec.dtype, np.number)
        )
    if not isinstance(spec, (tuple, list)):
        return False
    return len(spec) in (NUM_CHANNELS, RGBA_CHANNELS) and all(
        isinstance(x, numbers.Real) for x in spec
    )


def _has_na(spec: Any) -> bool:
    if spec is None or is_na(spec):
        return True
    if _is_numeric_spec(spec):
        return any(is_na(x) for x in spec)
    return False


def _quantize(normalized: Sequence[float]) -> tuple[int, int, int]:
    """Scale normalized channels to 8-bit, rounding half up."""
    r, g, b = (int(np.floor(x * CHANNEL_MAX + 0.5)) for x in normalized[:NUM_CHANNELS])
    return r, g, b


@dataclass(frozen=True)
class Color:
    """
    An immutable 8-bit RGB colour.

    Attributes:
        r: Red channel [0, 255]
        g: Green channel [0, 255]
        b: Blue channel [0, 255]

    Example:
        >>> Color.from_spec("red").hex
        '#FF0000'
        >>> Color.from_spec((0, 128, 255)).hex
        '#0080FF'
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        """Validate channel values."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"{name}={value} is outside valid range [{CHANNEL_MIN}, {CHANNEL_MAX}]"
                )
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_spec(cls, spec: Any) -> Color:
        """
        Parse a colour specification.

        Args:
            spec: Colour name, hex string, or numeric triple/quadruple

        Returns:
            Parsed Color

        Raises:
            ValueError: If spec can not be resolved to a colour
        """
        if _is_numeric_spec(spec):
            if all(isinstance(x, numbers.Integral) for x in spec):
                try:
                    return cls(*(int(x) for x in spec[:NUM_CHANNELS]))
                except ValueError as e:
                    raise ValueError(f"Invalid colour: {spec!r}") from e
            spec = tuple(float(x) for x in spec)
        elif not isinstance(spec, str):
            raise ValueError(f"Invalid colour: {spec!r}")
        elif spec.strip().lower() == "none":
            # matplotlib resolves "none" to transparent black
            raise ValueError(f"Invalid colour: {spec!r}")

        try:
            rgb = mc.to_rgb(spec)
        except ValueError as e:
            raise ValueError(f"Invalid colour: {spec!r}") from e
        return cls(*_quantize(rgb))

    @property
    def hex(self) -> str:
        """Upper-case ``#RRGGBB`` encoding."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


def _parse_matrix(cols: np.ndarray) -> np.ndarray:
    """Convert an [N, 3] or [N, 4] channel array to uint8 [N, 3]."""
    if cols.shape[1] not in (NUM_CHANNELS, RGBA_CHANNELS):
        raise ValueError(
            f"Invalid colours: array must have shape [N, 3] or [N, 4], got {list(cols.shape)}"
        )
    if cols.shape[0] == 0:
        raise ValueError("cols must not be empty")

    channels = cols[:, :NUM_CHANNELS]
    if np.issubdtype(channels.dtype, np.integer):
        if channels.min() < CHANNEL_MIN or channels.max() > CHANNEL_MAX:
            raise ValueError(
                f"Invalid colours: integer channels must be in [{CHANNEL_MIN}, {CHANNEL_MAX}]"
            )
        return channels.astype(np.uint8)

    if np.issubdtype(channels.dtype, np.floating):
        if np.isnan(channels).any():
            raise ValueError("One or more cols is NA")
        if channels.min() < 0.0 or channels.max() > 1.0:
            raise ValueError("Invalid colours: float channels must be in [0, 1]")
        return np.floor(channels * CHANNEL_MAX + 0.5).astype(np.uint8)

    raise ValueError(f"Invalid colours: unsupported array dtype {cols.dtype}")


def _as_batch(cols: Any) -> list:
    """Wrap a lone colour spec into a batch of one."""
    if isinstance(cols, str):
        return [cols]
    if isinstance(cols, (tuple, np.ndarray)) and _is_numeric_spec(cols):
        return [cols]
    if not isinstance(cols, Iterable):
        return [cols]
    return list(cols)


def parse_colors(cols: Any) -> np.ndarray:
    """
    Parse a batch of colour specifications into 8-bit channels.

    Args:
        cols: A colour spec, a sequence of colour specs, or a 2D channel array

    Returns:
        Channels array [N, 3] of dtype uint8, in input order

    Raises:
        ValueError: If the batch is empty, holds an NA, or holds
            specs that can not be resolved (all of them are named)

    Example:
        >>> parse_colors(["red", "#00FF00", (0, 0, 255)])
        array([[255,   0,   0],
               [  0, 255,   0],
               [  0,   0, 255]], dtype=uint8)
    """
    if isinstance(cols, np.ndarray) and cols.ndim == 2:
        return _parse_matrix(cols)

    specs = _as_batch(cols)
    if not specs:
        raise ValueError("cols must not be empty")
    if any(_has_na(spec) for spec in specs):
        raise ValueError("One or more cols is NA")

    parsed = []
    invalid = []
    first_error = None
    for spec in specs:
        try:
            parsed.append(Color.from_spec(spec).as_tuple())
        except ValueError as e:
            invalid.append(spec)
            first_error = first_error or e

    if invalid:
        names = ", ".join(str(spec) for spec in invalid)
        raise ValueError(f"Invalid colours: {names}") from first_error

    return np.array(parsed, dtype=np.uint8).reshape(-1, NUM_CHANNELS)


def to_hex(channels: np.ndarray) -> list[str]:
    """
    Encode 8-bit channels [N, 3] as ``#RRGGBB`` strings.

    Example:
        >>> to_hex(np.array([[204, 0, 0]], dtype=np.uint8))
        ['#CC0000']
    """
    return [Color(r, g, b).hex for r, g, b in channels.tolist()]
