"""
Validation helpers for rgbshade.

Provides argument coercion for the adjustment factor and the plot flag, the
missing-value (NA) check, and a reusable range-checking decorator for the
fluent ColorAdjuster methods.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable
from functools import wraps
from typing import Any

import numpy as np

from rgbshade.constants import FACTOR_MAX, FACTOR_MIN, FALSE_STRINGS, TRUE_STRINGS

# Type alias for callables
F = Callable[..., Any]


def is_na(value: Any) -> bool:
    """Return True if value is a floating-point NaN (the missing-value marker)."""
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def coerce_factor(value: Any, param_name: str = "adj") -> float:
    """
    Coerce an adjustment factor to float and check it lies in [-1, 1].

    Args:
        value: Number, or string holding a number
        param_name: Name of parameter for error messages

    Returns:
        The factor as a float

    Raises:
        ValueError: If value is NA, an unparseable string, or out of range
        TypeError: If value is neither a real number nor a string

    Example:
        >>> coerce_factor("0.25")
        0.25
    """
    if is_na(value):
        raise ValueError(f"{param_name} is NA")

    if isinstance(value, str):
        try:
            factor = float(value)
        except ValueError:
            raise ValueError(
                f"{param_name} can not be coerced to numeric: {value!r}"
            ) from None
    elif isinstance(value, numbers.Real):
        factor = float(value)
    else:
        raise TypeError(
            f"{param_name} must be a number, got {type(value).__name__}. "
            f"Provide a numeric value (int or float)."
        )

    if is_na(factor):
        raise ValueError(f"{param_name} is NA")

    if not FACTOR_MIN <= factor <= FACTOR_MAX:
        raise ValueError(f"{param_name} must be between -1 and 1")

    return factor


def coerce_flag(value: Any, param_name: str = "plot") -> bool:
    """
    Coerce a logical flag to bool.

    Accepts bools, real numbers (non-zero is True) and the strings
    TRUE/true/True/T and FALSE/false/False/F.

    Raises:
        ValueError: If value is NA or a string with no logical meaning
        TypeError: If value has a type with no logical meaning
    """
    if is_na(value):
        raise ValueError(f"{param_name} is NA")

    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        if value in TRUE_STRINGS:
            return True
        if value in FALSE_STRINGS:
            return False
        raise ValueError(f"{param_name} can not be coerced to logical")
    if isinstance(value, numbers.Real):
        return bool(value != 0)

    raise TypeError(f"{param_name} is not logical, got {type(value).__name__}")


def validate_range(
    min_val: float,
    max_val: float,
    param_name: str = "value",
    param_index: int = 1,
) -> Callable[[F], F]:
    """
    Decorator for validating numeric parameter ranges.

    Args:
        min_val: Minimum allowed value (inclusive)
        max_val: Maximum allowed value (inclusive)
        param_name: Name of parameter for error messages
        param_index: Position of parameter in function signature (default: 1 = first arg after self)

    Returns:
        Decorated function with range validation

    Example:
        >>> @validate_range(0.0, 1.0, 'amount')
        ... def lighten(self, amount: float) -> Self:
        ...     self._factor = amount
        ...     return self
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            # Get value from args or kwargs
            if len(args) > param_index:
                value = args[param_index]
            elif param_name in kwargs:
                value = kwargs[param_name]
            else:
                # No value provided, let function handle it
                return func(*args, **kwargs)

            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(
                    f"{param_name} must be a number, got {type(value).__name__}. "
                    f"Provide a numeric value (int or float)."
                )

            if not min_val <= value <= max_val:
                suggestion = ""
                if param_name == "amount":
                    suggestion = " Use 0.0 for no change, 1.0 for pure white (lighten) or pure black (darken)."

                raise ValueError(
                    f"{param_name}={value} is outside valid range [{min_val}, {max_val}].{suggestion}"
                )

            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
