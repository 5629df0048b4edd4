"""Linear interpolation between two values of the same kind."""

from __future__ import annotations

from typing import Any


def lerp(y0: Any, y1: Any, x: float) -> Any:
    """Interpolate linearly between ``y0`` (at ``x == 0``) and ``y1`` (at ``x == 1``).

    Integers give an integer result, truncated toward zero before ``y0`` is
    added back. Floats give a float result. Any other type is asked to
    interpolate itself through its own ``lerp(y0, y1, x)``.
    """
    if isinstance(y0, int) and isinstance(y1, int):
        return int((y1 - y0) * x) + y0
    if isinstance(y0, (int, float)) and isinstance(y1, (int, float)):
        return (y1 - y0) * x + y0
    if type(y0) is not type(y1):
        raise TypeError(
            f"cannot interpolate between {type(y0).__name__} and {type(y1).__name__}"
        )
    own_lerp = getattr(type(y0), "lerp", None)
    if own_lerp is None:
        raise TypeError(f"{type(y0).__name__} does not support interpolation")
    return own_lerp(y0, y1, x)