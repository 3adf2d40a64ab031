"""Geometry Bounded Context - Numeric Primitives.

Small scalar helpers used by the elevation models and the panorama search.
All functions are pure and operate on plain floats.
"""

from __future__ import annotations

import math
from collections.abc import Callable

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
PI2 = 2 * math.pi

# Slack accepted on f(x1) * f(x2) when validating a bisection bracket
ROOT_SIGN_TOLERANCE = 1e-10


def sq(x: float) -> float:
    return x * x


def floor_mod(x: float, y: float) -> float:
    """Floored remainder of x / y (result has the sign of y)."""
    return x - y * math.floor(x / y)


def haversin(x: float) -> float:
    return sq(math.sin(x / 2))


def angular_distance(a1: float, a2: float) -> float:
    """Signed smallest angle going from a1 to a2, in [-pi, pi)."""
    return floor_mod(a2 - a1 + math.pi, PI2) - math.pi


# ---------------------------------------------------------------------------
# Interpolation
# ---------------------------------------------------------------------------
def lerp(y0: float, y1: float, x: float) -> float:
    """Linear interpolation between y0 (x=0) and y1 (x=1)."""
    return y0 + x * (y1 - y0)


def bilerp(
    z00: float, z10: float, z01: float, z11: float, x: float, y: float
) -> float:
    """Bilinear interpolation on the unit square.

    Args:
        z00: Value at (0, 0)
        z10: Value at (1, 0)
        z01: Value at (0, 1)
        z11: Value at (1, 1)
        x: Fractional offset along the first axis
        y: Fractional offset along the second axis

    Returns:
        Interpolated value. Exactly the corner value at integer offsets.
    """
    return lerp(lerp(z00, z10, x), lerp(z01, z11, x), y)


# ---------------------------------------------------------------------------
# Root finding
# ---------------------------------------------------------------------------
def first_interval_containing_root(
    f: Callable[[float], float], min_x: float, max_x: float, step: float
) -> float:
    """Return the lower bound of the first window of size `step` bracketing a root.

    Windows [a, a + step] are scanned from min_x to the right; a window is
    only considered while a + step <= max_x. A window brackets a root when
    f(a) * f(a + step) <= 0. Two sign changes inside one window go unseen.

    Args:
        f: Function to scan
        min_x: Left end of the search range
        max_x: Right end of the search range
        step: Window size, must be positive

    Returns:
        Lower bound of the bracketing window, or +inf if none was found.

    Raises:
        ValueError: If min_x > max_x or step <= 0
    """
    if min_x > max_x:
        raise ValueError(f"min_x ({min_x}) must not exceed max_x ({max_x})")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    lower = min_x
    f_lower = f(lower)
    while lower < max_x:
        upper = lower + step
        if upper > max_x:
            break
        f_upper = f(upper)
        if f_lower * f_upper <= 0:
            return lower
        lower = upper
        f_lower = f_upper

    return math.inf


def improve_root(
    f: Callable[[float], float], x1: float, x2: float, epsilon: float
) -> float:
    """Shrink the bracket [x1, x2] by bisection until its width is <= epsilon.

    Returns:
        The lower bound of the final bracket.

    Raises:
        ValueError: If [x1, x2] does not bracket a sign change of f
            (up to ROOT_SIGN_TOLERANCE).
    """
    f1 = f(x1)
    if f1 * f(x2) > ROOT_SIGN_TOLERANCE:
        raise ValueError(f"[{x1}, {x2}] does not bracket a root")

    while x2 - x1 > epsilon:
        half = (x1 + x2) / 2
        f_half = f(half)
        if f_half * f1 <= 0:
            x2 = half
        else:
            x1 = half
            f1 = f_half

    return x1
