"""Scalar angle and range helpers shared by the orbit controller."""

import math

TWO_PI = 2.0 * math.pi


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to ``[lo, hi]`` (``lo`` wins when the range is empty)."""
    return max(lo, min(hi, value))


def wrap_angle(angle: float) -> float:
    """
    Wrap an angle into the half-open interval ``(-pi, pi]``.

    Args:
        angle: Angle in radians

    Returns:
        Equivalent angle modulo 2*pi

    Example:
        >>> wrap_angle(3 * math.pi / 2)
        -1.5707963267948966
    """
    if not math.isfinite(angle):
        return angle
    wrapped = math.fmod(angle + math.pi, TWO_PI)
    if wrapped <= 0.0:
        wrapped += TWO_PI
    return wrapped - math.pi


def _shift_bound(angle: float) -> float:
    if angle < -math.pi:
        return angle + TWO_PI
    if angle > math.pi:
        return angle - TWO_PI
    return angle


def clamp_azimuth(theta: float, min_angle: float, max_angle: float) -> float:
    """
    Clamp an azimuth against a window that may wrap through the +-pi seam.

    A bound outside ``[-pi, pi]`` is shifted by one turn; -pi and pi are
    kept as given, so ``[-pi, pi]`` is the full circle. An ordinary window clamps
    directly. A wrapping window (normalized min > max) snaps to whichever
    bound lies on the same side of the window midpoint as ``theta``.
    Infinite bounds disable clamping.

    Args:
        theta: Current azimuth in radians, already wrapped into ``(-pi, pi]``
        min_angle: Lower azimuth bound in radians
        max_angle: Upper azimuth bound in radians

    Returns:
        Clamped azimuth
    """
    if not (math.isfinite(min_angle) and math.isfinite(max_angle)):
        return theta

    lo = _shift_bound(min_angle)
    hi = _shift_bound(max_angle)

    if lo <= hi:
        return clamp(theta, lo, hi)

    if theta > (lo + hi) / 2.0:
        return max(lo, theta)
    return min(hi, theta)
