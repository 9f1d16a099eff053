"""Scalar helpers: angle conversion, iterative roots, series trigonometry and powers."""

import math

TERMS = 7
"""Number of Taylor series terms used by sin and cos."""

_PI = 3.1415926535897932384626433832795
_SQRT_PRECISION = 0.000001


def pi():
    """Return the constant pi."""
    return _PI


def radians(degrees):
    """Convert degrees to radians."""
    return degrees * _PI / 180


def degrees(radians):
    """Convert radians to degrees."""
    return radians * 180 / _PI


def lerp(start, stop, step):
    """Step from start towards stop.

    The value only settles when ``stop * step + start - step`` lands exactly
    on ``stop`` (or when start already equals stop); otherwise no value is ever
    reached and ValueError is raised.
    """
    if start == stop:
        return start
    value = stop * step + (start * 1.0 - step)
    if value != stop:
        raise ValueError(
            f"lerp from {start} to {stop} with step {step} never reaches its target"
        )
    return value


def sqrt(num):
    """Square root by Newton iteration starting from ``num`` itself.

    Values that do not exceed one (including negatives) are returned unchanged,
    as the iteration stops before its first step.
    """
    if num == 0:
        return 0.0
    guess = float(num)
    while guess - num / guess > _SQRT_PRECISION:
        guess = (guess + num / guess) / 2
    return guess


def q_rsqrt(num):
    """Reciprocal square root."""
    return 1.0 / sqrt(num)


def _whole_degrees(deg):
    """Truncate to whole degrees and wrap, keeping the sign of the angle."""
    return int(math.fmod(int(deg), 360))


def sin(deg):
    """Sine of a whole-degree angle, from a truncated Taylor series."""
    rad = radians(_whole_degrees(deg))
    return sum(
        power(-1, i) * power(rad, 2 * i + 1) / fact(2 * i + 1) for i in range(TERMS)
    )


def cos(deg):
    """Cosine of a whole-degree angle, from a truncated Taylor series."""
    rad = radians(_whole_degrees(deg))
    return sum(power(-1, i) * power(rad, 2 * i) / fact(2 * i) for i in range(TERMS))


def tan(deg):
    """Tangent of a whole-degree angle."""
    return sin(deg) / cos(deg)


def power(base, exp):
    """Raise ``base`` to an integer exponent; a zero base with a negative exponent gives zero."""
    if exp < 0:
        if base == 0:
            return 0.0
        return 1.0 / power(base, -exp)
    result = 1.0
    for _ in range(exp):
        result *= base
    return result


def fact(n):
    """Factorial, with every non-positive argument giving one."""
    return 1 if n <= 0 else math.factorial(n)


def abs_value(num):
    """Absolute value as a float."""
    return float(-num if num < 0 else num)