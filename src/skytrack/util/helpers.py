from math import atan2, floor

from skytrack.exceptions import InvalidArgument
from skytrack.util.constants import TWOPI, RAD_TO_SECONDS, SECONDS_TO_RAD


def positiveMod(x: float, y: float) -> float:
    """Returns x mod y in the range [0, y) for a positive y. The result is not useful if y is negative."""

    r = x % y
    # Python's modulo already follows the sign of y, but a tiny negative x can round up to y itself.
    if r >= y:
        r -= y
    return r


def splitIntFrac(value: float) -> (float, float):
    """Splits a value into integer and fractional parts which sum to the value. Both parts carry the sign of
    value."""

    if value < 0:
        whole = floor(-value)
        return -whole, -(-value - whole)

    whole = floor(value)
    return whole, value - whole


def hornerEval(x: float, coeffs) -> float:
    """Evaluates the polynomial with coefficients coeffs at x, where coeffs[0] is the constant term."""

    if len(coeffs) == 0:
        raise InvalidArgument('polynomial requires at least one coefficient')

    result = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        result = result * x + c

    return result


def roundTo(value: float, digits: int = 4) -> float:
    """Rounds a value to a number of decimal digits."""

    return round(value, digits)


def atan3(y: float, x: float) -> float:
    """A makeshift version of the atan2 method, where the return value is between 0 and 2π."""

    angle = atan2(y, x)

    if angle < 0:
        return angle + TWOPI
    return angle


def secondsToRadians(seconds: float) -> float:
    """Converts seconds of time to an hour angle in radians."""

    return seconds * SECONDS_TO_RAD


def radiansToSeconds(angle: float) -> float:
    """Converts an hour angle in radians to seconds of time."""

    return angle * RAD_TO_SECONDS
