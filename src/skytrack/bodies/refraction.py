"""Atmospheric refraction near the horizon, (16) p. 105. The formulas assume standard atmospheric conditions."""

from math import radians, sin, tan

_ONE_ARCMIN = radians(1 / 60)


def atmosphericRefractionBennett(h0: float) -> float:
    """Refraction in radians to subtract from a measured apparent altitude h0 to obtain the true altitude. Accurate to
    0.07' from the horizon to the zenith. Negative altitudes are treated as 0."""

    if h0 < 0:
        h0 = 0.0

    # (16.3) p. 106
    return _ONE_ARCMIN / tan(h0 + radians(7.31) * radians(1) / (h0 + radians(4.4)))


def atmosphericRefractionBennett2(h0: float) -> float:
    """Bennett's refraction with the correction for more accuracy, 0.015'. The argument and result are the same as
    atmosphericRefractionBennett()."""

    R = atmosphericRefractionBennett(h0)
    # the correction's argument is 14.7 R + 13 degrees for R in arc minutes
    return R - 0.06 * _ONE_ARCMIN * sin(14.7 * 60 * R + radians(13))


def atmosphericRefractionSaemundsson(h: float) -> float:
    """Refraction in radians to add to a computed true altitude h to obtain the apparent altitude. Consistent with
    Bennett's formula to within 4"."""

    # (16.4) p. 106
    return 1.02 * _ONE_ARCMIN / tan(h + radians(10.3) * radians(1) / (h + radians(5.11)))
