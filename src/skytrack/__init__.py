"""Compute the positions of the Sun and the Moon and their rise, transit and set times.

The algorithms follow Jean Meeus, Astronomical Algorithms, 2nd edition. Angles are in radians and times of day are in
seconds unless a function says otherwise. Longitudes of observers are positive westward, use
`EclipticCoordinate.fromGeographic()` to build an observer from the usual east-positive longitude.

Usage
_____

>>> from skytrack.core import Moment, EclipticCoordinate
>>> from skytrack.bodies import computeSunTimes, computeMoonIllumination
>>>
>>> paris = EclipticCoordinate.fromGeographic(48.8566, 2.3522)
>>> day = Moment.fromGregorian(2020, 6, 21)
>>> sunTimes = computeSunTimes(day, paris)
>>> sunTimes.rise.seconds / 3600 # sunrise in hours of UT
3.78...
>>> moonLit = computeMoonIllumination(day) # close to new moon, near 0

A body that never crosses its standard altitude on a day returns a `NoEvent` instead of a `RiseSetTimes`, whose
`alwaysAbove` and `alwaysBelow` properties tell the two cases apart.

The package logs through the standard `logging` module under the 'skytrack' logger and installs no handler of its own.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = []

# import modules
from .exceptions import *
__all__ += exceptions.__all__

# import subpackages
from .util import *
__all__ += util.__all__
from .core import *
__all__ += core.__all__
from .bodies import *
__all__ += bodies.__all__
