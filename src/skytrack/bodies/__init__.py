from .illumination import (
    computePhaseAngle,
    computePhaseAngleApprox,
    computeIlluminatedFraction,
    computeBrightLimbAngle,
    computeMoonIllumination,
)

from .moon import (
    LunarPosition,
    computeMoonGeocentricPosition,
    computeMoonParallax,
    computeMoonApparentEquatorial,
    computeMoonApparentTopocentric,
    computeParallacticAngle,
    computeMoonTopocentricPosition,
    computeMoonPosition,
    computeMoonApproxTransit,
    computeMoonApproxTimes,
    computeMoonTimes,
)

from .position import (
    nutation,
    meanObliquity,
    meanObliquityLaskar,
    trueObliquity,
    nutationInRightAscension,
    meanSiderealTimeGreenwich,
    meanSiderealTime0UT,
    apparentSiderealTimeGreenwich,
    apparentSiderealTimeGreenwichRadians,
    apparentSiderealTimeLocal,
    apparentSiderealTime0UT,
)

from .refraction import (
    atmosphericRefractionBennett,
    atmosphericRefractionBennett2,
    atmosphericRefractionSaemundsson,
)

from .rise import (
    EventTime,
    RiseSetTimes,
    NoEvent,
    standardAltitudeLunar,
    dynamicalMidnight,
    circumpolar,
    approxTransit,
    approxTimes,
    times,
)

from .sun import (
    computeSunMeanAnomaly,
    computeSunTrueLongitude,
    computeSunRadiusVector,
    computeSunNode,
    computeSunApparentLongitude,
    computeSunApparentEquatorial,
    computeSunApparentTopocentric,
    computeSunTopocentricPosition,
    computeSunPosition,
    computeSunApproxTransit,
    computeSunApproxTimes,
    computeSunTimes,
    Twilight,
    computeSunTwilightTimes,
    computeTwilightType,
)

from .topocentric import (
    ApparentPosition,
    TopocentricPosition,
    horizontalParallax,
    topocentricParallax,
    topocentricParallaxSimplified,
)

__all__ = (
    # illumination.py
    'computePhaseAngle',
    'computePhaseAngleApprox',
    'computeIlluminatedFraction',
    'computeBrightLimbAngle',
    'computeMoonIllumination',

    # moon.py
    'LunarPosition',
    'computeMoonGeocentricPosition',
    'computeMoonParallax',
    'computeMoonApparentEquatorial',
    'computeMoonApparentTopocentric',
    'computeParallacticAngle',
    'computeMoonTopocentricPosition',
    'computeMoonPosition',
    'computeMoonApproxTransit',
    'computeMoonApproxTimes',
    'computeMoonTimes',

    # position.py
    'nutation',
    'meanObliquity',
    'meanObliquityLaskar',
    'trueObliquity',
    'nutationInRightAscension',
    'meanSiderealTimeGreenwich',
    'meanSiderealTime0UT',
    'apparentSiderealTimeGreenwich',
    'apparentSiderealTimeGreenwichRadians',
    'apparentSiderealTimeLocal',
    'apparentSiderealTime0UT',

    # refraction.py
    'atmosphericRefractionBennett',
    'atmosphericRefractionBennett2',
    'atmosphericRefractionSaemundsson',

    # rise.py
    'EventTime',
    'RiseSetTimes',
    'NoEvent',
    'standardAltitudeLunar',
    'dynamicalMidnight',
    'circumpolar',
    'approxTransit',
    'approxTimes',
    'times',

    # sun.py
    'computeSunMeanAnomaly',
    'computeSunTrueLongitude',
    'computeSunRadiusVector',
    'computeSunNode',
    'computeSunApparentLongitude',
    'computeSunApparentEquatorial',
    'computeSunApparentTopocentric',
    'computeSunTopocentricPosition',
    'computeSunPosition',
    'computeSunApproxTransit',
    'computeSunApproxTimes',
    'computeSunTimes',
    'Twilight',
    'computeSunTwilightTimes',
    'computeTwilightType',

    # topocentric.py
    'ApparentPosition',
    'TopocentricPosition',
    'horizontalParallax',
    'topocentricParallax',
    'topocentricParallaxSimplified',
)
