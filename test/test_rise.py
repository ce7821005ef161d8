import unittest
from math import radians, pi

from skytrack.bodies.rise import EventTime, RiseSetTimes, NoEvent, standardAltitudeLunar, dynamicalMidnight, \
    circumpolar, approxTransit, approxTimes, times
from skytrack.core.coordinates import EclipticCoordinate, EquatorialCoordinate
from skytrack.core.juliandate import Moment
from skytrack.exceptions import InvalidArgument

# Venus at Boston, 1988 March 20, example 15.a p. 103
BOSTON = EclipticCoordinate(radians(42.3333), radians(71.0833))
VENUS = [EquatorialCoordinate(radians(ra), radians(dec))
         for ra, dec in ((40.68021, 18.04761), (41.73129, 18.44092), (42.78204, 18.82742))]
TH0 = 177.74208 * 240
DELTA_T = 56
H0 = radians(-0.5667)


def seconds(dayFraction: float) -> float:
    return dayFraction * 86400


class TestApproxTimes(unittest.TestCase):

    def testApproxTransit(self):
        # -0.18035 of a day, the transit is on the previous UT day
        self.assertAlmostEqual(approxTransit(BOSTON, TH0, VENUS[1]), seconds(-0.18035), delta=2)

    def testApproxTimes(self):
        result = approxTimes(BOSTON, H0, TH0, VENUS[1])
        self.assertIsInstance(result, RiseSetTimes)

        self.assertAlmostEqual(result.transit.seconds, seconds(0.81965), delta=2)
        self.assertEqual(result.transit.dayOffset, 0)
        self.assertAlmostEqual(result.rise.seconds, seconds(0.51817), delta=2)
        self.assertEqual(result.rise.dayOffset, 0)
        self.assertAlmostEqual(result.set.seconds, seconds(0.12113), delta=2)
        self.assertEqual(result.set.dayOffset, 0)

    def testNoEvent(self):
        # a declination of +20 degrees never sets at latitude 80
        arctic = EclipticCoordinate(radians(80), 0)
        result = approxTimes(arctic, H0, TH0, EquatorialCoordinate(0, radians(20)))
        self.assertIsInstance(result, NoEvent)
        self.assertTrue(result.alwaysAbove)
        self.assertFalse(result.alwaysBelow)
        self.assertIsInstance(result.transit, EventTime)

        result = approxTimes(arctic, H0, TH0, EquatorialCoordinate(0, radians(-20)))
        self.assertTrue(result.alwaysBelow)


class TestTimes(unittest.TestCase):

    def testTimes(self):
        result = times(BOSTON, DELTA_T, H0, TH0, VENUS)
        self.assertIsInstance(result, RiseSetTimes)

        self.assertAlmostEqual(result.transit.seconds, seconds(0.81980), delta=10)
        self.assertEqual(result.transit.dayOffset, 0)
        self.assertAlmostEqual(result.rise.seconds, seconds(0.51766), delta=10)
        self.assertEqual(result.rise.dayOffset, 0)
        self.assertAlmostEqual(result.set.seconds, seconds(0.12130), delta=10)
        self.assertEqual(result.set.dayOffset, 0)

    def testRightAscensionWrap(self):
        # the same motion shifted across 0h gives the same times
        shifted = [EquatorialCoordinate((eq.ra - radians(41.73129)) % (2 * pi), eq.dec) for eq in VENUS]
        observer = EclipticCoordinate(BOSTON.lat, BOSTON.lng + radians(41.73129))
        wrapped = times(observer, DELTA_T, H0, TH0, shifted)
        result = times(BOSTON, DELTA_T, H0, TH0, VENUS)

        self.assertAlmostEqual(wrapped.transit.seconds, result.transit.seconds, delta=0.01)
        self.assertAlmostEqual(wrapped.rise.seconds, result.rise.seconds, delta=0.01)
        self.assertAlmostEqual(wrapped.set.seconds, result.set.seconds, delta=0.01)

    def testNoEvent(self):
        arctic = EclipticCoordinate(radians(80), 0)
        stars = [EquatorialCoordinate(0, radians(20))] * 3
        self.assertIsInstance(times(arctic, DELTA_T, H0, TH0, stars), NoEvent)

    def testInvalidSamples(self):
        with self.assertRaises(InvalidArgument):
            times(BOSTON, DELTA_T, H0, TH0, VENUS[:2])

    def testRefinedNearApprox(self):
        # each refined event is a small correction of the instant the approximate event names
        approx = approxTimes(BOSTON, H0, TH0, VENUS[1])
        result = times(BOSTON, DELTA_T, H0, TH0, VENUS)
        for before, after in ((approx.transit, result.transit), (approx.rise, result.rise), (approx.set, result.set)):
            self.assertEqual(after.dayOffset, before.dayOffset)
            self.assertAlmostEqual(after.dayOffset * 86400 + after.seconds,
                                   before.dayOffset * 86400 + before.seconds, delta=300)

    def testRepeatable(self):
        self.assertEqual(times(BOSTON, DELTA_T, H0, TH0, VENUS), times(BOSTON, DELTA_T, H0, TH0, VENUS))
        self.assertEqual(approxTimes(BOSTON, H0, TH0, VENUS[1]), approxTimes(BOSTON, H0, TH0, VENUS[1]))

    def testGrazing(self):
        # cos H0 of exactly 1 and -1 still rise and set, at the transit and half a day from it
        equator = EclipticCoordinate(0, 0)
        stars = [EquatorialCoordinate(0, 0)] * 3

        top = approxTimes(equator, pi / 2, 0, stars[1])
        self.assertIsInstance(top, RiseSetTimes)
        self.assertEqual(top.rise, top.transit)
        self.assertEqual(top.set, top.transit)
        bottom = approxTimes(equator, -pi / 2, 0, stars[1])
        self.assertIsInstance(bottom, RiseSetTimes)
        self.assertAlmostEqual(bottom.rise.seconds, 43200)
        self.assertAlmostEqual(bottom.set.seconds, 43200)

        for h0 in (pi / 2, -pi / 2):
            result = times(equator, DELTA_T, h0, 0, stars)
            self.assertIsInstance(result, RiseSetTimes)
            for event in (result.transit, result.rise, result.set):
                self.assertGreaterEqual(event.seconds, 0)
                self.assertLess(event.seconds, 86400)


class TestRiseHelpers(unittest.TestCase):

    def testCircumpolar(self):
        self.assertIsNone(circumpolar(radians(80), H0, radians(20)))
        self.assertIsNone(circumpolar(radians(80), H0, radians(-20)))
        self.assertAlmostEqual(circumpolar(radians(42.3333), H0, radians(18.44092)), -0.3178, 3)

        # grazing crossings are kept
        self.assertEqual(circumpolar(0, pi / 2, 0), 1.0)
        self.assertEqual(circumpolar(0, -pi / 2, 0), -1.0)

    def testStandardAltitudeLunar(self):
        # 0.7275 times the parallax less 34'
        self.assertAlmostEqual(standardAltitudeLunar(radians(0.95)), radians(0.7275 * 0.95 - 0.5667))

    def testDynamicalMidnight(self):
        day = Moment(2447240.5, DELTA_T)
        midnight = dynamicalMidnight(day)
        self.assertAlmostEqual(midnight.jde, 2447240.5, 8)
        self.assertEqual(midnight.deltaT, DELTA_T)
        self.assertAlmostEqual(dynamicalMidnight(day, -1).jde, 2447239.5, 8)
