import unittest
from unittest import mock
from math import degrees, radians, pi, sin, cos

from pyevspace import Vector

from skytrack.bodies.moon import LunarPosition, computeMoonGeocentricPosition, computeMoonParallax, \
    computeMoonApparentEquatorial, computeMoonApparentTopocentric, computeParallacticAngle, \
    computeMoonTopocentricPosition, computeMoonPosition, computeMoonApproxTransit, computeMoonApproxTimes, \
    computeMoonTimes
from skytrack.bodies.position import apparentSiderealTimeGreenwichRadians
from skytrack.bodies.rise import RiseSetTimes, standardAltitudeLunar
from skytrack.core.coordinates import EclipticCoordinate, equatorialToHorizontal
from skytrack.core.juliandate import Moment
from skytrack.exceptions import DataTableError
from test.close import vectorIsClose


class TestMoonPosition(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # 1992 April 12 at 0h TD, example 47.a p. 342
        cls.moment = Moment(2448724.5, 0)

    def testGeocentric(self):
        position = computeMoonGeocentricPosition(self.moment)
        self.assertIsInstance(position, LunarPosition)
        self.assertAlmostEqual(degrees(position.lng), 133.162655, 4)
        self.assertAlmostEqual(degrees(position.lat), -3.229126, 4)
        self.assertAlmostEqual(position.distance, 368409.7, delta=0.5)

    def testRepeatable(self):
        self.assertEqual(computeMoonGeocentricPosition(self.moment), computeMoonGeocentricPosition(self.moment))

    def testParallax(self):
        self.assertAlmostEqual(degrees(computeMoonParallax(368409.7)), 0.991990, 5)

    def testApparentEquatorial(self):
        ae = computeMoonApparentEquatorial(self.moment)
        self.assertAlmostEqual(degrees(ae.eq.ra), 134.688470, 4)
        self.assertAlmostEqual(degrees(ae.eq.dec), 13.768368, 4)
        self.assertAlmostEqual(ae.distance, 368409.7, delta=0.5)

    def testPosition(self):
        ae = computeMoonApparentEquatorial(self.moment)
        position = computeMoonPosition(self.moment)
        self.assertAlmostEqual(position.mag(), ae.distance, 6)

        ra, dec = ae.eq.ra, ae.eq.dec
        expected = Vector(cos(dec) * cos(ra), cos(dec) * sin(ra), sin(dec)) * ae.distance
        self.assertTrue(vectorIsClose(position, expected, 6))
        self.assertAlmostEqual(position[2] / ae.distance, 0.23801, 4)

    def testCorruptTable(self):
        # a multiple of 3 for the Sun's mean anomaly is not in the series
        badTable = ((0, 3, 0, 1, 100),)
        with mock.patch('skytrack.bodies.moon.MOON_LATITUDE', badTable):
            with self.assertLogs('skytrack.bodies.moon', level='ERROR'):
                with self.assertRaises(DataTableError) as context:
                    computeMoonGeocentricPosition(self.moment)

        self.assertEqual(context.exception.row, badTable[0])


class TestMoonTopocentric(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.moment = Moment(2448724.5, 0)
        cls.paris = EclipticCoordinate.fromGeographic(48.8566, 2.3522, 35)

    def testApparentTopocentric(self):
        geocentric = computeMoonApparentEquatorial(self.moment)
        topocentric = computeMoonApparentTopocentric(self.moment, self.paris)

        # the displacement is at most the horizontal parallax
        parallax = computeMoonParallax(geocentric.distance)
        self.assertLess(abs(topocentric.eq.dec - geocentric.eq.dec), parallax)
        self.assertEqual(topocentric.distance, geocentric.distance)

        st0 = apparentSiderealTimeGreenwichRadians(self.moment)
        explicit = computeMoonApparentTopocentric(self.moment, self.paris, st0)
        self.assertEqual(explicit.eq.ra, topocentric.eq.ra)
        self.assertEqual(explicit.eq.dec, topocentric.eq.dec)

    def testParallacticAngle(self):
        # zero on the meridian for a body south of the zenith
        self.assertAlmostEqual(computeParallacticAngle(radians(48), 0, radians(10)), 0)
        # positive west of the meridian
        self.assertGreater(computeParallacticAngle(radians(48), radians(30), radians(10)), 0)
        self.assertLess(computeParallacticAngle(radians(48), radians(-30), radians(10)), 0)

    def testTopocentricPosition(self):
        position = computeMoonTopocentricPosition(self.moment, self.paris)
        self.assertIsNotNone(position.q)
        aet = computeMoonApparentTopocentric(self.moment, self.paris)
        self.assertEqual(position.eq.ra, aet.eq.ra)
        self.assertEqual(position.eq.dec, aet.eq.dec)

        refracted = computeMoonTopocentricPosition(self.moment, self.paris, withRefraction=True)
        self.assertGreater(refracted.hz.alt, position.hz.alt)


class TestMoonTimes(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        cls.paris = EclipticCoordinate.fromGeographic(48.8566, 2.3522)
        cls.day = Moment.fromGregorian(2020, 6, 21)
        cls.result = computeMoonTimes(cls.day, cls.paris)

    def eventMoment(self, event) -> Moment:
        return Moment(self.day.jd + event.dayOffset + event.seconds / 86400, self.day.deltaT)

    def testTransit(self):
        self.assertIsInstance(self.result, RiseSetTimes)

        moment = self.eventMoment(self.result.transit)
        ae = computeMoonApparentEquatorial(moment)
        hourAngle = apparentSiderealTimeGreenwichRadians(moment) - self.paris.lng - ae.eq.ra
        hourAngle = (hourAngle + pi) % (2 * pi) - pi
        self.assertLess(abs(degrees(hourAngle)), 1.5)

    def testRiseSet(self):
        midnight = computeMoonApparentEquatorial(Moment.fromJde(self.day.jd, self.day.deltaT))
        h0 = standardAltitudeLunar(computeMoonParallax(midnight.distance))

        for event in (self.result.rise, self.result.set):
            with self.subTest(event=event):
                moment = self.eventMoment(event)
                ae = computeMoonApparentEquatorial(moment)
                hz = equatorialToHorizontal(ae.eq, self.paris, apparentSiderealTimeGreenwichRadians(moment))
                self.assertLess(abs(degrees(hz.alt - h0)), 0.5)

    def testApproxTimes(self):
        approx = computeMoonApproxTimes(self.day, self.paris)
        self.assertIsInstance(approx, RiseSetTimes)
        self.assertAlmostEqual(approx.transit.seconds, self.result.transit.seconds, delta=3600)
        self.assertAlmostEqual(approx.rise.seconds, self.result.rise.seconds, delta=3600)

        transit = computeMoonApproxTransit(self.day, self.paris)
        self.assertAlmostEqual(transit % 86400, approx.transit.seconds, 6)
