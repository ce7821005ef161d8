import unittest
from math import radians, degrees

from skytrack.bodies.topocentric import ApparentPosition, TopocentricPosition, horizontalParallax, \
    topocentricParallax, topocentricParallaxSimplified
from skytrack.core.coordinates import EquatorialCoordinate, HorizontalCoordinate


class TestTopocentric(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # Mars from Palomar, 2003 August 28 at 3h17m UT, example 40.a p. 280
        cls.mars = EquatorialCoordinate(radians(339.530208), radians(-15.771083))
        cls.distance = 0.37276
        cls.rhoSinLat = 0.546861
        cls.rhoCosLat = 0.836339
        cls.lng = radians(116.8625)
        cls.sidereal = radians(25.1875)

    def testHorizontalParallax(self):
        self.assertAlmostEqual(degrees(horizontalParallax(self.distance)) * 3600, 23.592, 2)
        self.assertAlmostEqual(degrees(horizontalParallax(1.0)) * 3600, 8.794, 9)

    def testParallax(self):
        parallax = horizontalParallax(self.distance)
        eq = topocentricParallax(self.mars, parallax, self.rhoSinLat, self.rhoCosLat, self.lng, self.sidereal)
        # 22h38m08.54s and -15°46'30.0"
        self.assertAlmostEqual(degrees(eq.ra), 339.535583, 4)
        self.assertAlmostEqual(degrees(eq.dec), -15.775, 3)

    def testParallaxSimplified(self):
        parallax = horizontalParallax(self.distance)
        eq = topocentricParallax(self.mars, parallax, self.rhoSinLat, self.rhoCosLat, self.lng, self.sidereal)
        simple = topocentricParallaxSimplified(self.mars, parallax, self.rhoSinLat, self.rhoCosLat, self.lng,
                                               self.sidereal)
        self.assertAlmostEqual(degrees(simple.ra), degrees(eq.ra), 4)
        self.assertAlmostEqual(degrees(simple.dec), degrees(eq.dec), 4)

    def testRightAscensionRange(self):
        # a body just past 0h in the west is pushed back across 0h by the parallax
        eq = EquatorialCoordinate(radians(0.0001), 0)
        result = topocentricParallax(eq, radians(1), 0, 1, 0, radians(90))
        self.assertGreater(result.ra, radians(359))
        self.assertLess(result.ra, radians(360))

    def testPositionTypes(self):
        eq = EquatorialCoordinate(1, 0.5)
        position = ApparentPosition(eq, 384400)
        self.assertEqual(position.distance, 384400)

        topo = TopocentricPosition(HorizontalCoordinate(1, 0.2), eq, 384400)
        self.assertIsNone(topo.q)
        with self.assertRaises(AttributeError):
            topo.distance = 0
