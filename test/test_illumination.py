import unittest
from math import radians, degrees, pi

from skytrack.bodies.illumination import computePhaseAngle, computePhaseAngleApprox, computeIlluminatedFraction, \
    computeBrightLimbAngle, computeMoonIllumination
from skytrack.core.coordinates import EquatorialCoordinate
from skytrack.core.juliandate import Moment


class TestIllumination(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # 1992 April 12 at 0h TD, example 48.a p. 347
        cls.moon = EquatorialCoordinate(radians(134.6885), radians(13.7684))
        cls.moonDistance = 368410
        cls.sun = EquatorialCoordinate(radians(20.6579), radians(8.6964))
        cls.sunDistance = 149971520

    def testPhaseAngle(self):
        i = computePhaseAngle(self.moon, self.moonDistance, self.sun, self.sunDistance)
        self.assertAlmostEqual(degrees(i), 69.0756, delta=0.002)

        # 180 degrees less the elongation of 110.7929
        approx = computePhaseAngleApprox(self.moon, self.sun)
        self.assertAlmostEqual(degrees(approx), 69.2071, delta=0.002)

    def testIlluminatedFraction(self):
        i = computePhaseAngle(self.moon, self.moonDistance, self.sun, self.sunDistance)
        self.assertAlmostEqual(computeIlluminatedFraction(i), 0.6786, 4)

        self.assertEqual(computeIlluminatedFraction(0), 1)
        self.assertAlmostEqual(computeIlluminatedFraction(pi), 0)
        self.assertAlmostEqual(computeIlluminatedFraction(pi / 2), 0.5)

    def testBrightLimb(self):
        chi = computeBrightLimbAngle(self.moon, self.sun)
        self.assertAlmostEqual(degrees(chi), 285.0, delta=0.1)

        # a waxing Moon east of the Sun is lit on its west side
        waxing = computeBrightLimbAngle(EquatorialCoordinate(radians(60), 0), EquatorialCoordinate(0, 0))
        self.assertAlmostEqual(degrees(waxing), 270)

    def testMoonIllumination(self):
        self.assertAlmostEqual(computeMoonIllumination(Moment(2448724.5, 0)), 0.6786, delta=0.002)

        # 2020 June 21 at 6h41m UT was a new Moon and July 5 at 4h44m UT a full Moon
        self.assertLess(computeMoonIllumination(Moment.fromGregorian(2020, 6, 21.28)), 0.01)
        self.assertGreater(computeMoonIllumination(Moment.fromGregorian(2020, 7, 5.2)), 0.99)
