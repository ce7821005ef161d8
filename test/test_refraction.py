import unittest
from math import radians, degrees

from skytrack.bodies.refraction import atmosphericRefractionBennett, atmosphericRefractionBennett2, \
    atmosphericRefractionSaemundsson


def arcminutes(angle: float) -> float:
    return degrees(angle) * 60


class TestRefraction(unittest.TestCase):

    def testBennett(self):
        # about 34.5' at the horizon
        self.assertAlmostEqual(arcminutes(atmosphericRefractionBennett(0)), 34.48, 1)
        # negative altitudes are clamped to the horizon
        self.assertEqual(atmosphericRefractionBennett(radians(-1)), atmosphericRefractionBennett(0))
        # nearly nothing at the zenith
        self.assertLess(abs(arcminutes(atmosphericRefractionBennett(radians(90)))), 0.01)

    def testBennett2(self):
        # the correction is at most 0.06'
        for altitude in (0, 10, 45, 80):
            with self.subTest(altitude=altitude):
                plain = arcminutes(atmosphericRefractionBennett(radians(altitude)))
                corrected = arcminutes(atmosphericRefractionBennett2(radians(altitude)))
                self.assertLessEqual(abs(plain - corrected), 0.0601)

    def testSaemundsson(self):
        # about 29' for a true altitude of 0
        self.assertAlmostEqual(arcminutes(atmosphericRefractionSaemundsson(0)), 28.98, 1)

        # consistent with Bennett within a few arc seconds above the horizon
        for altitude in (5, 20, 45):
            with self.subTest(altitude=altitude):
                true = radians(altitude)
                apparent = true + atmosphericRefractionSaemundsson(true)
                back = apparent - atmosphericRefractionBennett(apparent)
                self.assertLess(abs(degrees(back - true)) * 3600, 5)
