import unittest

from skytrack.core.interpolation import Len3, newLen3, interpolateByFactor, interpolateByX
from skytrack.exceptions import InvalidArgument


class TestLen3(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        # distance of Mars to the Earth, 1992 November 7, 8 and 9 at 0h TD, example 3.a p. 25
        cls.table = newLen3(7, 9, (0.884226, 0.877366, 0.870531))

    def testDifferences(self):
        self.assertAlmostEqual(self.table.a, -0.006860, 9)
        self.assertAlmostEqual(self.table.b, -0.006835, 9)
        self.assertAlmostEqual(self.table.c, 0.000025, 9)
        self.assertEqual(self.table.xSum, 16)
        self.assertEqual(self.table.xDiff, 2)

    def testInterpolate(self):
        # November 8 at 4h21m
        self.assertAlmostEqual(interpolateByFactor(self.table, 0.18125), 0.876125, 6)
        self.assertAlmostEqual(interpolateByX(self.table, 8.18125), 0.876125, 6)

    def testSamples(self):
        for x, y in zip((7, 8, 9), self.table.y):
            with self.subTest(x=x):
                self.assertAlmostEqual(interpolateByX(self.table, x), y, 12)

    def testReversedRange(self):
        table = newLen3(9, 7, (0.870531, 0.877366, 0.884226))
        self.assertAlmostEqual(interpolateByX(table, 8.18125), 0.876125, 6)

    def testInvalid(self):
        with self.assertRaises(InvalidArgument):
            Len3(0, 2, (1, 2))
        with self.assertRaises(InvalidArgument):
            newLen3(1, 1, (1, 2, 3))
