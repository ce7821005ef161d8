from skytrack.exceptions import InvalidArgument


class Len3:
    """Table of three equally spaced samples for quadratic interpolation. Only the first and last abscissae are kept,
    the middle one is implied. The differences a, b and c are those of (3.3) p. 24."""

    __slots__ = '_x1', '_x3', '_y', '_a', '_b', '_c'

    def __init__(self, x1: float, x3: float, y):
        y = tuple(y)
        if len(y) != 3:
            raise InvalidArgument(f'interpolation table requires exactly 3 samples, not {len(y)}')
        if x1 == x3:
            raise InvalidArgument('interpolation table requires a non-empty x range')

        self._x1 = x1
        self._x3 = x3
        self._y = y
        self._a = y[1] - y[0]
        self._b = y[2] - y[1]
        self._c = self._b - self._a

    def __repr__(self):
        return f'Len3({self._x1}, {self._x3}, {self._y})'

    @property
    def x1(self) -> float:
        return self._x1

    @property
    def x3(self) -> float:
        return self._x3

    @property
    def y(self) -> tuple:
        return self._y

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def c(self) -> float:
        return self._c

    @property
    def abSum(self) -> float:
        return self._a + self._b

    @property
    def xSum(self) -> float:
        return self._x3 + self._x1

    @property
    def xDiff(self) -> float:
        return self._x3 - self._x1


def newLen3(x1: float, x3: float, y) -> Len3:
    """Prepares a Len3 table from the first and last abscissae and three sample values."""

    return Len3(x1, x3, y)


def interpolateByFactor(table: Len3, n: float) -> float:
    """Interpolates for a factor n, which is x - x2 in units of the tabular interval. n = -1, 0 and 1 return the
    samples."""

    # (3.3) p. 24
    return table.y[1] + n * 0.5 * (table.abSum + n * table.c)


def interpolateByX(table: Len3, x: float) -> float:
    """Interpolates for an abscissa x."""

    n = (2 * x - table.xSum) / table.xDiff
    return interpolateByFactor(table, n)
