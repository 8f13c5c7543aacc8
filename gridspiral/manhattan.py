#
# Spiral with Manhattan distance measure, d(x,y) = |x|+|y|.
# We want to generate coordinates for this set of numbers, assuming zero in
# the origin (y grows downwards):
#
#                                    23
#                                 22 12 24
#                              21 11  5 13 25
#                           20 10  4  1  2  6 14
#                              19  9  3  7 15
#                                 18  8 16
#                                    17
#
# Think of it as a circle with Manhattan measure.
# A real circle has √(x²+y²) which doesn't work well on an integer grid,
# while a square has max(x,y) which isn't optimal for distributing things
# on maps.

from math import isqrt

from .base import SpiralIterator
from .const import Leg, Metric
from .metric import manhattan

__all__ = ["ManhattanSpiral", "manhattan_offset"]


def _max_at(r):
    # number of points on rings 1…r
    return 2*r*(r+1)


class ManhattanSpiral(SpiralIterator):
    """
    Iterate around (center_x,center_y) in diamond-shaped rings.

    Ring ``r > 0`` contains ``4r`` points. It starts on the positive x
    axis and runs through the positive y axis first.
    """
    metric = Metric.MANHATTAN
    _ring_of = staticmethod(manhattan)

    def __init__(self, center_x, center_y, max_distance, ctype=None):
        # one RIGHT step short of (1,0)
        self._dx = 2
        self._dy = -1
        self._layer = 1
        self._leg = Leg.CENTER
        super().__init__(center_x, center_y, max_distance, ctype=ctype)

    @classmethod
    def count(cls, max_distance):
        return _max_at(max_distance-1)+1

    def _step(self):
        leg = self._leg
        if leg is Leg.CENTER:
            # there is no ring to step onto
            self._leg = Leg.DONE if self.max_distance == 1 else Leg.RIGHT
            return 0,0

        elif leg is Leg.RIGHT:
            self._dx -= 1
            self._dy += 1
            if self._dx == 0:
                self._leg = Leg.TOP

        elif leg is Leg.TOP:
            self._dx -= 1
            self._dy -= 1
            if self._dy == 0:
                self._leg = Leg.LEFT

        elif leg is Leg.LEFT:
            self._dx += 1
            self._dy -= 1
            if self._dx == 0:
                self._leg = Leg.BOTTOM

        elif leg is Leg.BOTTOM:
            self._dx += 1
            self._dy += 1
            if self._dy == 0:
                # step outwards, onto the next ring's start
                self._dx += 1
                self._layer += 1
                if self._layer == self.max_distance:
                    self._leg = Leg.DONE
                    return None
                self._leg = Leg.RIGHT

        elif leg is Leg.DONE:
            return None

        return self._dx, self._dy

    def _repr(self):
        res = super()._repr()
        res["leg"] = self._leg.name
        res["layer"] = self._layer
        return res


# v=2*n*(n+1)
# v/2=n*(n+1)
# n*n+n-v/2=0
# n = (-1 + sq(1+2v))/2, rounded up
def _r_for(n):
    # Given N > 0, return the radius of the ring holding it
    return (isqrt(2*n-1)+1)//2

def manhattan_offset(n):
    """
    Given a non-negative integer N, return the offset of the N-th
    coordinate (counting from zero) a :class:`ManhattanSpiral` emits.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0,0
    r = _r_for(n)  # radius
    b = _max_at(r-1)+1  # base = first number in a circle
    q, k = divmod(n-b, r)

    if q == 0:  # first quadrant
        return (r-k, k)
    if q == 1:  # second quadrant
        return (-k, r-k)
    if q == 2:  # third
        return (k-r, -k)
    assert q == 3  # fourth
    return (k, k-r)
