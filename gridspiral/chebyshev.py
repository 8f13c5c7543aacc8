#
# Spiral with Chebyshev distance measure, d(x,y) = max(|x|,|y|).
# The rings are squares. With center (3,3) and max_distance=4:
#
#   43 44 45 46 47 48 49
#   42 21 22 23 24 25 26
#   41 20  7  8  9 10 27
#   40 19  6  1  2 11 28
#   39 18  5  4  3 12 29
#   38 17 16 15 14 13 30
#   37 36 35 34 33 32 31
#
# (y grows downwards here.) Ring r starts at offset (r,1-r), next to the
# corner (r-1,1-r) where the previous ring ended.

from math import isqrt

from .base import SpiralIterator
from .const import Leg, Metric
from .metric import chebyshev

__all__ = ["ChebyshevSpiral", "chebyshev_offset"]


class ChebyshevSpiral(SpiralIterator):
    """
    Iterate around (center_x,center_y) in square rings.

    Ring ``r > 0`` contains ``8r`` points.
    """
    metric = Metric.CHEBYSHEV
    _ring_of = staticmethod(chebyshev)

    def __init__(self, center_x, center_y, max_distance, ctype=None):
        self._dx = 0
        self._dy = 0
        self._layer = 1
        self._leg = Leg.CENTER
        super().__init__(center_x, center_y, max_distance, ctype=ctype)

    @classmethod
    def count(cls, max_distance):
        return (2*max_distance-1)**2

    def _step(self):
        leg = self._leg
        if leg is Leg.CENTER:
            self._leg = Leg.RIGHT

        elif leg is Leg.RIGHT:
            self._dx += 1
            if self._dx == self._layer:
                if self._layer == self.max_distance:
                    self._leg = Leg.DONE
                    return None
                self._leg = Leg.TOP

        elif leg is Leg.TOP:
            self._dy += 1
            if self._dy == self._layer:
                self._leg = Leg.LEFT

        elif leg is Leg.LEFT:
            self._dx -= 1
            if -self._dx == self._layer:
                self._leg = Leg.BOTTOM

        elif leg is Leg.BOTTOM:
            self._dy -= 1
            if -self._dy == self._layer:
                self._leg = Leg.RIGHT
                self._layer += 1

        elif leg is Leg.DONE:
            return None

        return self._dx, self._dy

    def _repr(self):
        res = super()._repr()
        res["leg"] = self._leg.name
        res["layer"] = self._layer
        return res


def chebyshev_offset(n):
    """
    Given a non-negative integer N, return the offset of the N-th
    coordinate (counting from zero) a :class:`ChebyshevSpiral` emits.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0,0
    r = (isqrt(n)+1)//2  # radius
    k = n - (2*r-1)**2  # position on the ring

    if k < 2*r:  # right edge, going up
        return (r, k-r+1)
    k -= 2*r
    if k < 2*r:  # top edge, going left
        return (r-1-k, r)
    k -= 2*r
    if k < 2*r:  # left edge, going down
        return (-r, r-1-k)
    k -= 2*r
    assert k < 2*r  # bottom edge, going right
    return (k-r+1, -r)
