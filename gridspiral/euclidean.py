"""
Spiral with (approximately) Euclidean distance measure.

A circle is symmetric under eight reflections, so we only walk the
canonical octant ``0 ≤ x ≤ y``: ring ``y`` runs from ``(0,y)`` to
``(y,y)``, i.e. outwards in true distance. Every canonical point is then
emitted with its reflections, in this order::

    (x,y) (x,-y) (-x,y) (-x,-y) (y,x) (y,-x) (-y,x) (-y,-x)

Reflections which land on a point that's already been emitted (the
center, points on an axis or on a diagonal) are skipped. Thus ring ``r``
holds the same ``8r`` points as the Chebyshev ring, but ordered by their
distance from the center.

There are two ways to find the next canonical point. By default we just
step there, keeping track of the squared radius as we go. Alternately,
``lut=True`` builds a table of the whole canonical octant up front and
walks that. The result is the same.
"""

from .base import SpiralIterator
from .const import Metric, Octant, REFLECTIONS
from .metric import chebyshev

__all__ = ["EuclideanSpiral"]


def _reflections(x, y):
    """Which reflections of canonical point (x,y) are distinct"""
    if y == 0:
        return (Octant.XY,)
    if x == 0:
        return (Octant.XY, Octant.XnY, Octant.YX, Octant.nYX)
    if x == y:
        return REFLECTIONS[:4]
    return REFLECTIONS


def build_lut(max_distance):
    """
    The canonical octant of all rings below max_distance, in walking order.
    """
    return [(x, y) for y in range(max_distance) for x in range(y+1)]


class EuclideanSpiral(SpiralIterator):
    """
    Iterate around (center_x,center_y) in circular-ish rings.

    Ring ``r`` is the set of points whose larger offset component is ``r``;
    within a ring, points are emitted in order of their distance from the
    center.

    Args:
      lut (bool): pre-build the canonical octant instead of computing it
        on the fly.
    """
    metric = Metric.EUCLIDEAN
    # the ring index is the canonical point's y
    _ring_of = staticmethod(chebyshev)

    def __init__(self, center_x, center_y, max_distance, ctype=None, lut=False):
        self._x = 0
        self._y = 0
        self._r2 = 0
        self._octant = Octant.XY
        self._octants = _reflections(0, 0)
        self._lut = None
        self._i = 0
        super().__init__(center_x, center_y, max_distance, ctype=ctype)
        if lut:
            self._lut = build_lut(max_distance)

    @classmethod
    def count(cls, max_distance):
        return (2*max_distance-1)**2

    @property
    def squared_radius(self):
        """x²+y² of the last emitted offset."""
        if self._last is None:
            return None
        return self._r2

    def _advance(self):
        """Move to the next canonical point. Returns False at the end."""
        if self._lut is not None:
            self._i += 1
            if self._i == len(self._lut):
                return False
            x, y = self._lut[self._i]
            self._r2 = x*x + y*y

        elif self._x < self._y:
            x, y = self._x+1, self._y
            self._r2 += 2*self._x+1
        else:
            x, y = 0, self._y+1
            if y == self.max_distance:
                return False
            self._r2 = y*y

        self._x, self._y = x, y
        self._octants = _reflections(x, y)
        return True

    def _step(self):
        o = self._octant
        if o is Octant.ADVANCE:
            if not self._advance():
                self._octant = Octant.DONE
                return None
            o = self._octants[0]

        elif o is Octant.DONE:
            return None

        # o is one of the eight reflections
        i = self._octants.index(o)+1
        self._octant = self._octants[i] if i < len(self._octants) else Octant.ADVANCE
        return o.reflect(self._x, self._y)

    def _repr(self):
        res = super()._repr()
        res["pt"] = "%d,%d" % (self._x, self._y)
        res["oct"] = self._octant.name
        if self._lut is not None:
            res["lut"] = len(self._lut)
        return res
