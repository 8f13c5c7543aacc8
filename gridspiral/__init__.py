"""
Iterators which walk a 2D integer grid in a spiral around some center.
"""
from .const import Metric, Leg, Octant
from .coord import CoordType, coord_type, INT
from .util import SpiralError, InvalidDistanceError, CoordRangeError
from .base import SpiralIterator
from .chebyshev import ChebyshevSpiral, chebyshev_offset
from .manhattan import ManhattanSpiral, manhattan_offset
from .euclidean import EuclideanSpiral
from .metric import as_metric, distance

__all__ = ["Metric", "Leg", "Octant", "CoordType", "coord_type", "INT",
        "SpiralError", "InvalidDistanceError", "CoordRangeError",
        "SpiralIterator", "ChebyshevSpiral", "ManhattanSpiral",
        "EuclideanSpiral", "chebyshev_offset", "manhattan_offset",
        "distance", "spiral", "SPIRALS"]

SPIRALS = {
    Metric.CHEBYSHEV: ChebyshevSpiral,
    Metric.MANHATTAN: ManhattanSpiral,
    Metric.EUCLIDEAN: EuclideanSpiral,
}


def spiral(metric, center_x, center_y, max_distance, **kw):
    """
    Create a spiral iterator for this metric.

    Args:
      metric: a :class:`Metric`, or its name.
      kw: passed to the iterator: ``ctype``, and ``lut`` for Euclidean
        spirals.
    """
    return SPIRALS[as_metric(metric)](center_x, center_y, max_distance, **kw)
