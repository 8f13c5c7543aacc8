"""
Distance functions, one per :class:`gridspiral.const.Metric`.
"""
from math import hypot

from .const import Metric
from .util import SpiralError


def chebyshev(dx, dy):
    return max(abs(dx), abs(dy))

def manhattan(dx, dy):
    return abs(dx) + abs(dy)

def euclidean(dx, dy):
    return hypot(dx, dy)

_DISTANCE = {
    Metric.CHEBYSHEV: chebyshev,
    Metric.MANHATTAN: manhattan,
    Metric.EUCLIDEAN: euclidean,
}


def as_metric(metric):
    """
    Accept a :class:`Metric` or its name, in any case.
    """
    if isinstance(metric, Metric):
        return metric
    try:
        return Metric(str(metric).lower())
    except ValueError:
        raise SpiralError("Unknown metric: %r" % (metric,)) from None


def distance(metric, dx, dy):
    """
    The distance of offset (dx,dy) from the origin.

    This is an ``int`` for Chebyshev and Manhattan, a ``float`` for
    Euclidean.
    """
    return _DISTANCE[as_metric(metric)](dx, dy)
