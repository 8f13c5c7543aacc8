"""
The iteration protocol shared by all spirals.

A spiral is a plain iterator: it emits ``(x, y)`` tuples, one per call to
``next()``, and raises :class:`StopIteration` when done, for good. You
cannot restart a spiral; construct a new one, that's cheap.

``max_distance`` is the number of rings to emit, *including* the center.
Thus ``max_distance=1`` emits the center only, ``max_distance=2`` adds
the ring at distance 1, and so on. Anything less than 1 is rejected.
"""

from .coord import coord_type
from .util import InvalidDistanceError, CoordRangeError, short_repr

import logging
logger = logging.getLogger(__name__)


class SpiralIterator:
    """
    Abstract base class for spirals.

    Subclasses implement ``_step``, which advances the cursor and returns
    the offset to emit, or ``None`` when the spiral is exhausted. Once it
    has returned ``None`` it must keep doing so.
    """
    metric = None

    def __init__(self, center_x, center_y, max_distance, ctype=None):
        ctype = coord_type(ctype)
        for name, v in (("center_x", center_x), ("center_y", center_y)):
            if v not in ctype:
                raise CoordRangeError("%s=%r does not fit into %s" % (name, v, ctype.name))
        if not isinstance(max_distance, int) or isinstance(max_distance, bool):
            raise InvalidDistanceError("max_distance must be an integer, not %r" % (max_distance,))
        if max_distance < 1:
            raise InvalidDistanceError("max_distance must be at least 1, not %d" % (max_distance,))
        if max_distance not in ctype:
            raise CoordRangeError("max_distance=%d does not fit into %s" % (max_distance, ctype.name))

        self.center = (center_x, center_y)
        self.max_distance = max_distance
        self.ctype = ctype

        self._last = None
        self._emitted = 0
        self._total = self.count(max_distance)
        logger.debug("New %r", self)

    @classmethod
    def count(cls, max_distance):
        """The number of coordinates a spiral of this size emits."""
        raise NotImplementedError

    @staticmethod
    def _ring_of(dx, dy):
        raise NotImplementedError

    def _step(self):
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self):
        d = self._step()
        if d is None:
            if self._last is not None:
                logger.debug("Done: %r", self)
                self._last = None
            raise StopIteration
        self._last = d
        self._emitted += 1

        cx, cy = self.center
        return self.ctype.add(cx, d[0]), self.ctype.add(cy, d[1])

    def __length_hint__(self):
        return self._total - self._emitted

    @property
    def offset(self):
        """The offset of the last emitted coordinate, relative to the center.

        ``None`` before the first or after the last item.
        """
        return self._last

    @property
    def ring(self):
        """The ring the last emitted coordinate is on."""
        if self._last is None:
            return None
        return self._ring_of(*self._last)

    @property
    def emitted(self):
        return self._emitted

    def __repr__(self):
        return short_repr(type(self).__name__, self._repr())

    def _repr(self):
        res = {}
        res["at"] = "%d,%d" % self.center
        res["max"] = self.max_distance
        if self.ctype.bounded:
            res["type"] = self.ctype.name
        res["n"] = self._emitted
        return res
