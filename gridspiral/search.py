# Area search

import trio
from inspect import iscoroutine

import logging
logger = logging.getLogger(__name__)

from .const import SignalThis, SignalDone, Continue
from .util import short_repr

__all__ = ["PointChecker", "PredicateChecker", "SpiralSearch", "find_nearest"]


class PointChecker:
    """
    Abstract base class for point checks
    """
    def __init__(self, reporter=None):
        self.reporter = reporter

    async def check(self, x, y):
        """
        Simple check function.
        Override me. May be a coroutine or not.
        """
        return None

    async def check_full(self, n, x, y):
        """
        Full check code which you might override.
        n: results so far
        x, y: the current point
        """
        res = self.check(x, y)
        if iscoroutine(res):
            res = await res
        if res is None:
            res = Continue
        if self.reporter:
            r = self.reporter(n, (x, y), res)
            if iscoroutine(r):
                await r
        return res


class PredicateChecker(PointChecker):
    """
    Signal every point for which ``pred(x,y)`` is true.

    The predicate may be a plain function or a coroutine function.
    """
    def __init__(self, pred, done=False, **kw):
        self.pred = pred
        self.done = done
        super().__init__(**kw)

    async def check(self, x, y):
        res = self.pred(x, y)
        if iscoroutine(res):
            res = await res
        if res:
            return SignalDone if self.done else SignalThis


class SpiralSearch:
    """
    Walk a spiral, collecting the points a checker signals.

    The search yields to trio every ``checkpoint`` points, so a large
    spiral doesn't starve other tasks. It stops when it has ``n_results``
    results, when the checker says it's done, or when the spiral runs out.
    Cancel it by cancelling the scope it runs in.

    Args:
      spiral: any iterator of (x,y) tuples, typically a
        :class:`gridspiral.SpiralIterator`.
      checker: a :class:`PointChecker`.
      n_results: the number of results to collect. ``None``: unlimited.
    """
    def __init__(self, spiral, checker:PointChecker, n_results=1, checkpoint=64):
        if checkpoint < 1:
            raise ValueError("checkpoint must be positive")
        if n_results is not None and n_results < 1:
            raise ValueError("n_results must be positive, or None")
        self.spiral = iter(spiral)
        self.checker = checker
        self.n_results = n_results
        self.checkpoint = checkpoint

        self.results = []  # (x,y)
        self.n_checked = 0
        self.is_done = False
        self._current = None  # pulled from the spiral but not yet checked

    def __repr__(self):
        return short_repr("SS", self._repr())

    def _repr(self):
        res = {}
        res["done"] = "Y" if self.is_done else "N"
        res["checked"] = self.n_checked
        res["found"] = len(self.results)
        if self.n_results is not None:
            res["want"] = self.n_results
        return res

    async def run(self):
        """
        Search. Returns the list of results.

        A search that got cancelled may be run again; it continues where
        it was interrupted.
        """
        if not self.is_done:
            await self._run()
            self.is_done = True
        return self.results

    async def _run(self):
        while True:
            if self._current is None:
                if self.n_checked % self.checkpoint == 0:
                    await trio.sleep(0)
                try:
                    self._current = next(self.spiral)
                except StopIteration:
                    return
            x, y = self._current
            p = self.checker.check_full(len(self.results), x, y)
            if iscoroutine(p):
                p = await p
            if p is None:
                p = Continue
            self._current = None
            self.n_checked += 1

            if p.signal:
                logger.debug("Found %d,%d: %r", x, y, self)
                self.results.append((x, y))
                if self.n_results is not None and len(self.results) >= self.n_results:
                    return
            if p.done:
                return


async def find_nearest(spiral, pred, **kw):
    """
    Return the first point of the spiral for which ``pred(x,y)`` is true,
    or ``None``.
    """
    s = SpiralSearch(spiral, PredicateChecker(pred, done=True), **kw)
    res = await s.run()
    return res[0] if res else None
