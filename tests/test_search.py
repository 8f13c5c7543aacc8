import pytest
import trio

from gridspiral import ManhattanSpiral, ChebyshevSpiral
from gridspiral.const import SignalThis, SignalDone, AllDone
from gridspiral.search import PointChecker, PredicateChecker, SpiralSearch, find_nearest


class DiagonalChecker(PointChecker):
    async def check(self, x, y):
        if x == y:
            return SignalThis


class StopAt(PointChecker):
    def __init__(self, stop, signal, **kw):
        self.stop = stop
        self.signal = signal
        super().__init__(**kw)

    def check(self, x, y):
        # not a coroutine: plain check functions work too
        if (x, y) == self.stop:
            return self.signal


@pytest.mark.trio
async def test_find_nearest():
    walls = {(3, 0), (0, 2), (-1, -1)}
    res = await find_nearest(ManhattanSpiral(0, 0, 10), lambda x, y: (x, y) in walls)
    assert res == (0, 2)


@pytest.mark.trio
async def test_find_nearest_async_pred():
    async def pred(x, y):
        await trio.sleep(0)
        return x < -1

    res = await find_nearest(ChebyshevSpiral(0, 0, 5), pred)
    assert res == (-2, 2)


@pytest.mark.trio
async def test_find_nothing():
    assert await find_nearest(ManhattanSpiral(0, 0, 3), lambda x, y: False) is None


@pytest.mark.trio
async def test_n_results():
    s = SpiralSearch(ChebyshevSpiral(0, 0, 4), DiagonalChecker(), n_results=3)
    assert await s.run() == [(0, 0), (1, 1), (-1, -1)]
    assert s.is_done
    assert s.n_checked == 7


@pytest.mark.trio
async def test_unlimited():
    s = SpiralSearch(ChebyshevSpiral(0, 0, 3), DiagonalChecker(), n_results=None, checkpoint=1)
    res = await s.run()
    assert sorted(res) == [(-2, -2), (-1, -1), (0, 0), (1, 1), (2, 2)]
    assert s.n_checked == 25
    assert await s.run() is res


@pytest.mark.trio
async def test_signal_done():
    s = SpiralSearch(ManhattanSpiral(0, 0, 5), StopAt((0, -1), SignalDone), n_results=None)
    assert await s.run() == [(0, -1)]
    assert s.n_checked == 5


@pytest.mark.trio
async def test_all_done():
    s = SpiralSearch(ManhattanSpiral(0, 0, 5), StopAt((0, 1), AllDone), n_results=None)
    assert await s.run() == []
    assert s.n_checked == 3


@pytest.mark.trio
async def test_reporter():
    seen = []

    async def reporter(n, pos, res):
        seen.append((n, pos, res.signal))

    s = SpiralSearch(ManhattanSpiral(0, 0, 2), PredicateChecker(lambda x, y: y > 0, reporter=reporter), n_results=None)
    await s.run()
    assert seen == [
        (0, (0, 0), False),
        (0, (1, 0), False),
        (0, (0, 1), True),
        (1, (-1, 0), False),
        (1, (0, -1), False),
    ]


@pytest.mark.trio
async def test_cancel():
    s = SpiralSearch(ManhattanSpiral(0, 0, 3), DiagonalChecker(), n_results=None)
    with trio.CancelScope() as cs:
        cs.cancel()
        await s.run()
    assert cs.cancelled_caught
    assert s.n_checked == 0
    assert not s.is_done

    # a cancelled search picks up where it was interrupted
    assert await s.run() == [(0, 0), (1, 1), (-1, -1)]
    assert s.n_checked == 13
    assert s.is_done


class SlowFirst(PointChecker):
    def __init__(self, **kw):
        self.calls = []
        super().__init__(**kw)

    async def check(self, x, y):
        self.calls.append((x, y))
        if len(self.calls) == 1:
            await trio.sleep_forever()
        return SignalThis


@pytest.mark.trio
async def test_cancel_during_check(autojump_clock):
    c = SlowFirst()
    s = SpiralSearch(ManhattanSpiral(5, 5, 2), c, n_results=2)
    with trio.move_on_after(1):
        await s.run()
    assert not s.is_done
    assert s.results == []

    # the interrupted point is checked again
    assert await s.run() == [(5, 5), (6, 5)]
    assert c.calls == [(5, 5), (5, 5), (6, 5)]


def test_bad_checkpoint():
    with pytest.raises(ValueError):
        SpiralSearch(ManhattanSpiral(0, 0, 2), DiagonalChecker(), checkpoint=0)


@pytest.mark.parametrize("n", [0, -1])
def test_bad_n_results(n):
    with pytest.raises(ValueError):
        SpiralSearch(ManhattanSpiral(0, 0, 3), PredicateChecker(lambda x, y: True), n_results=n)


def test_repr():
    s = SpiralSearch(ManhattanSpiral(0, 0, 2), DiagonalChecker(), n_results=2)
    assert repr(s) == "SS‹done=N checked=0 found=0 want=2›"
