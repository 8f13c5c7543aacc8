import pytest


def _numbered(it, width, height):
    """Number the points of `it` in order; return the grid, by rows."""
    grid = [[0]*width for _ in range(height)]
    for n, (x, y) in enumerate(it, 1):
        assert grid[y][x] == 0, "(%d,%d) emitted twice" % (x, y)
        grid[y][x] = n
    return grid


@pytest.fixture
def numbered():
    return _numbered
