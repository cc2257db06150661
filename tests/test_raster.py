"""
Tests for integer line rasterization.
"""

import inspect

import pytest
from py_greebler.core.raster import rasterize_line


class TestRasterizeLine:
    """Test Bresenham line rasterization."""

    def test_is_lazy(self):
        """Test the rasterizer returns a generator."""
        assert inspect.isgenerator(rasterize_line(0, 0, 5, 5))

    def test_single_point(self):
        assert list(rasterize_line(3, 3, 3, 3)) == [(3, 3)]

    def test_horizontal(self):
        assert list(rasterize_line(0, 0, 4, 0)) == [(x, 0) for x in range(5)]

    def test_vertical_reversed(self):
        assert list(rasterize_line(2, 5, 2, 1)) == [(2, y) for y in range(5, 0, -1)]

    def test_diagonal(self):
        assert list(rasterize_line(0, 0, 3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]

    def test_shallow_slope(self):
        assert list(rasterize_line(0, 0, 5, 2)) == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2), (5, 2)]

    @pytest.mark.parametrize(
        "x1,y1",
        [(7, 2), (2, 7), (-2, 7), (-7, 2), (-7, -2), (-2, -7), (2, -7), (7, -2)],
    )
    def test_every_octant(self, x1, y1):
        """Test endpoints, connectivity and point count in all eight octants."""
        points = list(rasterize_line(0, 0, x1, y1))
        assert points[0] == (0, 0)
        assert points[-1] == (x1, y1)
        assert len(points) == max(abs(x1), abs(y1)) + 1
        for (ax, ay), (bx, by) in zip(points, points[1:]):
            assert max(abs(bx - ax), abs(by - ay)) == 1
