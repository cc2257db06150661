"""
Tests for primitive stamping, rows and circle subdivision.
"""

import math

import pytest
import numpy as np
from py_greebler.config.greeble_settings import StampProfile
from py_greebler.core.alea_prng import AleaPRNG
from py_greebler.core.heightfield import HeightField
from py_greebler.core.primitives import AnnulusSector, Axis, Circle, Line, Rectangle, Region
from py_greebler.core.stamper import PrimitiveStamper, polar_point, sector_corners


@pytest.fixture
def field():
    return HeightField(64)


@pytest.fixture
def stamper(field):
    """Stamper without a region filler, so rectangles are always drawn."""
    return PrimitiveStamper(field, AleaPRNG("stamper"), limit=8)


class TestGroove:
    """Test groove stamping."""

    def test_horizontal_ridge(self, field, stamper):
        stamper.stamp(Line(32, 32, 10, Axis.HORIZONTAL, 1))

        assert np.all(field.samples[32, 27:37] == 158)
        assert np.all(field.samples[31, 27:37] == 143)
        assert np.all(field.samples[33, 27:37] == 143)
        assert field.samples[32, 26] == 128
        assert field.samples[32, 37] == 128
        assert np.count_nonzero(field.samples != 128) == 30

    def test_vertical_groove(self, field, stamper):
        stamper.stamp(Line(20, 20, 6, Axis.VERTICAL, -1))

        assert np.all(field.samples[17:23, 20] == 98)
        assert np.all(field.samples[17:23, 19] == 113)
        assert np.all(field.samples[17:23, 21] == 113)
        assert field.samples[23, 20] == 128

    def test_zero_length(self, field, stamper):
        stamper.stamp(Line(10, 10, 0, Axis.HORIZONTAL, 1))
        assert field.is_flat()

    def test_partly_outside(self, field, stamper):
        """Test a groove hanging off the edge is clipped silently."""
        stamper.stamp(Line(0, 5, 20, Axis.HORIZONTAL, 1))
        assert np.all(field.samples[5, 0:10] == 158)
        assert field.samples[5, 10] == 128


class TestRectangle:
    """Test rectangle stamping and delegation."""

    def test_literal_rectangle(self, field, stamper):
        stamper.stamp(Rectangle(32, 32, 10, 8, 1))

        # interior, inset by the border
        assert np.all(field.samples[29:35, 28:36] == 158)
        # mid-edge border pixels
        assert field.samples[28, 32] == 143
        assert field.samples[36, 32] == 143
        assert field.samples[32, 27] == 143
        assert field.samples[32, 37] == 143
        # top-left corner lies on two edges
        assert field.samples[28, 27] == 158
        # outside
        assert field.samples[32, 38] == 128
        assert field.samples[37, 32] == 128

    def test_sunken_rectangle(self, field, stamper):
        stamper.stamp(Rectangle(10, 10, 8, 8, -1))
        assert field.samples[10, 10] == 98
        assert field.samples[6, 10] == 113

    def test_delegates_interior(self, field):
        """Test a delegated rectangle partitions its inset interior instead of drawing."""
        profile = StampProfile(rectangle_delegate_chance=1)
        stamper = PrimitiveStamper(field, AleaPRNG("delegate"), 8, profile)
        regions = []
        stamper.region_filler = regions.append

        stamper.stamp(Rectangle(32, 32, 10, 8, 1))

        assert regions == [Region(28, 29, 36, 35)]
        assert field.is_flat()

    def test_degenerate_interior_is_drawn(self, field):
        """Test a rectangle too small to have an interior is drawn literally."""
        profile = StampProfile(rectangle_delegate_chance=1)
        stamper = PrimitiveStamper(field, AleaPRNG("tiny"), 8, profile)
        regions = []
        stamper.region_filler = regions.append

        stamper.stamp(Rectangle(10, 10, 2, 2, 1))

        assert regions == []
        assert not field.is_flat()


class TestCircle:
    """Test circle stamping and subdivision."""

    def test_small_disk(self, field, stamper):
        stamper.stamp(Circle(10, 10, 3, 1))

        assert field.samples[10, 10] == 148
        assert field.samples[12, 12] == 148
        assert field.samples[10, 13] == 128
        assert field.samples[13, 10] == 128
        assert np.count_nonzero(field.samples != 128) == 25

    def test_no_subdivision_below_limit(self, stamper, monkeypatch):
        calls = []
        monkeypatch.setattr(stamper, "subdivide_circle", lambda *args: calls.append(args))
        stamper.stamp(Circle(10, 10, 4, 1))
        assert calls == []

    def test_non_positive_radius(self, field, stamper):
        stamper.stamp(Circle(10, 10, 0, 1))
        stamper.stamp(Circle(10, 10, -4, 1))
        assert field.is_flat()

    def test_large_circle_subdivides_inward(self, stamper, monkeypatch):
        """Test each recursive ring has a strictly smaller outer radius."""
        radii = []
        original = stamper.subdivide_circle

        def spy(x, y, radius, in_or_out):
            radii.append(radius)
            original(x, y, radius, in_or_out)

        monkeypatch.setattr(stamper, "subdivide_circle", spy)
        stamper.stamp(Circle(32, 32, 20, 1))

        assert radii[0] == 20
        assert all(b < a for a, b in zip(radii, radii[1:]))
        assert all(2 * r > stamper.limit for r in radii)

    def test_subdivision_depth_is_bounded(self, stamper, monkeypatch):
        radii = []
        original = stamper.subdivide_circle

        def spy(x, y, radius, in_or_out):
            radii.append(radius)
            original(x, y, radius, in_or_out)

        monkeypatch.setattr(stamper, "subdivide_circle", spy)
        stamper.subdivide_circle(32, 32, 500, 1)

        # inner radius is at most 0.8 of the outer one
        assert len(radii) <= math.ceil(math.log(8 / 1000) / math.log(0.8)) + 1

    def test_subdivision_covers_full_turn(self, stamper, monkeypatch):
        sectors = []
        monkeypatch.setattr(stamper, "stamp_annulus_sector", sectors.append)
        stamper.limit = 1000
        stamper.subdivide_circle(32, 32, 20, 1)

        assert sectors[0].start_angle == 0.0
        assert sectors[-1].end_angle == pytest.approx(2 * math.pi)
        for a, b in zip(sectors, sectors[1:]):
            assert b.start_angle == a.end_angle
        assert 10 <= len(sectors) <= 21
        assert all(s.outer_radius == 20 for s in sectors)
        assert all(6 <= s.inner_radius <= 16 for s in sectors)


class TestAnnulusSector:
    """Test annulus sector outlines."""

    def test_corners(self):
        sector = AnnulusSector(32, 32, 5, 15, 0.0, math.pi / 2, 1)
        assert sector_corners(sector) == [(37, 32), (47, 32), (32, 17), (32, 27)]

    def test_polar_point_inverts_y(self):
        assert polar_point(10, 10, 5, math.pi / 2) == (10, 5)
        assert polar_point(10, 10, 5, math.pi) == (5, 10)

    def test_outline_only(self, field, stamper):
        stamper.stamp(AnnulusSector(32, 32, 5, 15, 0.0, math.pi / 2, 1))

        for x, y in [(37, 32), (47, 32), (32, 17), (32, 27)]:
            assert field.samples[y, x] == 168
        assert field.samples[32, 42] == 148
        assert field.samples[28, 40] == 128
        assert field.samples[32, 32] == 128

    def test_sunken_outline(self, field, stamper):
        stamper.stamp(AnnulusSector(32, 32, 5, 15, 0.0, math.pi / 2, -1))
        assert field.samples[32, 42] == 108


class TestRow:
    """Test the row generator."""

    def test_row_advances_position(self, field, stamper):
        circle = Circle(5, 5, 2, 1)
        stamper.stamp_row(circle, Axis.HORIZONTAL, 3, 10)

        assert (circle.x, circle.y) == (35, 5)
        for x in (5, 15, 25):
            assert field.samples[5, x] == 148
        assert field.samples[5, 35] == 128

    def test_vertical_row(self, field, stamper):
        line = Line(30, 4, 6, Axis.HORIZONTAL, -1)
        stamper.stamp_row(line, Axis.VERTICAL, 4, 5)

        assert (line.x, line.y) == (30, 24)
        for y in (4, 9, 14, 19):
            assert field.samples[y, 30] == 98

    def test_zero_count(self, field, stamper):
        rect = Rectangle(10, 10, 6, 6, 1)
        stamper.stamp_row(rect, Axis.HORIZONTAL, 0, 8)
        assert field.is_flat()
        assert rect.x == 10


def test_unknown_primitive(stamper):
    with pytest.raises(TypeError):
        stamper.stamp(Region(0, 0, 4, 4))
