"""
Primitive stamping onto a height field.

This module draws grooves, rectangles, circles and annulus sectors with a
raised (+1) or sunken (-1) profile, walks primitives along rows, and breaks
large circles into concentric rings of radial panels.

Rectangles can hand their interior back to the region partitioner, which
is how rows of panels grow further recursive detail.
"""

import math
from typing import Callable, List, Optional, Tuple

import numpy as np

from ..config.greeble_settings import DEFAULT_STAMP_PROFILE, StampProfile
from .alea_prng import AleaPRNG
from .heightfield import HeightField
from .primitives import AnnulusSector, Axis, Circle, Line, Primitive, Rectangle, Region
from .raster import rasterize_line

TWO_PI = 2.0 * math.pi


class PrimitiveStamper:
    """
    Stamps primitives into a height field.

    Every mutation goes through ``HeightField.set_height``/``set_heights``,
    so primitives may lie partly or fully outside the field.
    """

    def __init__(
        self,
        height_field: HeightField,
        prng: AleaPRNG,
        limit: int,
        profile: Optional[StampProfile] = None,
    ):
        """
        Initialize the stamper.

        Args:
            height_field: Field to mutate
            prng: Shared random source
            limit: Size floor below which circles are not subdivided
            profile: Stamping magnitudes and ratios
        """
        self.height_field = height_field
        self.prng = prng
        self.limit = limit
        self.profile = profile or DEFAULT_STAMP_PROFILE

        # Set by RegionPartitioner; rectangles delegate to it
        self.region_filler: Optional[Callable[[Region], None]] = None

    def stamp(self, primitive: Primitive) -> None:
        """Draw any primitive."""
        if isinstance(primitive, Line):
            self.stamp_groove(primitive)
        elif isinstance(primitive, Rectangle):
            self.stamp_rectangle(primitive)
        elif isinstance(primitive, Circle):
            self.stamp_circle(primitive)
        elif isinstance(primitive, AnnulusSector):
            self.stamp_annulus_sector(primitive)
        else:
            raise TypeError(f"Unknown primitive type: {type(primitive).__name__}")

    def stamp_groove(self, line: Line) -> None:
        """
        Stamp a V-shaped groove (or ridge) centered on the line's position.

        The centerline gets the full depth; the pixels one step to either
        side of it get the shoulder depth.
        """
        if line.length <= 0:
            return
        axis = line.axis
        half = line.length // 2
        steps = np.arange(line.length)
        xs = line.x - half * axis.dx + steps * axis.dx
        ys = line.y - half * axis.dy + steps * axis.dy

        p = self.profile
        self.height_field.set_heights(xs, ys, p.groove_depth * line.in_or_out)
        self.height_field.set_heights(xs + axis.dy, ys + axis.dx, p.groove_shoulder * line.in_or_out)
        self.height_field.set_heights(xs - axis.dy, ys - axis.dx, p.groove_shoulder * line.in_or_out)

    def stamp_rectangle(self, rect: Rectangle) -> None:
        """
        Stamp a panel, or occasionally partition its interior instead.

        A delegated panel hands over the region inside its 1px border rather
        than its full bounds, so every partitioner call it triggers covers a
        strictly smaller region than the one that produced the rectangle.
        """
        lox, loy, hix, hiy = rect.bounds()

        if self.region_filler is not None and self.prng.chance(
            self.profile.rectangle_delegate_chance
        ):
            if hix - lox > 2 and hiy - loy > 2:
                self.region_filler(Region(lox + 1, loy + 1, hix - 1, hiy - 1))
                return

        p = self.profile

        # Interior, inset by the 1px border
        gx, gy = np.meshgrid(np.arange(lox + 1, hix - 1), np.arange(loy + 1, hiy - 1))
        self.height_field.set_heights(gx, gy, p.rectangle_fill * rect.in_or_out)

        # Border; corners shared by two edges are stamped twice
        across = np.arange(lox, hix)
        down = np.arange(loy, hiy)
        xs = np.concatenate([across, across, np.full(down.size, lox), np.full(down.size, hix)])
        ys = np.concatenate([np.full(across.size, loy), np.full(across.size, hiy), down, down])
        self.height_field.set_heights(xs, ys, p.rectangle_border * rect.in_or_out)

    def stamp_circle(self, circle: Circle) -> None:
        """
        Fill a disk, then add ring detail when it is larger than the limit.
        """
        r = circle.radius
        if r <= 0:
            return
        offsets = np.arange(-r, r + 1)
        ox, oy = np.meshgrid(offsets, offsets)
        inside = ox * ox + oy * oy < r * r
        self.height_field.set_heights(
            circle.x + ox[inside], circle.y + oy[inside], self.profile.circle_fill * circle.in_or_out
        )

        if 2 * r > self.limit:
            self.subdivide_circle(circle.x, circle.y, r, circle.in_or_out)

    def subdivide_circle(self, x: int, y: int, radius: int, in_or_out: int) -> None:
        """
        Cover a disk with a ring of annulus sectors, then recurse inward.

        The inner radius is a random fraction of ``radius`` and the ring is
        walked in random angular steps. Recursion continues on the inner
        radius while its diameter is above the limit.
        """
        p = self.profile
        inner = int(radius * self.prng.uniform(p.inner_radius_min, p.inner_radius_max))

        angle = 0.0
        while angle < TWO_PI:
            end = min(angle + self.prng.angle_step(p.sector_steps_min, p.sector_steps_max), TWO_PI)
            self.stamp_annulus_sector(
                AnnulusSector(x, y, inner, radius, angle, end, in_or_out)
            )
            angle = end

        if 2 * inner > self.limit and inner < radius:
            self.subdivide_circle(x, y, inner, in_or_out)

    def stamp_annulus_sector(self, sector: AnnulusSector) -> None:
        """
        Outline a ring segment with four straight edges.

        The arcs are drawn as chords; y is inverted so angles run
        counter-clockwise on screen.
        """
        corners = sector_corners(sector)
        xs: List[int] = []
        ys: List[int] = []
        for (ax, ay), (bx, by) in zip(corners, corners[1:] + corners[:1]):
            for px, py in rasterize_line(ax, ay, bx, by):
                xs.append(px)
                ys.append(py)
        self.height_field.set_heights(xs, ys, self.profile.sector_edge * sector.in_or_out)

    def stamp_row(self, primitive: Primitive, axis: Axis, count: int, increment: int) -> None:
        """
        Stamp ``count`` copies of a primitive spaced ``increment`` apart.

        The primitive's position is advanced in place.
        """
        for _ in range(count):
            self.stamp(primitive)
            primitive.x += axis.dx * increment
            primitive.y += axis.dy * increment


def polar_point(x: float, y: float, radius: float, angle: float) -> Tuple[int, int]:
    """Polar to pixel coordinates with y pointing down."""
    return int(round(x + radius * math.cos(angle))), int(round(y - radius * math.sin(angle)))


def sector_corners(sector: AnnulusSector) -> List[Tuple[int, int]]:
    """Corners in drawing order: inner-start, outer-start, outer-end, inner-end."""
    return [
        polar_point(sector.x, sector.y, sector.inner_radius, sector.start_angle),
        polar_point(sector.x, sector.y, sector.outer_radius, sector.start_angle),
        polar_point(sector.x, sector.y, sector.outer_radius, sector.end_angle),
        polar_point(sector.x, sector.y, sector.inner_radius, sector.end_angle),
    ]
