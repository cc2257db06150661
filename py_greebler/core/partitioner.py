"""
Recursive region partitioning.

A region is either split in two by a raised groove across its longer axis,
or treated as a leaf and filled with a row of rectangles or circles.
Splits are jittered and mid-sized regions sometimes stop early, so panel
sizes come out irregular instead of forming a balanced quad-tree.
"""

from dataclasses import dataclass
from typing import Optional

from ..config.greeble_settings import DEFAULT_PARTITION_PROFILE, PartitionProfile
from .primitives import Axis, Circle, Line, Rectangle, Region
from .stamper import PrimitiveStamper


@dataclass
class PartitionStats:
    """Counters collected while partitioning."""

    calls: int = 0
    splits: int = 0
    leaves: int = 0
    rectangle_rows: int = 0
    circle_rows: int = 0
    leftover_strips: int = 0
    max_depth: int = 0


class RegionPartitioner:
    """
    Carves regions into grooved panels.

    The partitioner registers itself as the stamper's region filler, so a
    stamped rectangle may call back into ``partition``.
    """

    def __init__(
        self,
        stamper: PrimitiveStamper,
        limit: int,
        profile: Optional[PartitionProfile] = None,
    ):
        """
        Initialize the partitioner.

        Args:
            stamper: Stamper used for grooves and leaf rows
            limit: Extent below which a region is always a leaf
            profile: Split and leaf-fill weights
        """
        if limit <= 0:
            raise ValueError(f"Partition limit must be positive, got {limit}")
        self.stamper = stamper
        self.prng = stamper.prng
        self.limit = limit
        self.profile = profile or DEFAULT_PARTITION_PROFILE
        self.stats = PartitionStats()
        self._depth = 0

        stamper.region_filler = self.partition

    def partition(self, region: Region) -> None:
        """Split ``region`` recursively, or fill it if it is a leaf."""
        region = region.normalized()
        self.stats.calls += 1
        self._depth += 1
        self.stats.max_depth = max(self.stats.max_depth, self._depth)
        try:
            axis = region.longer_axis
            extent = region.extent(axis)
            if self._is_leaf(extent):
                self.stats.leaves += 1
                self.populate_leaf(region)
            else:
                self._split(region, axis, extent)
        finally:
            self._depth -= 1

    def _is_leaf(self, extent: int) -> bool:
        # A region needs at least two pixels along its longer axis to be cut
        if extent < self.limit or extent < 2:
            return True
        p = self.profile
        return extent < p.early_leaf_factor * self.limit and self.prng.chance(p.early_leaf_chance)

    def _split(self, region: Region, axis: Axis, extent: int) -> None:
        """Cut near the middle of the longer axis and recurse on both halves."""
        if axis is Axis.HORIZONTAL:
            lo, hi = region.x1, region.x2
        else:
            lo, hi = region.y1, region.y2

        jitter = int(extent * self.profile.split_jitter)
        at = (lo + hi) // 2 + self.prng.randint(2 * jitter + 1) - jitter
        at = min(max(at, lo + 1), hi - 1)

        groove_axis = axis.perpendicular
        cx, cy = region.center
        if axis is Axis.HORIZONTAL:
            groove = Line(at, cy, region.extent(groove_axis), groove_axis, 1)
        else:
            groove = Line(cx, at, region.extent(groove_axis), groove_axis, 1)

        self.stats.splits += 1
        self.stamper.stamp(groove)

        first, second = region.split(axis, at)
        self.partition(first)
        self.partition(second)

    def populate_leaf(self, region: Region) -> None:
        """Fill a leaf with a rectangle row (usually) or a circle row."""
        option = self.prng.randint(self.profile.leaf_options)
        if option < self.profile.rectangle_options:
            self.fill_with_rectangles(region)
        else:
            self.fill_with_circles(region)

    def fill_with_rectangles(self, region: Region) -> None:
        """
        Lay 0..max_rectangles panels side by side across the region.

        A count of zero leaves the region untouched.
        """
        count = self.prng.randint(self.profile.max_rectangles + 1)
        if count == 0:
            return
        axis = Axis.from_index(self.prng.randint(2))
        step = region.extent(axis) // count
        if step <= 0:
            return
        across = region.extent(axis.perpendicular)
        in_or_out = self.prng.polarity()

        cx, cy = region.center
        if axis is Axis.HORIZONTAL:
            rect = Rectangle(region.x1 + step // 2, cy, step, across, in_or_out)
        else:
            rect = Rectangle(cx, region.y1 + step // 2, across, step, in_or_out)

        self.stats.rectangle_rows += 1
        self.stamper.stamp_row(rect, axis, count, step)

    def fill_with_circles(self, region: Region) -> None:
        """
        Lay equal circles along the longer axis.

        A leftover strip longer than the limit is partitioned again.
        """
        if region.dx < self.limit or region.dy < self.limit:
            return
        axis = region.longer_axis
        span = region.extent(axis)
        slot = region.extent(axis.perpendicular)
        radius = int(slot * self.profile.circle_radius_ratio)
        if radius < 1:
            return
        count = span // slot
        in_or_out = self.prng.polarity()

        cx, cy = region.center
        if axis is Axis.HORIZONTAL:
            circle = Circle(region.x1 + slot // 2, cy, radius, in_or_out)
        else:
            circle = Circle(cx, region.y1 + slot // 2, radius, in_or_out)

        self.stats.circle_rows += 1
        self.stamper.stamp_row(circle, axis, count, slot)

        remainder = span - count * slot
        if remainder > self.limit:
            used = count * slot
            if axis is Axis.HORIZONTAL:
                leftover = Region(region.x1 + used, region.y1, region.x2, region.y2)
            else:
                leftover = Region(region.x1, region.y1 + used, region.x2, region.y2)
            self.stats.leftover_strips += 1
            self.partition(leftover)
