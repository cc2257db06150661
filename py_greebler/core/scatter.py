"""
Random scatter passes.

Free-standing grooves, panels, disks and rows of mixed primitives dropped
anywhere on the field. These run after partitioning to break up the regular
panel layout.
"""

import structlog

from ..config.greeble_settings import ScatterOptions
from .primitives import Axis, Circle, Line, Rectangle
from .stamper import PrimitiveStamper

logger = structlog.get_logger()

ROW_KINDS = ("line", "rectangle", "circle")


class Scatterer:
    """Drops randomly placed primitives through a stamper."""

    def __init__(self, stamper: PrimitiveStamper):
        self.stamper = stamper
        self.prng = stamper.prng
        self.dim = stamper.height_field.dim

    def run(self, options: ScatterOptions) -> None:
        """Run every scatter pass with a non-zero count."""
        if options.total == 0:
            return
        logger.info(
            "Scattering primitives",
            grooves=options.grooves,
            rectangles=options.rectangles,
            circles=options.circles,
            rows=options.rows,
        )
        self.add_random_grooves(options.grooves)
        self.add_random_rectangles(options.rectangles)
        self.add_random_circles(options.circles)
        self.add_random_rows(options.rows)

    def _random_axis(self) -> Axis:
        return Axis.from_index(self.prng.randint(2))

    def add_random_grooves(self, count: int) -> None:
        for _ in range(count):
            in_or_out = self.prng.polarity()
            axis = self._random_axis()
            x = self.prng.randint(self.dim)
            y = self.prng.randint(self.dim)
            length = self.prng.randint(self.dim // 2)
            self.stamper.stamp(Line(x, y, length, axis, in_or_out))

    def add_random_rectangles(self, count: int) -> None:
        for _ in range(count):
            in_or_out = self.prng.polarity()
            x = self.prng.randint(self.dim)
            y = self.prng.randint(self.dim)
            width = self.prng.randint(50) + 20
            height = self.prng.randint(50) + 20
            self.stamper.stamp(Rectangle(x, y, width, height, in_or_out))

    def add_random_circles(self, count: int) -> None:
        for _ in range(count):
            in_or_out = self.prng.polarity()
            x = self.prng.randint(self.dim)
            y = self.prng.randint(self.dim)
            radius = self.prng.randint(50) + 20
            self.stamper.stamp(Circle(x, y, radius, in_or_out))

    def add_random_rows(self, count: int) -> None:
        for _ in range(count):
            self.add_random_row()

    def add_random_row(self) -> None:
        """
        Stamp 3..9 copies of one random primitive along a random axis.

        Lines in a row run across the row direction, five pixels apart.
        """
        count = self.prng.randint(7) + 3
        axis = self._random_axis()
        kind = self.prng.choice(ROW_KINDS)
        x = self.prng.randint(self.dim)
        y = self.prng.randint(self.dim)
        in_or_out = self.prng.polarity()

        if kind == "circle":
            radius = self.prng.randint(35) + 5
            primitive = Circle(x, y, radius, in_or_out)
            increment = int(radius * 2.3)
        elif kind == "rectangle":
            width = self.prng.randint(35) + 5
            height = self.prng.randint(35) + 5
            primitive = Rectangle(x, y, width, height, in_or_out)
            increment = int(1.2 * max(width, height))
        else:
            length = self.prng.randint(self.dim // 2)
            primitive = Line(x, y, length, axis.perpendicular, in_or_out)
            increment = 5

        self.stamper.stamp_row(primitive, axis, count, increment)
