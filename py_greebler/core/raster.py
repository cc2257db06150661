"""
Integer line rasterization.
"""

from typing import Iterator, Tuple


def rasterize_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """
    Yield the pixels on the segment from (x0, y0) to (x1, y1), endpoints included.

    Bresenham's algorithm with a single error term, so it works in every
    octant. Equal endpoints yield exactly one point.
    """
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
