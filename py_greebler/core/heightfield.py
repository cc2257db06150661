"""
Height field storage for greeble generation.

The field is a square grid of 8-bit samples that starts at mid-height (128).
All stamping goes through clamped additive mutation; samples are never
overwritten directly.
"""

import numpy as np
from typing import Iterable, Union

MID_HEIGHT = 128
MIN_HEIGHT = 0
MAX_HEIGHT = 255


class HeightField:
    """
    Square grid of 8-bit height samples indexed as ``samples[y, x]``.

    Row-major with y growing downward, matching image layout.
    """

    def __init__(self, dim: int):
        """
        Allocate a flat field.

        Args:
            dim: Width and height of the square grid in pixels
        """
        if dim <= 0:
            raise ValueError(f"Height field dimension must be positive, got {dim}")
        self.dim = dim
        self.samples = np.full((dim, dim), MID_HEIGHT, dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the field."""
        return 0 <= x < self.dim and 0 <= y < self.dim

    def get_height(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self.dim}x{self.dim} height field")
        return int(self.samples[y, x])

    def set_height(self, x: int, y: int, delta: int) -> None:
        """
        Add ``delta`` to the sample at (x, y), clamped to [0, 255].

        Coordinates outside the field are ignored.
        """
        if not self.in_bounds(x, y):
            return
        new_height = int(self.samples[y, x]) + delta
        self.samples[y, x] = min(MAX_HEIGHT, max(MIN_HEIGHT, new_height))

    def set_heights(
        self,
        xs: Union[np.ndarray, Iterable[int]],
        ys: Union[np.ndarray, Iterable[int]],
        delta: int,
    ) -> None:
        """
        Apply ``set_height(x, y, delta)`` for every coordinate pair at once.

        Repeated coordinates accumulate. Since every addition in one call has
        the same sign, clamping the accumulated sum gives the same result as
        clamping after each individual addition.
        """
        xs = np.asarray(xs, dtype=np.int64).ravel()
        ys = np.asarray(ys, dtype=np.int64).ravel()
        if xs.shape != ys.shape:
            raise ValueError("x and y coordinate arrays must have the same length")
        if xs.size == 0 or delta == 0:
            return

        inside = (xs >= 0) & (xs < self.dim) & (ys >= 0) & (ys < self.dim)
        xs = xs[inside]
        ys = ys[inside]
        if xs.size == 0:
            return

        cells, hits = np.unique(ys * self.dim + xs, return_counts=True)
        flat = self.samples.reshape(-1)
        updated = flat[cells].astype(np.int64) + hits * delta
        flat[cells] = np.clip(updated, MIN_HEIGHT, MAX_HEIGHT)

    def view(self) -> np.ndarray:
        """Read-only view of the samples."""
        v = self.samples.view()
        v.setflags(write=False)
        return v

    def is_flat(self) -> bool:
        return bool(np.all(self.samples == MID_HEIGHT))

    def tone_map(self, min_height: float = 0, max_height: float = 255) -> np.ndarray:
        """Tone-map every sample into an 8-bit intensity."""
        return tone_map(self.samples, min_height, max_height)


def tone_map(
    sample: Union[int, float, np.ndarray], min_height: float, max_height: float
) -> Union[int, np.ndarray]:
    """
    Linearly rescale heights from [min_height, max_height] to [0, 255].

    Works on a single sample or on an array. Results are clamped to the byte
    range.

    Args:
        sample: Height sample(s)
        min_height: Height mapped to 0
        max_height: Height mapped to 255

    Returns:
        uint8 array for array input, int for scalar input
    """
    if max_height <= min_height:
        raise ValueError(
            f"Tone map range is empty: min={min_height}, max={max_height}"
        )
    r = (np.asarray(sample, dtype=np.float32) - min_height) / (max_height - min_height)
    out = np.clip(r * 255.0, 0, 255).astype(np.uint8)
    if out.ndim == 0:
        return int(out)
    return out
