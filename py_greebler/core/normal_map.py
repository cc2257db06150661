"""
Normal map synthesis from a finished height field.

Slopes come from a 3x3 Sobel operator with edge pixels replicated. The
encoding is stylized: x and y hold the scaled slope around 0.5 (flat), z is
fixed at 1.0 and the vector is not renormalized. Shaders consuming these
textures expect exactly this scale.
"""

import numpy as np
import structlog

from .heightfield import HeightField

logger = structlog.get_logger()

FLAT = 0.5
SLOPE_SCALE = 127.0


class NormalMap:
    """
    Per-pixel pseudo-normals indexed as ``vectors[y, x] = (nx, ny, nz)``.

    Created once from a height field and not mutated afterwards.
    """

    def __init__(self, vectors: np.ndarray):
        if vectors.ndim != 3 or vectors.shape[0] != vectors.shape[1] or vectors.shape[2] != 3:
            raise ValueError(f"Normal map must have shape (dim, dim, 3), got {vectors.shape}")
        self.vectors = vectors
        self.vectors.setflags(write=False)

    @property
    def dim(self) -> int:
        return self.vectors.shape[0]

    @classmethod
    def synthesize(cls, height_field: HeightField) -> "NormalMap":
        """Build the normal map for ``height_field``."""
        return cls(compute_normals(height_field.samples))

    def view(self) -> np.ndarray:
        return self.vectors

    def encode(self) -> np.ndarray:
        """Scale every component by 255 into a byte."""
        return (np.clip(self.vectors, 0.0, 1.0) * 255.0).astype(np.uint8)


def compute_normals(heights: np.ndarray) -> np.ndarray:
    """
    Apply the Sobel operator to a square height grid.

    Args:
        heights: (dim, dim) array of samples, indexed [y, x]

    Returns:
        (dim, dim, 3) float32 array of (nx, ny, 1.0)
    """
    dim = heights.shape[0]
    p = np.pad(heights.astype(np.int32), 1, mode="edge")

    # Left minus right, one row at a time (above, center, below)
    rows = [p[k:k + dim, 0:dim] - p[k:k + dim, 2:dim + 2] for k in range(3)]
    dzdx = rows[0] + 2 * rows[1] + rows[2]

    # Below minus above, one column at a time (left, center, right)
    cols = [p[2:dim + 2, k:k + dim] - p[0:dim, k:k + dim] for k in range(3)]
    dzdy = -(cols[0] + 2 * cols[1] + cols[2])

    normals = np.empty((dim, dim, 3), dtype=np.float32)
    normals[..., 0] = np.clip((dzdx / 4.0) / SLOPE_SCALE + FLAT, 0.0, 1.0)
    normals[..., 1] = np.clip((dzdy / 4.0) / SLOPE_SCALE + FLAT, 0.0, 1.0)
    normals[..., 2] = 1.0

    sloped = int(np.count_nonzero((dzdx != 0) | (dzdy != 0)))
    logger.debug("Computed normal map", dim=dim, sloped_pixels=sloped)
    return normals
