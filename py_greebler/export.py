"""
Image export for generated greeble textures.

Converts a height field and normal map into RGBA8 pixel buffers (row-major,
alpha always 255) and writes them as PNG files with Pillow.
"""

from pathlib import Path
from typing import Tuple, Union

import numpy as np
import structlog
from PIL import Image

from .core.heightfield import HeightField
from .core.normal_map import NormalMap

logger = structlog.get_logger()

PathLike = Union[str, Path]


def _rgba(channels: np.ndarray) -> np.ndarray:
    """Stack (dim, dim, 3) uint8 channels with an opaque alpha channel."""
    dim = channels.shape[0]
    rgba = np.full((dim, dim, 4), 255, dtype=np.uint8)
    rgba[..., :3] = channels
    return rgba


def height_field_rgba(
    height_field: HeightField, min_height: float = 0, max_height: float = 255
) -> np.ndarray:
    """Grey RGBA image of the tone-mapped height field."""
    grey = height_field.tone_map(min_height, max_height)
    return _rgba(np.repeat(grey[..., np.newaxis], 3, axis=2))


def normal_map_rgba(normal_map: NormalMap) -> np.ndarray:
    """RGBA image with the normal components in red, green and blue."""
    return _rgba(normal_map.encode())


def to_bytes(rgba: np.ndarray) -> bytes:
    """Flatten an RGBA image into a ``4 * dim * dim`` byte buffer."""
    return np.ascontiguousarray(rgba, dtype=np.uint8).tobytes()


def write_png(path: PathLike, rgba: np.ndarray) -> Path:
    """
    Write an RGBA array to ``path`` as PNG.

    Raises:
        OSError: if the file cannot be written
    """
    path = Path(path)
    try:
        Image.fromarray(rgba).save(path, format="PNG")
    except OSError as e:
        logger.error("Failed to write image", path=str(path), error=str(e))
        raise
    logger.info("Wrote image", path=str(path), width=rgba.shape[1], height=rgba.shape[0])
    return path


def export_images(
    height_field: HeightField,
    normal_map: NormalMap,
    heightmap_path: PathLike,
    normalmap_path: PathLike,
    min_height: float = 0,
    max_height: float = 255,
) -> Tuple[Path, Path]:
    """
    Write the height map and normal map images.

    Args:
        height_field: Finished height field
        normal_map: Normal map derived from it
        heightmap_path: Destination of the grey height image
        normalmap_path: Destination of the normal image
        min_height: Height mapped to black
        max_height: Height mapped to white

    Returns:
        Tuple of the written paths
    """
    return (
        write_png(heightmap_path, height_field_rgba(height_field, min_height, max_height)),
        write_png(normalmap_path, normal_map_rgba(normal_map)),
    )
