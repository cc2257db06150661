"""
Core greeble generation functionality.
"""

from .alea_prng import AleaPRNG
from .heightfield import HeightField, tone_map
from .normal_map import NormalMap, compute_normals
from .primitives import Axis, Line, Rectangle, Circle, AnnulusSector, Region
from .raster import rasterize_line
from .stamper import PrimitiveStamper
from .partitioner import RegionPartitioner, PartitionStats
from .scatter import Scatterer
from .greeble_generator import (
    GreebleConfig, GreebleGenerator, InvalidParameterError, generate, validate_parameters
)

__all__ = ['AleaPRNG', 'HeightField', 'tone_map', 'NormalMap', 'compute_normals',
           'Axis', 'Line', 'Rectangle', 'Circle', 'AnnulusSector', 'Region',
           'rasterize_line', 'PrimitiveStamper', 'RegionPartitioner', 'PartitionStats',
           'Scatterer', 'GreebleConfig', 'GreebleGenerator', 'InvalidParameterError',
           'generate', 'validate_parameters']
