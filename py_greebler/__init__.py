"""
Procedural greeble texture generator.

Carves a square height field into grooved, panelled detail and derives a
normal map from it.
"""

from .core import (
    AleaPRNG,
    GreebleConfig,
    GreebleGenerator,
    HeightField,
    InvalidParameterError,
    NormalMap,
    generate,
    tone_map,
)

__version__ = "0.1.0"

__all__ = ['AleaPRNG', 'GreebleConfig', 'GreebleGenerator', 'HeightField',
           'InvalidParameterError', 'NormalMap', 'generate', 'tone_map']
