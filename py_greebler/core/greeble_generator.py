"""
Greeble texture generation pipeline.

Partitions the whole field into grooved panels, optionally scatters random
primitives on top, then derives the normal map from the finished heights.
Each run owns its own height field, normal map and PRNG, so independent runs
never share state.
"""

import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

import structlog

from ..config.greeble_settings import PartitionProfile, ScatterOptions, StampProfile
from .alea_prng import AleaPRNG
from .heightfield import HeightField
from .normal_map import NormalMap
from .partitioner import PartitionStats, RegionPartitioner
from .primitives import Region
from .scatter import Scatterer
from .stamper import PrimitiveStamper

logger = structlog.get_logger()

MAX_SEED = 2**64


class InvalidParameterError(ValueError):
    """Raised when generation parameters are rejected before any work starts."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_parameters(dim, limit, seed) -> None:
    """
    Check the public generation parameters.

    Raises:
        InvalidParameterError: if dim or limit is not a positive integer,
            limit is not smaller than dim, or seed is not a uint64
    """
    if not _is_int(dim) or dim <= 0:
        raise InvalidParameterError(f"dim must be a positive integer, got {dim!r}")
    if not _is_int(limit) or limit <= 0:
        raise InvalidParameterError(f"limit must be a positive integer, got {limit!r}")
    if limit >= dim:
        raise InvalidParameterError(f"limit ({limit}) must be smaller than dim ({dim})")
    if not _is_int(seed) or not 0 <= seed < MAX_SEED:
        raise InvalidParameterError(f"seed must be an unsigned 64-bit integer, got {seed!r}")


@dataclass
class GreebleConfig:
    """Configuration for one generation run."""

    dim: int = 1024
    limit: int = 16
    seed: int = 0
    scatter: ScatterOptions = field(default_factory=ScatterOptions)
    stamp_profile: StampProfile = field(default_factory=StampProfile)
    partition_profile: PartitionProfile = field(default_factory=PartitionProfile)


class GreebleGenerator:
    """
    Builds one height field and its normal map.

    Example:
        generator = GreebleGenerator(GreebleConfig(dim=512, limit=8, seed=7))
        height_field, normal_map = generator.generate()
    """

    def __init__(self, config: GreebleConfig):
        """
        Initialize the generator.

        Args:
            config: Generation configuration

        Raises:
            InvalidParameterError: if the configuration is rejected
        """
        validate_parameters(config.dim, config.limit, config.seed)
        self.config = config
        self.prng = AleaPRNG(config.seed)
        self.height_field = HeightField(config.dim)
        self.stamper = PrimitiveStamper(
            self.height_field, self.prng, config.limit, config.stamp_profile
        )
        self.partitioner = RegionPartitioner(
            self.stamper, config.limit, config.partition_profile
        )
        self.scatterer = Scatterer(self.stamper)
        self.normal_map: Optional[NormalMap] = None

    @property
    def stats(self) -> PartitionStats:
        return self.partitioner.stats

    def generate(self) -> Tuple[HeightField, NormalMap]:
        """
        Run the full pipeline once.

        Returns:
            Tuple of (height_field, normal_map)
        """
        if self.normal_map is not None:
            raise RuntimeError("GreebleGenerator instances are single-use")

        cfg = self.config
        logger.info("Starting greeble generation", dim=cfg.dim, limit=cfg.limit, seed=cfg.seed)
        started = time.time()

        self.partitioner.partition(Region(0, 0, cfg.dim, cfg.dim))
        self.scatterer.run(cfg.scatter)
        self.normal_map = NormalMap.synthesize(self.height_field)

        s = self.stats
        logger.info(
            "Greeble generation complete",
            seconds=round(time.time() - started, 3),
            regions=s.calls,
            splits=s.splits,
            leaves=s.leaves,
            max_depth=s.max_depth,
            prng_calls=self.prng.call_count,
        )
        return self.height_field, self.normal_map


def generate(
    dim: int,
    limit: int,
    seed: int,
    scatter: Optional[ScatterOptions] = None,
) -> Tuple[HeightField, NormalMap]:
    """
    Generate a greeble height field and its normal map.

    Args:
        dim: Width and height of the texture
        limit: Smallest region extent and circle diameter that is subdivided
        seed: Unsigned 64-bit PRNG seed
        scatter: Optional random scatter counts

    Returns:
        Tuple of (height_field, normal_map)

    Raises:
        InvalidParameterError: if the parameters are rejected
    """
    validate_parameters(dim, limit, seed)
    config = GreebleConfig(dim=dim, limit=limit, seed=seed, scatter=scatter or ScatterOptions())
    return GreebleGenerator(config).generate()
