"""
Configuration modules for greeble generation.
"""

from .config import Settings, load_settings
from .greeble_settings import (
    DEFAULT_PARTITION_PROFILE,
    DEFAULT_STAMP_PROFILE,
    PartitionProfile,
    ScatterOptions,
    StampProfile,
)

__all__ = ['Settings', 'load_settings', 'StampProfile', 'PartitionProfile', 'ScatterOptions',
           'DEFAULT_STAMP_PROFILE', 'DEFAULT_PARTITION_PROFILE']
