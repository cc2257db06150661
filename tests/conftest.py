"""Shared fixtures and helpers for greebler tests."""

import math

import pytest
from py_greebler.core.heightfield import HeightField
from py_greebler.core.alea_prng import AleaPRNG
from py_greebler.core.stamper import PrimitiveStamper
from py_greebler.core.partitioner import RegionPartitioner


class ScriptedPRNG:
    """Deterministic stand-in that replays scripted integer draws."""

    def __init__(self, ints=None, chance=False, polarity=1):
        self.ints = list(ints or [])
        self._chance = chance
        self._polarity = polarity
        self.call_count = 0

    def random(self):
        self.call_count += 1
        return 0.0

    def randint(self, n):
        self.call_count += 1
        value = self.ints.pop(0) if self.ints else 0
        assert 0 <= value < max(n, 1)
        return value

    def uniform(self, low, high):
        self.call_count += 1
        return low

    def chance(self, n):
        self.call_count += 1
        return self._chance

    def polarity(self):
        self.call_count += 1
        return self._polarity

    def angle_step(self, min_steps, max_steps):
        self.call_count += 1
        return 2 * math.pi / max_steps

    def choice(self, seq):
        return seq[self.randint(len(seq))]


@pytest.fixture
def make_partitioner():
    """Build a field, stamper and partitioner sharing one PRNG."""

    def _make(dim=64, limit=8, prng=None, stamp_profile=None, partition_profile=None):
        field = HeightField(dim)
        stamper = PrimitiveStamper(field, prng or AleaPRNG(1234), limit, stamp_profile)
        partitioner = RegionPartitioner(stamper, limit, partition_profile)
        return field, stamper, partitioner

    return _make
