"""
Seedable Alea PRNG used for every random decision in greeble generation.

Based on Johannes Baagøe's Alea algorithm. A single instance is created per
generation run and threaded through the stamper, partitioner and scatter
passes, so identical seeds give byte-identical textures.
"""

import math


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Alea PRNG with the integer helpers the greebler needs.

    ``random()`` is the only source of entropy; all other helpers are
    derived from it so the call sequence stays reproducible.
    """

    def __init__(self, seed):
        """Initialize with seed string or number."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint(self, n: int) -> int:
        """Return an integer in [0, n). Returns 0 when n <= 0."""
        if n <= 0:
            return 0
        return int(self.random() * n)

    def uniform(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return low + (high - low) * self.random()

    def chance(self, n: int) -> bool:
        """True with probability 1-in-n."""
        return self.randint(n) == 0

    def polarity(self) -> int:
        """Return -1 (sink) or +1 (raise) with equal odds."""
        return 2 * self.randint(2) - 1

    def angle_step(self, min_steps: int, max_steps: int) -> float:
        """Angular increment such that min..max steps would cover a full turn."""
        return 2.0 * math.pi / self.uniform(min_steps, max_steps)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]
