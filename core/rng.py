"""Random byte source for polynomial generation.

Use set_seed(n) at test start for reproducibility.
Default (no seed) uses os.urandom for cryptographic randomness.
"""

import os
import random as _random


class DeterministicRNG:
    """Seeded PRNG wrapper. When seed is None, uses os.urandom."""

    def __init__(self, seed=None):
        self._seed = seed
        if seed is not None:
            self._rng = _random.Random(seed)
        else:
            self._rng = None  # Use os-level randomness

    @property
    def seeded(self) -> bool:
        return self._rng is not None

    def randbytes(self, n: int) -> bytes:
        if self._rng is not None:
            return self._rng.randbytes(n)
        return os.urandom(n)

    def randbelow(self, n: int) -> int:
        if self._rng is not None:
            return self._rng.randrange(n)
        return int.from_bytes(os.urandom(16), 'big') % n


# Global instance
_global_rng = DeterministicRNG(seed=None)


def set_seed(seed: int | None):
    """Set global seed for reproducibility. None = cryptographic randomness."""
    global _global_rng
    _global_rng = DeterministicRNG(seed=seed)


def get_source() -> DeterministicRNG:
    """Return the current process-wide source."""
    return _global_rng


def randbytes(n: int) -> bytes:
    return _global_rng.randbytes(n)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)
