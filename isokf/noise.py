"""Shared pseudo-random sources: Gaussian noise and subset sampling."""

from __future__ import annotations

import random
import threading
from typing import Sequence, TypeVar

T = TypeVar("T")

# Default seed of the Mersenne Twister engine when none is given.
_DEFAULT_SEED = 5489


class GaussianNoiseGen:
    """Draws samples from a normal distribution with a given mean and deviation."""

    _instance: "GaussianNoiseGen | None" = None
    _instance_lock = threading.Lock()

    def __init__(self, mean: float = 0.0, std_dev: float = 1.0):
        self.mean = float(mean)
        self.std_dev = float(std_dev)
        self._rng = random.Random(_DEFAULT_SEED)
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "GaussianNoiseGen":
        """Return the process-wide generator (standard normal)."""
        with cls._instance_lock:
            if GaussianNoiseGen._instance is None:
                GaussianNoiseGen._instance = GaussianNoiseGen()
            return GaussianNoiseGen._instance

    def seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        with self._lock:
            self._rng.seed(int(seed))

    def randn(self, n: int | None = None):
        """Return one sample, or a list of ``n`` samples when ``n`` is given."""
        with self._lock:
            if n is None:
                return self._rng.normalvariate(self.mean, self.std_dev)
            if n < 0:
                raise ValueError("number of samples must not be negative")
            return [self._rng.normalvariate(self.mean, self.std_dev) for _ in range(n)]

    def __call__(self) -> float:
        return self.randn()


class RandomSampler:
    """Draws random subsets of sequences, keeping the original order."""

    _instance: "RandomSampler | None" = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._rng = random.Random(_DEFAULT_SEED)
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "RandomSampler":
        """Return the process-wide sampler."""
        with cls._instance_lock:
            if RandomSampler._instance is None:
                RandomSampler._instance = RandomSampler()
            return RandomSampler._instance

    def sample(self, items: Sequence[T], n: int) -> list[T]:
        """Pick ``min(n, len(items))`` distinct elements in their original order."""
        if n < 0:
            raise ValueError("number of samples must not be negative")
        pool = list(items)
        k = min(n, len(pool))
        with self._lock:
            chosen = sorted(self._rng.sample(range(len(pool)), k))
        return [pool[i] for i in chosen]