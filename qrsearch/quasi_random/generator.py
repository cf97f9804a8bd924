from abc import ABC, abstractmethod
from enum import Enum

import numpy as np


class GeneratorKind(Enum):
    """Sequences that can be used to draw restart points"""
    FAURE = "faure"
    SOBOL = "sobol"
    HALTON = "halton"
    PSEUDO = "pseudo"

    def __str__(self):
        return self.value

    @classmethod
    def from_string(cls, kind: str) -> 'GeneratorKind':
        if not isinstance(kind, str):
            raise ValueError(f"No generator found for: {kind!r}")
        try:
            return cls(kind.lower())
        except ValueError:
            raise ValueError(f"No generator found for: {kind}")


class RandomGenerator(ABC):
    """
    Source of points in [0,1)^D.

    Each call advances the underlying sequence by one term. Sequences are unbounded
    and cannot be rewound; build a new generator to start over. Generators are also
    iterators, so next(generator) is the same as generator.rand_double().
    """

    def __init__(self, dimensions: int):
        if not isinstance(dimensions, (int, np.integer)) or isinstance(dimensions, bool):
            raise ValueError(f"Dimensions must be an integer, got {dimensions!r}")
        if dimensions <= 0:
            raise ValueError(f"Dimensions must be positive, got {dimensions}")
        self._dimensions = int(dimensions)

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @abstractmethod
    def rand_double(self) -> np.ndarray:
        """Return the next term of the sequence as an array of D floats in [0,1)"""

    def rand_int(self, min_bound: int, max_bound: int) -> np.ndarray:
        """Return the next term mapped coordinate-wise to min_bound + floor(v * (max_bound - min_bound))"""
        if max_bound < min_bound:
            raise ValueError(f"Upper bound {max_bound} is below lower bound {min_bound}")
        sample = self.rand_double()
        return min_bound + np.floor(sample * (max_bound - min_bound)).astype(np.int64)

    def single_double(self) -> float:
        """Return the first coordinate of the next term; the other coordinates are discarded"""
        return float(self.rand_double()[0])

    def __iter__(self):
        return self

    def __next__(self) -> np.ndarray:
        return self.rand_double()
