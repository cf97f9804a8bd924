import numpy as np

from qrsearch.quasi_random.generator import RandomGenerator
from qrsearch.quasi_random.primes import first_primes


def radical_inverse(index: int, base: int) -> float:
    """Van der Corput radical inverse of index in the given base"""
    result = 0.0
    scale = 1.0 / base
    while index > 0:
        index, digit = divmod(index, base)
        result += digit * scale
        scale /= base
    return result


class HaltonGenerator(RandomGenerator):
    """Halton sequence: coordinate j is the radical inverse of the term index in the j-th prime base"""

    def __init__(self, dimensions: int):
        super().__init__(dimensions)
        self.bases = first_primes(self.dimensions)
        self.index = 1  # index 0 would be the all-zero point

    def rand_double(self) -> np.ndarray:
        point = np.array([radical_inverse(self.index, base) for base in self.bases])
        self.index += 1
        return point
