from typing import Dict, List

import numpy as np

from qrsearch.quasi_random.generator import RandomGenerator
from qrsearch.quasi_random.primes import next_prime


class FaureGenerator(RandomGenerator):
    """
    Faure low-discrepancy sequence.

    The base b is the smallest prime >= D. For term n with base-b digits a_0, a_1, ...
    (least significant first), coordinate 0 is the radical inverse of n and coordinate
    j is the radical inverse of the digits transformed by C^j mod b, where C is the
    upper triangular Pascal matrix C[k][i] = binom(i, k). The sequence starts at
    n = b^4 - 1, as in Fox's implementation, to skip the poorly spread first terms.
    """

    def __init__(self, dimensions: int):
        super().__init__(dimensions)
        self.base = next_prime(max(self.dimensions, 2))
        self.index = self.base ** 4 - 1
        # digit count -> stacked C^j mod b for j in 0..D-1, shape (D, m, m)
        self._power_matrices: Dict[int, np.ndarray] = {}

    def _digits(self, n: int) -> List[int]:
        digits = []
        while n > 0:
            n, digit = divmod(n, self.base)
            digits.append(digit)
        return digits or [0]

    def _powers_for(self, digit_count: int) -> np.ndarray:
        powers = self._power_matrices.get(digit_count)
        if powers is not None:
            return powers

        pascal = np.zeros((digit_count, digit_count), dtype=np.int64)
        for i in range(digit_count):
            pascal[0][i] = 1
            for k in range(1, i + 1):
                pascal[k][i] = (pascal[k - 1][i - 1] + pascal[k][i - 1]) % self.base

        powers = np.empty((self.dimensions, digit_count, digit_count), dtype=np.int64)
        powers[0] = np.eye(digit_count, dtype=np.int64)
        for j in range(1, self.dimensions):
            powers[j] = (pascal @ powers[j - 1]) % self.base

        self._power_matrices[digit_count] = powers
        return powers

    def rand_double(self) -> np.ndarray:
        digits = np.array(self._digits(self.index), dtype=np.int64)
        self.index += 1

        transformed = (self._powers_for(len(digits)) @ digits) % self.base
        weights = float(self.base) ** -np.arange(1, len(digits) + 1)
        return transformed @ weights
