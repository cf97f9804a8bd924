from typing import Optional

import numpy as np

from qrsearch.quasi_random.generator import RandomGenerator


class PseudoRandomGenerator(RandomGenerator):
    """Independent uniform draws from numpy's default generator, used as a baseline against the quasi-random sequences"""

    def __init__(self, dimensions: int, seed: Optional[int] = None):
        super().__init__(dimensions)
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def rand_double(self) -> np.ndarray:
        return self._rng.random(self.dimensions)
