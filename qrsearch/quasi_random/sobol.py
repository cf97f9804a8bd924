import numpy as np
from scipy.stats import qmc

from qrsearch.quasi_random.generator import RandomGenerator


class SobolGenerator(RandomGenerator):
    """
    Sobol sequence with the Joe-Kuo direction numbers, unscrambled so the terms depend
    on the dimension alone. The all-zero first point is skipped.
    """

    def __init__(self, dimensions: int):
        super().__init__(dimensions)
        self._engine = qmc.Sobol(d=self.dimensions, scramble=False)
        self._engine.fast_forward(1)

    def rand_double(self) -> np.ndarray:
        return self._engine.random(1)[0]
