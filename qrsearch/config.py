"""Centralized search parameters.

Evaluation budget defaults to population_factor * N * N fitness evaluations for an
instance with N elements, the sizing used in the clustering experiments.
"""
from dataclasses import dataclass
from typing import Optional

from qrsearch.quasi_random.generator import GeneratorKind

DEFAULT_PROGRESS_INTERVAL = 10000  # evaluations between two progress records
INCLUSION_THRESHOLD = 0.5  # sample coordinates >= this value include the element
DEFAULT_POPULATION_FACTOR = 2000
DEFAULT_CYCLES = 1


@dataclass
class SearchConfig:
    generator_kind: GeneratorKind = GeneratorKind.FAURE
    max_evaluations: Optional[int] = None  # overrides the population factor when set
    population_factor: int = DEFAULT_POPULATION_FACTOR
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    cycles: int = DEFAULT_CYCLES
    seed: Optional[int] = None  # only used by the pseudo-random generator

    def __post_init__(self):
        if self.max_evaluations is not None and self.max_evaluations <= 0:
            raise ValueError(f"max_evaluations must be positive, got {self.max_evaluations}")
        if self.population_factor <= 0:
            raise ValueError(f"population_factor must be positive, got {self.population_factor}")
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")
        if self.cycles <= 0:
            raise ValueError(f"cycles must be positive, got {self.cycles}")

    def evaluations_for(self, element_count: int) -> int:
        if self.max_evaluations is not None:
            return self.max_evaluations
        return self.population_factor * element_count * element_count


__all__ = ['SearchConfig', 'DEFAULT_PROGRESS_INTERVAL', 'INCLUSION_THRESHOLD',
           'DEFAULT_POPULATION_FACTOR', 'DEFAULT_CYCLES']
