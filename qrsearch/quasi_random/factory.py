from typing import Optional, Union

from qrsearch.quasi_random.generator import GeneratorKind, RandomGenerator
from qrsearch.quasi_random.faure import FaureGenerator
from qrsearch.quasi_random.sobol import SobolGenerator
from qrsearch.quasi_random.halton import HaltonGenerator
from qrsearch.quasi_random.pseudo_random import PseudoRandomGenerator


def create_generator(kind: Union[GeneratorKind, str], dimensions: int, seed: Optional[int] = None) -> RandomGenerator:
    """
    Build a fresh generator of the given kind.

    The seed is only used by the pseudo-random baseline; the quasi-random sequences
    are fully determined by their dimension.
    """
    if isinstance(kind, str):
        kind = GeneratorKind.from_string(kind)

    if kind == GeneratorKind.FAURE:
        return FaureGenerator(dimensions)
    if kind == GeneratorKind.SOBOL:
        return SobolGenerator(dimensions)
    if kind == GeneratorKind.HALTON:
        return HaltonGenerator(dimensions)
    if kind == GeneratorKind.PSEUDO:
        return PseudoRandomGenerator(dimensions, seed)

    raise ValueError(f"Unsupported generator kind: {kind}")
