"""
Low-discrepancy sequence generators used to draw restart points for local search.
"""

from qrsearch.quasi_random.generator import RandomGenerator, GeneratorKind
from qrsearch.quasi_random.faure import FaureGenerator
from qrsearch.quasi_random.sobol import SobolGenerator
from qrsearch.quasi_random.halton import HaltonGenerator
from qrsearch.quasi_random.pseudo_random import PseudoRandomGenerator
from qrsearch.quasi_random.factory import create_generator

__all__ = [
    'RandomGenerator',
    'GeneratorKind',
    'FaureGenerator',
    'SobolGenerator',
    'HaltonGenerator',
    'PseudoRandomGenerator',
    'create_generator',
]
