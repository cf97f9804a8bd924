"""
Local search module for clustering and selection problems.
Includes hill climbing with quasi-random restarts and the incremental quality calculators it relies on.
"""

from qrsearch.local_search.hill_climbing import (HillClimbing, InclusionHillClimbing, ClusteringHillClimbing,
                                                 NeighborhoodStatus, NeighborhoodResult, SearchStatistics, SearchResult)
from qrsearch.local_search.incremental_calculator import IncrementalCalculator, MQCalculator, EVMCalculator
from qrsearch.local_search.objectives import InclusionObjective, penalized_fitness, inclusion_fitness
from qrsearch.local_search.progress import ProgressLog, ProgressRecord, ProgressSink

__all__ = [
    'HillClimbing',
    'InclusionHillClimbing',
    'ClusteringHillClimbing',
    'NeighborhoodStatus',
    'NeighborhoodResult',
    'SearchStatistics',
    'SearchResult',
    'IncrementalCalculator',
    'MQCalculator',
    'EVMCalculator',
    'InclusionObjective',
    'penalized_fitness',
    'inclusion_fitness',
    'ProgressLog',
    'ProgressRecord',
    'ProgressSink',
]
