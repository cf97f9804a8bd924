#!/usr/bin/env python3
"""
Benchmark of restart point generators for clustering hill climbing.
Runs Faure, Sobol, Halton and pseudo-random restarts on generated instances of growing size
and writes classes, generator, fitness, restarts and time to CSV.
"""

import csv
import sys

sys.path.append('.')
from qrsearch.config import SearchConfig
from qrsearch.quasi_random.generator import GeneratorKind
from qrsearch.local_search.hill_climbing import ClusteringHillClimbing
from qrsearch.local_search.incremental_calculator import MQCalculator
from qrsearch.util.data_generator import generate_clustering_instance


def run_single_test(n_classes: int, kind: GeneratorKind, population_factor: int) -> tuple:
    """
    Run one clustering search and return (fitness, restarts, restart of best, seconds).
    """
    instance = generate_clustering_instance(n_classes, max(1, n_classes // 5), dependency_probability=0.08)
    config = SearchConfig(generator_kind=kind, population_factor=population_factor, seed=1)

    calculator = MQCalculator.for_instance(instance)
    search = ClusteringHillClimbing(calculator, config.evaluations_for(n_classes),
                                    generator_kind=kind, seed=config.seed)
    result = search.run()

    statistics = result.statistics
    print(f"Classes: {n_classes:4d}, {str(kind):6s}, MQ: {result.fitness:8.4f}, "
          f"Restarts: {statistics.random_restarts:5d}, Time: {statistics.duration_seconds:6.1f}s")

    return result.fitness, statistics.random_restarts, statistics.restart_best_found, statistics.duration_seconds


def main():
    """Run the benchmark for 20 to 100 classes in steps of 20 and save to CSV."""
    output_file = 'benchmark_results.csv'
    population_factor = 20
    class_counts = list(range(20, 101, 20))

    print(f"Running benchmark for {len(class_counts)} sizes and {len(GeneratorKind)} generators")
    print(f"Output: {output_file}")
    print("-" * 50)

    results = []
    for n_classes in class_counts:
        for kind in GeneratorKind:
            fitness, restarts, restart_best, seconds = run_single_test(n_classes, kind, population_factor)
            results.append((n_classes, str(kind), fitness, restarts, restart_best, seconds))

    with open(output_file, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(['classes', 'generator', 'fitness', 'restarts', 'restart_best_found', 'time'])
        writer.writerows(results)

    print(f"\nResults saved to {output_file}")


if __name__ == "__main__":
    main()
