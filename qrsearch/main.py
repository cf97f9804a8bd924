import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from qrsearch.config import SearchConfig, DEFAULT_CYCLES, DEFAULT_POPULATION_FACTOR, DEFAULT_PROGRESS_INTERVAL
from qrsearch.quasi_random.generator import GeneratorKind
from qrsearch.local_search.hill_climbing import HillClimbing, InclusionHillClimbing, ClusteringHillClimbing, SearchResult
from qrsearch.local_search.incremental_calculator import MQCalculator, EVMCalculator
from qrsearch.local_search.progress import ProgressLog
from qrsearch.util.parser import ProblemType, Instance, load_instance
from qrsearch.util.search_visualizer import log_output, format_result_line, plot_progress

CALCULATORS = {
    'mq': MQCalculator,
    'evm': EVMCalculator,
}


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Hill climbing with quasi-random restarts')

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--input', nargs='+', type=str, help='Paths to instance JSON files')

    group.add_argument('--test', nargs='+', type=int,
                       help='Generate an instance: clustering [n_classes] [n_packages], '
                            'requirements [n_customers] [n_requirements], portfolio [n_projects]')

    parser.add_argument('--problem', type=str, choices=[str(p) for p in ProblemType], default=None,
                        help='Problem type (detected from the input file when omitted, clustering for --test)')

    parser.add_argument('--generator', type=str, choices=[str(k) for k in GeneratorKind], default='faure',
                        help='Sequence used to draw restart points (default: faure)')

    parser.add_argument('--seed', type=int, default=None, help='Seed for the pseudo-random generator')

    parser.add_argument('--cycles', type=int, default=DEFAULT_CYCLES,
                        help=f'Independent runs per instance (default: {DEFAULT_CYCLES})')

    parser.add_argument('--max-evaluations', type=int, default=None,
                        help='Evaluation budget (default: population factor * N * N)')

    parser.add_argument('--population-factor', type=int, default=DEFAULT_POPULATION_FACTOR,
                        help=f'Budget factor when --max-evaluations is not given (default: {DEFAULT_POPULATION_FACTOR})')

    parser.add_argument('--progress-interval', type=int, default=DEFAULT_PROGRESS_INTERVAL,
                        help=f'Evaluations between progress records (default: {DEFAULT_PROGRESS_INTERVAL})')

    parser.add_argument('--groups', type=int, default=None,
                        help='Number of packages for clustering (default: packages in the instance)')

    parser.add_argument('--metric', type=str, choices=sorted(CALCULATORS), default='mq',
                        help='Clustering quality metric (default: mq)')

    parser.add_argument('--output', type=str, default='results.txt',
                        help='Path to the results file (default: results.txt)')

    parser.add_argument('--log', type=str, help='Path to a details file with the progress of every run')

    parser.add_argument('--plot', type=str, help='Path to a PNG with the progress of the last run')

    return parser.parse_args(argv)


def generate_instance(problem_type: ProblemType, sizes: List[int]) -> Instance:
    from qrsearch.util.data_generator import (generate_clustering_instance, generate_requirements_project,
                                              generate_portfolio)

    if problem_type == ProblemType.CLUSTERING:
        n_classes = sizes[0]
        n_packages = sizes[1] if len(sizes) > 1 else max(1, n_classes // 5)
        return generate_clustering_instance(n_classes, n_packages)
    if problem_type == ProblemType.REQUIREMENTS:
        n_customers = sizes[0]
        n_requirements = sizes[1] if len(sizes) > 1 else 2 * n_customers
        return generate_requirements_project(n_customers, n_requirements)
    return generate_portfolio(sizes[0])


def build_search(instance: Instance, problem_type: ProblemType, config: SearchConfig, progress: ProgressLog,
                 metric: str = 'mq', groups: Optional[int] = None) -> HillClimbing:
    """Create the hill climbing search for an instance, sized by the configuration"""
    kwargs = dict(generator_kind=config.generator_kind, seed=config.seed,
                  progress=progress, progress_interval=config.progress_interval)

    if problem_type == ProblemType.CLUSTERING:
        calculator = CALCULATORS[metric].for_instance(instance, groups)
        max_evaluations = config.evaluations_for(instance.class_count)
        return ClusteringHillClimbing(calculator, max_evaluations, **kwargs)

    max_evaluations = config.evaluations_for(instance.solution_size)
    return InclusionHillClimbing(instance, max_evaluations, **kwargs)


def run_instance(out: Optional[TextIO], details: Optional[TextIO], instance: Instance, problem_type: ProblemType,
                 config: SearchConfig, metric: str = 'mq', groups: Optional[int] = None) -> List[Tuple[SearchResult, ProgressLog]]:
    """Run all cycles of an instance, writing one result line per cycle"""
    results = []
    generator_name = str(config.generator_kind).upper()

    for cycle in range(config.cycles):
        progress = ProgressLog(details)
        search = build_search(instance, problem_type, config, progress, metric, groups)

        if details:
            details.write(f"{generator_name} {instance.name} #{cycle}\n")
        result = search.run()
        if details:
            details.write("\n")

        log_output(format_result_line(generator_name, instance.name, cycle, result), out)
        results.append((result, progress))

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the optimizer."""
    args = parse_arguments(argv)

    try:
        config = SearchConfig(generator_kind=GeneratorKind.from_string(args.generator),
                              max_evaluations=args.max_evaluations,
                              population_factor=args.population_factor,
                              progress_interval=args.progress_interval,
                              cycles=args.cycles,
                              seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    problem_type = ProblemType.from_string(args.problem) if args.problem else None

    instances = []
    if args.input:
        for input_path in args.input:
            parsed = load_instance(input_path, problem_type)
            if not parsed.ok:
                print(f"Error ({parsed.error_kind.name}): {parsed.message}")
                return 1
            print(f"{parsed.instance.name} {parsed.problem_type}")
            instances.append((parsed.instance, parsed.problem_type))
    else:
        test_type = problem_type or ProblemType.CLUSTERING
        if any(size <= 0 for size in args.test):
            print("Error: Test sizes must be positive")
            return 1
        instances.append((generate_instance(test_type, args.test), test_type))

    last_progress = None
    details = None
    try:
        if args.log:
            details = open(args.log, 'w')
        with open(args.output, 'w') as out:
            for instance, instance_type in instances:
                try:
                    results = run_instance(out, details, instance, instance_type, config, args.metric, args.groups)
                except ValueError as e:
                    print(f"Error: {instance.name}: {e}")
                    return 1
                last_progress = results[-1][1]
    except OSError as e:
        print(f"Error: {e}")
        return 1
    finally:
        if details:
            details.close()

    if args.plot and last_progress is not None:
        plot_progress(last_progress.records, args.plot)

    print(f"\nResults saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
