from typing import List, Optional, Sequence, TextIO

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from qrsearch.local_search.hill_climbing import SearchResult
from qrsearch.local_search.progress import ProgressRecord


def log_output(message: str, log_file: Optional[TextIO] = None) -> None:
    """Write a message to the console and, if given, to a log file"""
    print(message)
    if log_file:
        log_file.write(message + "\n")
        log_file.flush()


def format_solution(solution: Sequence) -> str:
    """Inclusion flags print as S (selected) or -, group assignments as their indices"""
    if not solution:
        return "[]"
    if all(isinstance(value, bool) for value in solution):
        return "[" + " ".join("S" if value else "-" for value in solution) + "]"
    return "[" + " ".join(str(value) for value in solution) + "]"


def format_result_line(generator_name: str, instance_name: str, cycle: int, result: SearchResult) -> str:
    """One result line: generator; instance #cycle; time (ms); fitness; restarts; restart of best; solution"""
    statistics = result.statistics
    return (f"{generator_name}; {instance_name} #{cycle}; {int(statistics.duration_seconds * 1000)}; "
            f"{result.fitness}; {statistics.random_restarts}; {statistics.restart_best_found}; "
            f"{format_solution(result.best_solution)}")


def plot_progress(records: List[ProgressRecord], output_path: str, title: str = "Best fitness over evaluations") -> bool:
    """
    Plot best fitness against evaluation count and save the figure.
    Returns False when there is nothing to plot.
    """
    if not records:
        print("No progress records to plot!")
        return False

    evaluations = [r.evaluations for r in records]
    fitness = [r.best_fitness for r in records]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.step(evaluations, fitness, where="post", color="tab:blue", linewidth=1.5)
    ax.set_xlabel("Evaluations")
    ax.set_ylabel("Best fitness")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return True
