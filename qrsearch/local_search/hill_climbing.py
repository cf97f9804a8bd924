import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterator, List, Optional, Tuple, Union

from qrsearch.config import DEFAULT_PROGRESS_INTERVAL, INCLUSION_THRESHOLD
from qrsearch.quasi_random.generator import GeneratorKind, RandomGenerator
from qrsearch.quasi_random.factory import create_generator
from qrsearch.local_search.incremental_calculator import IncrementalCalculator
from qrsearch.local_search.objectives import InclusionObjective, inclusion_fitness
from qrsearch.local_search.progress import ProgressSink


class NeighborhoodStatus(Enum):
    """Possible outcomes of a neighborhood visit"""
    FOUND_BETTER_NEIGHBOR = auto()
    NO_BETTER_NEIGHBOR = auto()
    SEARCH_EXHAUSTED = auto()


@dataclass
class NeighborhoodResult:
    status: NeighborhoodStatus
    neighbor_fitness: float = 0.0  # only meaningful when a better neighbor was found


@dataclass
class SearchStatistics:
    """Counters of one search run; reset when the run starts"""
    evaluations: int = 0
    random_restarts: int = 0
    restart_best_found: int = 0
    duration_seconds: float = 0.0


@dataclass
class SearchResult:
    best_solution: List[Any]
    fitness: float
    statistics: SearchStatistics = field(default_factory=SearchStatistics)


class HillClimbing(ABC):
    """
    First-improvement hill climbing with random restarts.

    Starting from a solution drawn from a (quasi-)random generator, the neighborhood of
    the working solution is scanned in a fixed order and the first neighbor strictly
    better than the working solution replaces it. When no neighbor improves, the search
    restarts from a new generated solution. The run stops only when the evaluation
    budget is exceeded, so at most max_evaluations + 1 evaluations are performed.

    Subclasses define the solution representation and the neighborhood moves.
    """

    def __init__(self, max_evaluations: int,
                 generator_kind: Union[GeneratorKind, str] = GeneratorKind.FAURE,
                 seed: Optional[int] = None,
                 progress: Optional[ProgressSink] = None,
                 progress_interval: int = DEFAULT_PROGRESS_INTERVAL):
        if not isinstance(max_evaluations, int) or isinstance(max_evaluations, bool) or max_evaluations <= 0:
            raise ValueError(f"max_evaluations must be a positive integer, got {max_evaluations!r}")
        if progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {progress_interval}")

        self.max_evaluations = max_evaluations
        self.generator_kind = generator_kind
        self.seed = seed
        self.progress = progress
        self.progress_interval = progress_interval

        self.statistics = SearchStatistics()
        self.best_solution: Optional[List[Any]] = None
        self.fitness = float('-inf')
        self.accepted_moves: List[Any] = []
        self.best_history: List[Tuple[int, float]] = []  # (evaluations, fitness) at each new best

    @property
    @abstractmethod
    def solution_size(self) -> int:
        """Number of coordinates of a solution, and dimension of the generator"""

    @abstractmethod
    def create_random_solution(self, generator: RandomGenerator) -> List[Any]:
        """Map the next generator term into a solution"""

    @abstractmethod
    def _fitness(self, solution: List[Any]) -> float:
        """Fitness of a solution, without counting the evaluation"""

    def _load(self, solution: List[Any]) -> None:
        """Called when the working solution is replaced as a whole"""

    @abstractmethod
    def _neighbor_moves(self, solution: List[Any]) -> Iterator[Any]:
        """Single element changes of a solution, in scan order"""

    @abstractmethod
    def _apply(self, solution: List[Any], move: Any) -> None:
        pass

    @abstractmethod
    def _undo(self, solution: List[Any], move: Any) -> None:
        pass

    def evaluate(self, solution: List[Any]) -> float:
        """Evaluate a solution, counting it against the budget"""
        self.statistics.evaluations += 1

        if self.progress is not None and self.statistics.evaluations % self.progress_interval == 0:
            self.progress.record(self.statistics.evaluations, self.fitness)

        return self._fitness(solution)

    def _budget_exceeded(self) -> bool:
        return self.statistics.evaluations > self.max_evaluations

    def visit_neighbors(self, solution: List[Any]) -> NeighborhoodResult:
        """
        Look for a neighbor better than the working solution.

        The working solution itself is accepted right away if it beats the best solution
        of the run (this is how restart points are taken). On success the improving move
        stays applied to the solution.
        """
        starting_fitness = self.evaluate(solution)

        if self._budget_exceeded():
            return NeighborhoodResult(NeighborhoodStatus.SEARCH_EXHAUSTED)

        if starting_fitness > self.fitness:
            return NeighborhoodResult(NeighborhoodStatus.FOUND_BETTER_NEIGHBOR, starting_fitness)

        for move in self._neighbor_moves(solution):
            self._apply(solution, move)
            neighbor_fitness = self.evaluate(solution)

            if self._budget_exceeded():
                return NeighborhoodResult(NeighborhoodStatus.SEARCH_EXHAUSTED)

            if neighbor_fitness > starting_fitness:
                self.accepted_moves.append(move)
                return NeighborhoodResult(NeighborhoodStatus.FOUND_BETTER_NEIGHBOR, neighbor_fitness)

            self._undo(solution, move)

        return NeighborhoodResult(NeighborhoodStatus.NO_BETTER_NEIGHBOR)

    def _record_best(self, solution: List[Any], fitness: float) -> None:
        self.best_solution = list(solution)
        self.fitness = fitness
        self.statistics.restart_best_found = self.statistics.random_restarts
        self.best_history.append((self.statistics.evaluations, fitness))

    def local_search(self, solution: List[Any]) -> bool:
        """
        Climb from a solution until a local optimum or the end of the budget.
        Returns True at a local optimum, False when the budget ran out.
        """
        while True:
            result = self.visit_neighbors(solution)

            if result.status == NeighborhoodStatus.FOUND_BETTER_NEIGHBOR and result.neighbor_fitness > self.fitness:
                self._record_best(solution, result.neighbor_fitness)

            if result.status != NeighborhoodStatus.FOUND_BETTER_NEIGHBOR:
                return result.status == NeighborhoodStatus.NO_BETTER_NEIGHBOR

    def _reset(self) -> None:
        self.statistics = SearchStatistics()
        self.best_solution = None
        self.fitness = float('-inf')
        self.accepted_moves = []
        self.best_history = []

    def execute(self, generator: Optional[RandomGenerator] = None) -> List[Any]:
        """Run the search with random restarts and return a copy of the best solution"""
        if generator is None:
            generator = create_generator(self.generator_kind, self.solution_size, self.seed)
        elif generator.dimensions != self.solution_size:
            raise ValueError(f"Generator has {generator.dimensions} dimensions, "
                             f"solutions have {self.solution_size} entries")

        self._reset()

        first_solution = self.create_random_solution(generator)
        self._load(first_solution)
        self._record_best(first_solution, self.evaluate(first_solution))

        solution = list(first_solution)

        while self.local_search(solution):
            self.statistics.random_restarts += 1
            solution = self.create_random_solution(generator)
            self._load(solution)

        return list(self.best_solution)

    def run(self, generator: Optional[RandomGenerator] = None) -> SearchResult:
        """Execute the search and collect its result and statistics"""
        start_time = time.time()
        best_solution = self.execute(generator)
        self.statistics.duration_seconds = time.time() - start_time

        return SearchResult(best_solution, self.fitness, self.statistics)


class InclusionHillClimbing(HillClimbing):
    """Hill climbing over inclusion flags (next release problem, project portfolio selection)"""

    def __init__(self, objective: InclusionObjective, max_evaluations: int, **kwargs):
        super().__init__(max_evaluations, **kwargs)
        self.objective = objective

    @property
    def solution_size(self) -> int:
        return self.objective.solution_size

    def create_random_solution(self, generator: RandomGenerator) -> List[bool]:
        sample = generator.rand_double()
        return [bool(value >= INCLUSION_THRESHOLD) for value in sample]

    def _fitness(self, solution: List[bool]) -> float:
        return inclusion_fitness(self.objective, solution)

    def _neighbor_moves(self, solution: List[bool]) -> Iterator[int]:
        return iter(range(len(solution)))

    def _apply(self, solution: List[bool], move: int) -> None:
        solution[move] = not solution[move]

    def _undo(self, solution: List[bool], move: int) -> None:
        solution[move] = not solution[move]


class ClusteringHillClimbing(HillClimbing):
    """
    Hill climbing over class -> package assignments, using an incremental calculator
    as the fitness oracle. A neighbor moves one class to another package; classes are
    scanned in index order and, for each class, target packages in index order.
    Moves are (element, old_group, new_group) tuples.
    """

    def __init__(self, calculator: IncrementalCalculator, max_evaluations: int, **kwargs):
        super().__init__(max_evaluations, **kwargs)
        self.calculator = calculator

    @property
    def solution_size(self) -> int:
        return self.calculator.element_count

    def create_random_solution(self, generator: RandomGenerator) -> List[int]:
        sample = generator.rand_int(0, self.calculator.group_count)
        return [int(group) for group in sample]

    def _load(self, solution: List[int]) -> None:
        self.calculator.move_all(solution)

    def _fitness(self, solution: List[int]) -> float:
        # the calculator always holds the working solution
        return self.calculator.evaluate()

    def _neighbor_moves(self, solution: List[int]) -> Iterator[Tuple[int, int, int]]:
        for element in range(len(solution)):
            for group in range(self.calculator.group_count):
                current_group = solution[element]
                if group != current_group:
                    yield (element, current_group, group)

    def _apply(self, solution: List[int], move: Tuple[int, int, int]) -> None:
        element, _, new_group = move
        solution[element] = new_group
        self.calculator.move_element(element, new_group)

    def _undo(self, solution: List[int], move: Tuple[int, int, int]) -> None:
        element, old_group, _ = move
        solution[element] = old_group
        self.calculator.move_element(element, old_group)
