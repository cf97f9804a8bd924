import numbers
from typing import Iterable, List, Tuple


class InstanceError(ValueError):
    """Raised when a problem instance is malformed and cannot be searched"""


def check_number(value, description: str) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InstanceError(f"{description} must be a number, got {value!r}")


class DependencyGraph:
    """
    Directed dependency relation over elements 0..N-1.

    An edge (i, j) means element i depends on element j. Duplicate edges collapse
    into one, like a 0/1 adjacency matrix. Self-loops are dropped and counted in
    self_loop_count, so they never reach the partition counters.

    For every element two adjacency lists are cached:
        depends_on[i]  - elements that i depends on (outgoing edges)
        provides_to[i] - elements that depend on i (incoming edges)
    """

    def __init__(self, element_count: int, edges: Iterable[Tuple[int, int]]):
        if element_count <= 0:
            raise InstanceError(f"Element count must be positive, got {element_count}")

        self.element_count = element_count
        self.self_loop_count = 0
        self.depends_on: List[List[int]] = [[] for _ in range(element_count)]
        self.provides_to: List[List[int]] = [[] for _ in range(element_count)]

        seen = set()
        for source, target in edges:
            self._check_element(source)
            self._check_element(target)

            if source == target:
                self.self_loop_count += 1
                continue
            if (source, target) in seen:
                continue

            seen.add((source, target))
            self.depends_on[source].append(target)
            self.provides_to[target].append(source)

        for i in range(element_count):
            self.depends_on[i].sort()
            self.provides_to[i].sort()

        self.edge_count = len(seen)

    def _check_element(self, index) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise InstanceError(f"Dependency endpoint must be an element index, got {index!r}")
        if index < 0 or index >= self.element_count:
            raise InstanceError(f"Dependency references unknown element {index} "
                                f"(instance has {self.element_count} elements)")

    def edges(self) -> List[Tuple[int, int]]:
        """Return every dependency edge once, ordered by source then target"""
        return [(source, target)
                for source in range(self.element_count)
                for target in self.depends_on[source]]

    def __str__(self):
        return f"DependencyGraph({self.element_count} elements, {self.edge_count} edges)"
