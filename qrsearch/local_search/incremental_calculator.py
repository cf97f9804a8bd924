from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

import numpy as np

from qrsearch.base_model.dependency_graph import DependencyGraph
from qrsearch.base_model.clustering_instance import ClusteringInstance


class IncrementalCalculator(ABC):
    """
    Keeps the class -> package assignment of a clustering instance together with the
    number of internal (intra) and external (inter) dependency edges of every package.

    An edge inside a package counts once in that package's intra counter. An edge
    between two packages counts once in the inter counter of each of them. Moving a
    single element only revisits the edges incident to it, and only the quality of the
    two packages involved is recomputed.
    """

    def __init__(self, graph: DependencyGraph, group_count: int, initial_assignment: Sequence[int]):
        if group_count <= 0:
            raise ValueError(f"Group count must be positive, got {group_count}")

        self.graph = graph
        self.element_count = graph.element_count
        self.group_count = group_count

        edges = graph.edges()
        self._sources = np.array([s for s, _ in edges], dtype=np.int64)
        self._targets = np.array([t for _, t in edges], dtype=np.int64)

        self._assignment: List[int] = []
        self._intra: List[int] = [0] * group_count
        self._inter: List[int] = [0] * group_count
        self._values: List[float] = [0.0] * group_count

        self.move_all(initial_assignment)

    @classmethod
    def for_instance(cls, instance: ClusteringInstance, group_count: Optional[int] = None) -> 'IncrementalCalculator':
        """Build a calculator starting from the packages recorded in the instance"""
        if group_count is None:
            group_count = instance.package_count
        return cls(instance.graph, group_count, instance.original_assignment)

    @abstractmethod
    def _group_value(self, group: int) -> float:
        """Quality contribution of a single group given its current counters"""

    def _check_group(self, group) -> None:
        if group < 0 or group >= self.group_count:
            raise ValueError(f"Group {group} out of range [0, {self.group_count})")

    def _check_element(self, element) -> None:
        if element < 0 or element >= self.element_count:
            raise ValueError(f"Element {element} out of range [0, {self.element_count})")

    def _apply_influence(self, element: int, delta: int) -> None:
        """Add (delta=1) or remove (delta=-1) the edges incident to element under its current group"""
        assignment = self._assignment
        source_group = assignment[element]

        for neighbors in (self.graph.depends_on[element], self.graph.provides_to[element]):
            for other in neighbors:
                other_group = assignment[other]
                if other_group != source_group:
                    self._inter[source_group] += delta
                    self._inter[other_group] += delta
                else:
                    self._intra[source_group] += delta

    def move_element(self, element: int, group: int) -> None:
        """Reassign one element, updating counters in O(degree(element))"""
        self._check_element(element)
        self._check_group(group)

        current_group = self._assignment[element]
        if current_group == group:
            return

        self._apply_influence(element, -1)
        self._assignment[element] = group
        self._apply_influence(element, 1)

        self._values[current_group] = self._group_value(current_group)
        self._values[group] = self._group_value(group)

    def move_all(self, assignment: Sequence[int]) -> None:
        """Replace the whole assignment and recompute every counter from the edge list"""
        if len(assignment) != self.element_count:
            raise ValueError(f"Assignment has {len(assignment)} entries, expected {self.element_count}")

        new_assignment = [int(group) for group in assignment]
        for group in new_assignment:
            self._check_group(group)

        self._assignment = new_assignment
        groups = np.array(new_assignment, dtype=np.int64)
        source_groups = groups[self._sources]
        target_groups = groups[self._targets]
        internal = source_groups == target_groups

        intra = np.bincount(source_groups[internal], minlength=self.group_count)
        inter = (np.bincount(source_groups[~internal], minlength=self.group_count)
                 + np.bincount(target_groups[~internal], minlength=self.group_count))

        self._intra = [int(count) for count in intra]
        self._inter = [int(count) for count in inter]
        self._values = [self._group_value(group) for group in range(self.group_count)]

    def evaluate(self) -> float:
        """Sum of the cached per-group values"""
        return sum(self._values)

    @property
    def assignment(self) -> List[int]:
        return list(self._assignment)

    def group_of(self, element: int) -> int:
        return self._assignment[element]

    @property
    def intra_edges(self) -> List[int]:
        return list(self._intra)

    @property
    def inter_edges(self) -> List[int]:
        return list(self._inter)

    @property
    def group_values(self) -> List[float]:
        return list(self._values)

    def recount(self) -> Tuple[List[int], List[int]]:
        """Count intra and inter edges of every group from scratch, one edge at a time"""
        intra = [0] * self.group_count
        inter = [0] * self.group_count
        for source, target in self.graph.edges():
            source_group = self._assignment[source]
            target_group = self._assignment[target]
            if source_group != target_group:
                inter[source_group] += 1
                inter[target_group] += 1
            else:
                intra[source_group] += 1
        return intra, inter

    def is_consistent(self) -> bool:
        return self.recount() == (self._intra, self._inter)


class MQCalculator(IncrementalCalculator):
    """
    Modularization quality: each group contributes intra / (intra + 0.5 * inter).
    A group without any incident edge contributes 0.
    """

    def _group_value(self, group: int) -> float:
        intra = self._intra[group]
        inter = self._inter[group]

        if intra == 0 and inter == 0:
            return 0.0

        return intra / (intra + 0.5 * inter)


class EVMCalculator(IncrementalCalculator):
    """
    Placeholder for an EVM-based objective. The counters are maintained like any other
    calculator, but no EVM formula is defined yet, so every group contributes 0.
    """

    def _group_value(self, group: int) -> float:
        return 0.0
