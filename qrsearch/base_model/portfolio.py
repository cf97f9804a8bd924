from dataclasses import dataclass
from typing import List, Sequence

from qrsearch.base_model.dependency_graph import InstanceError, check_number

@dataclass
class CandidateProject:
    """Project that is a candidate to enter the portfolio"""
    name: str
    npv: float  # net present value
    cost: float

    def __str__(self):
        return f"{self.name}"


class CandidatePortfolio:
    """Project portfolio selection: choose projects whose total cost fits the budget"""

    def __init__(self, name: str, projects: List[CandidateProject], budget: float):
        if not projects:
            raise InstanceError(f"Instance '{name}' has no candidate projects")
        check_number(budget, "Budget")
        if budget < 0:
            raise InstanceError(f"Budget must not be negative, got {budget}")

        names = set()
        for project in projects:
            if project.name in names:
                raise InstanceError(f"Project '{project.name}' is registered twice")
            check_number(project.npv, f"NPV of project '{project.name}'")
            check_number(project.cost, f"Cost of project '{project.name}'")
            if project.cost < 0:
                raise InstanceError(f"Project '{project.name}' has negative cost")
            names.add(project.name)

        self.name = name
        self.projects = list(projects)
        self.budget = budget

    @property
    def solution_size(self) -> int:
        return len(self.projects)

    def _check_solution(self, solution: Sequence[bool]) -> None:
        if len(solution) != len(self.projects):
            raise ValueError(f"Solution has {len(solution)} entries, expected {len(self.projects)}")

    def cost(self, solution: Sequence[bool]) -> float:
        self._check_solution(solution)
        return sum(p.cost for p, included in zip(self.projects, solution) if included)

    def value(self, solution: Sequence[bool]) -> float:
        self._check_solution(solution)
        return sum(p.npv for p, included in zip(self.projects, solution) if included)

    def __str__(self):
        return f"{self.name} ({len(self.projects)} projects, budget {self.budget})"
