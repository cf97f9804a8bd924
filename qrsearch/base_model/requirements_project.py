from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set

from qrsearch.base_model.dependency_graph import InstanceError, check_number

@dataclass
class Requirement:
    """Requirement that can be implemented in the next release"""
    requirement_id: int
    cost: int

    def __str__(self):
        return f"{self.requirement_id}"

@dataclass
class Customer:
    """Customer that is satisfied when all of its requirements are implemented"""
    customer_id: int
    value: float
    requirements: Set[int] = field(default_factory=set)

    def __str__(self):
        return f"{self.customer_id}"


class RequirementsProject:
    """
    Next release problem instance.

    A solution holds one inclusion flag per customer. Selecting a customer means
    implementing every requirement it asks for; requirements shared by several
    selected customers are paid only once.
    """

    def __init__(self, name: str, requirements: List[Requirement], customers: List[Customer], budget: int):
        if not customers:
            raise InstanceError(f"Instance '{name}' has no customers")
        check_number(budget, "Budget")
        if budget < 0:
            raise InstanceError(f"Budget must not be negative, got {budget}")

        self.name = name
        self.requirements = list(requirements)
        self.customers = list(customers)
        self.budget = budget

        self._requirement_costs: Dict[int, int] = {}
        for requirement in self.requirements:
            if requirement.requirement_id in self._requirement_costs:
                raise InstanceError(f"Requirement {requirement.requirement_id} is registered twice")
            check_number(requirement.cost, f"Cost of requirement {requirement.requirement_id}")
            if requirement.cost < 0:
                raise InstanceError(f"Requirement {requirement.requirement_id} has negative cost")
            self._requirement_costs[requirement.requirement_id] = requirement.cost

        for customer in self.customers:
            check_number(customer.value, f"Value of customer {customer.customer_id}")
            unknown = set(customer.requirements) - self._requirement_costs.keys()
            if unknown:
                raise InstanceError(f"Customer {customer.customer_id} asks for unknown requirements {sorted(unknown)}")

    @property
    def customer_count(self) -> int:
        return len(self.customers)

    @property
    def solution_size(self) -> int:
        return len(self.customers)

    def _check_solution(self, solution: Sequence[bool]) -> None:
        if len(solution) != len(self.customers):
            raise ValueError(f"Solution has {len(solution)} entries, expected {len(self.customers)}")

    def cost(self, solution: Sequence[bool]) -> int:
        """Cost of the union of the requirements of the selected customers"""
        self._check_solution(solution)
        selected = set()
        for customer, included in zip(self.customers, solution):
            if included:
                selected |= customer.requirements
        return sum(self._requirement_costs[r] for r in selected)

    def value(self, solution: Sequence[bool]) -> float:
        self._check_solution(solution)
        return sum(customer.value for customer, included in zip(self.customers, solution) if included)

    def __str__(self):
        return f"{self.name} ({len(self.customers)} customers, {len(self.requirements)} requirements, budget {self.budget})"
