from typing import Protocol, Sequence, Union

Number = Union[int, float]


class InclusionObjective(Protocol):
    """Cost and value of a selection of elements, plus the budget the cost must fit in"""

    budget: Number

    @property
    def solution_size(self) -> int:
        ...

    def cost(self, solution: Sequence[bool]) -> Number:
        ...

    def value(self, solution: Sequence[bool]) -> Number:
        ...


def penalized_fitness(cost: Number, value: Number, budget: Number) -> float:
    """
    Value of a feasible selection, or minus its cost when it exceeds the budget.
    Infeasible selections are still ranked: the less they cost, the better.
    """
    if cost <= budget:
        return value
    return -cost


def inclusion_fitness(objective: InclusionObjective, solution: Sequence[bool]) -> float:
    return penalized_fitness(objective.cost(solution), objective.value(solution), objective.budget)
