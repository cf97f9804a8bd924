import random
from typing import Any, Dict

from qrsearch.base_model.clustering_instance import ClusteringInstance
from qrsearch.base_model.requirements_project import RequirementsProject
from qrsearch.base_model.portfolio import CandidatePortfolio
from qrsearch.util.parser import parse_clustering, parse_requirements, parse_portfolio

DEFAULT_SEED = 13062025


def generate_clustering_data(n_classes: int, n_packages: int, dependency_probability: float = 0.1,
                             seed: int = DEFAULT_SEED) -> Dict[str, Any]:
    """
    Generate a software project in the clustering JSON format. Classes are spread
    round-robin over the packages and every ordered pair of distinct classes gets a
    dependency with the given probability.
    """
    if n_classes <= 0 or n_packages <= 0:
        raise ValueError("Number of classes and packages must be positive")

    gen = random.Random(seed)
    names = [f"C{i}" for i in range(n_classes)]
    classes = []

    for i, name in enumerate(names):
        dependencies = [names[j] for j in range(n_classes) if j != i and gen.random() < dependency_probability]
        classes.append({
            "name": name,
            "package": f"p{i % n_packages}",
            "dependencies": dependencies,
        })

    return {
        "type": "clustering",
        "name": f"generated {n_classes}C",
        "classes": classes,
    }


def generate_clustering_instance(n_classes: int, n_packages: int, dependency_probability: float = 0.1,
                                 seed: int = DEFAULT_SEED) -> ClusteringInstance:
    return parse_clustering(generate_clustering_data(n_classes, n_packages, dependency_probability, seed))


def generate_requirements_data(n_customers: int, n_requirements: int, budget_ratio: float = 0.5,
                               max_requirements_per_customer: int = 5, seed: int = DEFAULT_SEED) -> Dict[str, Any]:
    """Generate a next release problem whose budget is a fraction of the total requirement cost"""
    if n_customers <= 0 or n_requirements <= 0:
        raise ValueError("Number of customers and requirements must be positive")

    gen = random.Random(seed)
    requirements = [{"id": r, "cost": gen.randint(1, 10)} for r in range(n_requirements)]

    customers = []
    for c in range(n_customers):
        count = gen.randint(1, min(max_requirements_per_customer, n_requirements))
        customers.append({
            "id": c,
            "value": gen.randint(1, 10),
            "requirements": sorted(gen.sample(range(n_requirements), count)),
        })

    total_cost = sum(r["cost"] for r in requirements)

    return {
        "type": "requirements",
        "name": f"generated {n_customers}x{n_requirements}",
        "budget": int(total_cost * budget_ratio),
        "requirements": requirements,
        "customers": customers,
    }


def generate_requirements_project(n_customers: int, n_requirements: int, budget_ratio: float = 0.5,
                                  seed: int = DEFAULT_SEED) -> RequirementsProject:
    return parse_requirements(generate_requirements_data(n_customers, n_requirements, budget_ratio, seed=seed))


def generate_portfolio_data(n_projects: int, budget_ratio: float = 0.4, seed: int = DEFAULT_SEED) -> Dict[str, Any]:
    if n_projects <= 0:
        raise ValueError("Number of projects must be positive")

    gen = random.Random(seed)
    projects = [
        {"name": f"P{i}", "npv": round(gen.uniform(10, 100), 2), "cost": round(gen.uniform(5, 50), 2)}
        for i in range(n_projects)
    ]
    total_cost = sum(p["cost"] for p in projects)

    return {
        "type": "portfolio",
        "name": f"generated {n_projects}P",
        "budget": round(total_cost * budget_ratio, 2),
        "projects": projects,
    }


def generate_portfolio(n_projects: int, budget_ratio: float = 0.4, seed: int = DEFAULT_SEED) -> CandidatePortfolio:
    return parse_portfolio(generate_portfolio_data(n_projects, budget_ratio, seed))
