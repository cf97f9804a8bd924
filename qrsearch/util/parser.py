import json
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Dict, Optional, Union

from qrsearch.base_model.dependency_graph import InstanceError
from qrsearch.base_model.clustering_instance import ClusteringInstance, ProjectClass
from qrsearch.base_model.requirements_project import RequirementsProject, Requirement, Customer
from qrsearch.base_model.portfolio import CandidatePortfolio, CandidateProject

Instance = Union[ClusteringInstance, RequirementsProject, CandidatePortfolio]


class ProblemType(Enum):
    CLUSTERING = "clustering"
    REQUIREMENTS = "requirements"
    PORTFOLIO = "portfolio"

    def __str__(self):
        return self.value

    @classmethod
    def from_string(cls, problem_type: str) -> 'ProblemType':
        if not isinstance(problem_type, str):
            raise ValueError(f"No problem type found for: {problem_type!r}")
        try:
            return cls(problem_type.lower())
        except ValueError:
            raise ValueError(f"No problem type found for: {problem_type}")


class ErrorKind(Enum):
    NOT_FOUND = auto()
    MALFORMED = auto()  # not JSON, or fields missing / of the wrong type
    INVALID_INSTANCE = auto()  # well formed, but inconsistent (dangling references, ...)


@dataclass
class ParseResult:
    """Outcome of loading an instance file: either an instance or an error kind with a message"""
    instance: Optional[Instance] = None
    problem_type: Optional[ProblemType] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def detect_problem_type(data: Dict) -> ProblemType:
    if "type" in data:
        return ProblemType.from_string(data["type"])
    if "classes" in data:
        return ProblemType.CLUSTERING
    if "customers" in data:
        return ProblemType.REQUIREMENTS
    if "projects" in data:
        return ProblemType.PORTFOLIO
    raise InstanceError("Cannot tell the problem type: expected 'classes', 'customers' or 'projects'")


def parse_clustering(data: Dict) -> ClusteringInstance:
    classes = [
        ProjectClass(name=c["name"], package=c["package"], dependencies=list(c.get("dependencies", [])))
        for c in data["classes"]
    ]
    return ClusteringInstance(data.get("name", "unnamed"), classes)


def parse_requirements(data: Dict) -> RequirementsProject:
    requirements = [Requirement(requirement_id=r["id"], cost=r["cost"]) for r in data["requirements"]]
    customers = [
        Customer(customer_id=c["id"], value=c["value"], requirements=set(c["requirements"]))
        for c in data["customers"]
    ]
    return RequirementsProject(data.get("name", "unnamed"), requirements, customers, data["budget"])


def parse_portfolio(data: Dict) -> CandidatePortfolio:
    projects = [CandidateProject(name=p["name"], npv=p["npv"], cost=p["cost"]) for p in data["projects"]]
    return CandidatePortfolio(data.get("name", "unnamed"), projects, data["budget"])


_PARSERS = {
    ProblemType.CLUSTERING: parse_clustering,
    ProblemType.REQUIREMENTS: parse_requirements,
    ProblemType.PORTFOLIO: parse_portfolio,
}


def parse_instance(data: Dict, problem_type: Optional[ProblemType] = None) -> Instance:
    """
    Build an instance from its JSON dictionary form.

    Raises:
        InstanceError: if the instance is inconsistent
        KeyError, TypeError: if fields are missing or of the wrong type
    """
    if problem_type is None:
        problem_type = detect_problem_type(data)
    return _PARSERS[problem_type](data)


def parse_input(input_path: Path, problem_type: Optional[ProblemType] = None) -> Instance:
    """Parse an instance file, raising on any error"""
    with open(input_path, 'r') as f:
        data = json.load(f)
    return parse_instance(data, problem_type)


def load_instance(input_path: Union[Path, str], problem_type: Optional[ProblemType] = None) -> ParseResult:
    """
    Load an instance file without raising: failures are reported through the
    error kind of the returned ParseResult.
    """
    input_path = Path(input_path)

    if not input_path.exists():
        return ParseResult(error_kind=ErrorKind.NOT_FOUND, message=f"Input file {input_path} not found")

    try:
        with open(input_path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            return ParseResult(error_kind=ErrorKind.MALFORMED,
                               message=f"{input_path}: expected a JSON object at the top level")
        if problem_type is None:
            problem_type = detect_problem_type(data)
        instance = parse_instance(data, problem_type)
    except InstanceError as e:
        return ParseResult(problem_type=problem_type, error_kind=ErrorKind.INVALID_INSTANCE, message=f"{input_path}: {e}")
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        return ParseResult(problem_type=problem_type, error_kind=ErrorKind.MALFORMED, message=f"{input_path}: {e!r}")
    except OSError as e:
        return ParseResult(error_kind=ErrorKind.NOT_FOUND, message=f"{input_path}: {e}")

    return ParseResult(instance=instance, problem_type=problem_type)
