import json
from dataclasses import dataclass
from typing import List, Optional, Protocol, TextIO


@dataclass
class ProgressRecord:
    """Best fitness known after a number of evaluations"""
    evaluations: int
    best_fitness: float

    def __str__(self):
        return f"{self.evaluations}; {self.best_fitness}"


class ProgressSink(Protocol):
    def record(self, evaluations: int, best_fitness: float) -> None:
        ...


class ProgressLog:
    """Collects progress records of a search run, optionally mirroring them into a details file"""

    def __init__(self, details_file: Optional[TextIO] = None):
        self.records: List[ProgressRecord] = []
        self.details_file = details_file

    def record(self, evaluations: int, best_fitness: float) -> None:
        progress = ProgressRecord(evaluations, best_fitness)
        self.records.append(progress)

        if self.details_file:
            self.details_file.write(f"{progress}\n")

    def clear(self) -> None:
        self.records = []

    def save_log(self, filepath: str) -> None:
        """Save the records to a JSON file"""
        data = [{'evaluations': r.evaluations, 'best_fitness': r.best_fitness} for r in self.records]

        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def load_log(filepath: str) -> 'ProgressLog':
        """Load records from a JSON file"""
        log = ProgressLog()

        with open(filepath, 'r') as f:
            data = json.load(f)

        for item in data:
            log.records.append(ProgressRecord(item['evaluations'], item['best_fitness']))

        return log
