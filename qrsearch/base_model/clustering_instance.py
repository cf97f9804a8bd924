from dataclasses import dataclass, field
from typing import Dict, List

from qrsearch.base_model.dependency_graph import DependencyGraph, InstanceError

@dataclass
class ProjectClass:
    """Class (module) of a software project that can be moved between packages"""
    name: str
    package: str
    dependencies: List[str] = field(default_factory=list)  # names of the classes it depends on

    def __str__(self):
        return f"{self.package}.{self.name}"


class ClusteringInstance:
    """
    Software module clustering instance: the classes of a project, the package each
    class was originally recorded in and the dependency graph between classes.
    Class and package indices follow the order in which they were first seen.
    """

    def __init__(self, name: str, classes: List[ProjectClass]):
        if not classes:
            raise InstanceError(f"Instance '{name}' has no classes")

        self.name = name
        self.classes = list(classes)
        self.packages: List[str] = []
        self._class_indexes: Dict[str, int] = {}
        self._package_indexes: Dict[str, int] = {}

        for index, project_class in enumerate(self.classes):
            if project_class.name in self._class_indexes:
                raise InstanceError(f"Class '{project_class.name}' is registered twice in '{name}'")
            self._class_indexes[project_class.name] = index

            if project_class.package not in self._package_indexes:
                self._package_indexes[project_class.package] = len(self.packages)
                self.packages.append(project_class.package)

        edges = []
        for index, project_class in enumerate(self.classes):
            for target_name in project_class.dependencies:
                target = self._class_indexes.get(target_name)
                if target is None:
                    raise InstanceError(f"Class not registered in project '{name}': {target_name} "
                                        f"(referenced by {project_class.name})")
                edges.append((index, target))

        self.graph = DependencyGraph(len(self.classes), edges)
        self.original_assignment = [self._package_indexes[c.package] for c in self.classes]

    @property
    def class_count(self) -> int:
        return len(self.classes)

    @property
    def package_count(self) -> int:
        return len(self.packages)

    def get_class_index(self, class_name: str) -> int:
        """Return the index of a class, or -1 if it is not part of the instance"""
        return self._class_indexes.get(class_name, -1)

    def get_index_for_package(self, package_name: str) -> int:
        try:
            return self._package_indexes[package_name]
        except KeyError:
            raise InstanceError(f"Unknown package '{package_name}' in instance '{self.name}'")

    def __str__(self):
        return f"{self.name} ({self.class_count} classes, {self.package_count} packages)"
