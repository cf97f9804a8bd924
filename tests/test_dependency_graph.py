import unittest

from qrsearch.base_model.dependency_graph import DependencyGraph, InstanceError
from qrsearch.base_model.clustering_instance import ClusteringInstance, ProjectClass


class TestDependencyGraph(unittest.TestCase):

    def test_adjacency_lists(self):
        graph = DependencyGraph(3, [(0, 1), (1, 2), (0, 2)])

        self.assertEqual(graph.depends_on, [[1, 2], [2], []])
        self.assertEqual(graph.provides_to, [[], [0], [0, 1]])
        self.assertEqual(graph.edge_count, 3)

    def test_duplicate_edges_collapse(self):
        graph = DependencyGraph(2, [(0, 1), (0, 1), (1, 0)])

        self.assertEqual(graph.edge_count, 2)
        self.assertEqual(graph.edges(), [(0, 1), (1, 0)])

    def test_self_loops_are_dropped(self):
        graph = DependencyGraph(2, [(0, 0), (0, 1), (1, 1)])

        self.assertEqual(graph.self_loop_count, 2)
        self.assertEqual(graph.edges(), [(0, 1)])
        self.assertEqual(graph.depends_on, [[1], []])
        self.assertEqual(graph.provides_to, [[], [0]])

    def test_dangling_reference_is_rejected(self):
        with self.assertRaises(InstanceError):
            DependencyGraph(3, [(0, 3)])
        with self.assertRaises(InstanceError):
            DependencyGraph(3, [(-1, 2)])

    def test_non_positive_element_count_is_rejected(self):
        for count in (0, -4):
            with self.subTest(count=count):
                with self.assertRaises(InstanceError):
                    DependencyGraph(count, [])

    def test_instance_error_is_a_value_error(self):
        self.assertTrue(issubclass(InstanceError, ValueError))


class TestClusteringInstance(unittest.TestCase):

    def setUp(self):
        self.classes = [
            ProjectClass("Money", "money", ["Currency"]),
            ProjectClass("Currency", "money", []),
            ProjectClass("Parser", "format", ["Money", "Currency"]),
            ProjectClass("Printer", "format", ["Money"]),
        ]

    def test_indices_follow_first_appearance(self):
        instance = ClusteringInstance("joda", self.classes)

        self.assertEqual(instance.class_count, 4)
        self.assertEqual(instance.packages, ["money", "format"])
        self.assertEqual(instance.original_assignment, [0, 0, 1, 1])
        self.assertEqual(instance.get_class_index("Parser"), 2)
        self.assertEqual(instance.get_class_index("Missing"), -1)
        self.assertEqual(instance.get_index_for_package("format"), 1)

    def test_dependencies_become_graph_edges(self):
        instance = ClusteringInstance("joda", self.classes)

        self.assertEqual(instance.graph.edges(), [(0, 1), (2, 0), (2, 1), (3, 0)])

    def test_unknown_dependency_is_rejected(self):
        self.classes.append(ProjectClass("Broken", "format", ["Nowhere"]))

        with self.assertRaises(InstanceError) as ctx:
            ClusteringInstance("joda", self.classes)
        self.assertIn("Nowhere", str(ctx.exception))

    def test_duplicate_class_is_rejected(self):
        self.classes.append(ProjectClass("Money", "format", []))

        with self.assertRaises(InstanceError):
            ClusteringInstance("joda", self.classes)

    def test_unknown_package_is_rejected(self):
        instance = ClusteringInstance("joda", self.classes)

        with self.assertRaises(InstanceError):
            instance.get_index_for_package("io")

    def test_empty_instance_is_rejected(self):
        with self.assertRaises(InstanceError):
            ClusteringInstance("empty", [])


if __name__ == "__main__":
    unittest.main()
