import unittest

from qrsearch.util.data_generator import (generate_clustering_data, generate_clustering_instance,
                                          generate_requirements_data, generate_requirements_project,
                                          generate_portfolio_data, generate_portfolio)


class TestDataGenerator(unittest.TestCase):

    def test_clustering_instances_have_requested_sizes(self):
        test_configs = [
            (5, 1),
            (20, 4),
            (60, 7),
        ]

        for n_classes, n_packages in test_configs:
            with self.subTest(f"Testing with {n_classes} classes, {n_packages} packages"):
                instance = generate_clustering_instance(n_classes, n_packages, dependency_probability=0.2)

                self.assertEqual(instance.class_count, n_classes)
                self.assertEqual(instance.package_count, n_packages)
                self.assertEqual(instance.graph.self_loop_count, 0)
                for source, target in instance.graph.edges():
                    self.assertNotEqual(source, target)

    def test_same_seed_gives_same_data(self):
        self.assertEqual(generate_clustering_data(30, 5, seed=1), generate_clustering_data(30, 5, seed=1))
        self.assertNotEqual(generate_clustering_data(30, 5, seed=1), generate_clustering_data(30, 5, seed=2))
        self.assertEqual(generate_requirements_data(10, 20, seed=3), generate_requirements_data(10, 20, seed=3))
        self.assertEqual(generate_portfolio_data(10, seed=4), generate_portfolio_data(10, seed=4))

    def test_dependency_probability_extremes(self):
        empty = generate_clustering_instance(10, 2, dependency_probability=0.0)
        full = generate_clustering_instance(10, 2, dependency_probability=1.0)

        self.assertEqual(empty.graph.edge_count, 0)
        self.assertEqual(full.graph.edge_count, 10 * 9)

    def test_requirements_project(self):
        data = generate_requirements_data(15, 25, budget_ratio=0.5)
        project = generate_requirements_project(15, 25, budget_ratio=0.5)

        total_cost = sum(r["cost"] for r in data["requirements"])
        self.assertEqual(project.budget, int(total_cost * 0.5))
        self.assertEqual(project.solution_size, 15)
        for customer in project.customers:
            self.assertGreater(len(customer.requirements), 0)
            self.assertLessEqual(len(customer.requirements), 5)
            self.assertTrue(1 <= customer.value <= 10)

    def test_portfolio(self):
        portfolio = generate_portfolio(12, budget_ratio=0.4)

        self.assertEqual(portfolio.solution_size, 12)
        self.assertLess(portfolio.budget, portfolio.cost([True] * 12))
        for project in portfolio.projects:
            self.assertTrue(10 <= project.npv <= 100)
            self.assertTrue(5 <= project.cost <= 50)

    def test_non_positive_sizes_are_rejected(self):
        with self.assertRaises(ValueError):
            generate_clustering_data(0, 3)
        with self.assertRaises(ValueError):
            generate_clustering_data(5, 0)
        with self.assertRaises(ValueError):
            generate_requirements_data(5, -1)
        with self.assertRaises(ValueError):
            generate_portfolio_data(0)


if __name__ == "__main__":
    unittest.main()
