import json
import os
import tempfile
import unittest

from qrsearch.main import main, parse_arguments
from qrsearch.util.data_generator import generate_portfolio_data


class TestMain(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.output = os.path.join(self.tmp_dir.name, "results.txt")
        self.details = os.path.join(self.tmp_dir.name, "details.txt")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def read_lines(self, path):
        with open(path, 'r') as f:
            return [line.rstrip("\n") for line in f]

    def test_defaults(self):
        args = parse_arguments(["--test", "10"])

        self.assertEqual(args.generator, "faure")
        self.assertEqual(args.metric, "mq")
        self.assertEqual(args.cycles, 1)
        self.assertIsNone(args.max_evaluations)

    def test_generated_clustering_run(self):
        code = main(["--test", "10", "3", "--max-evaluations", "200", "--cycles", "2",
                     "--progress-interval", "50", "--output", self.output, "--log", self.details])

        self.assertEqual(code, 0)
        lines = self.read_lines(self.output)
        self.assertEqual(len(lines), 2)
        for cycle, line in enumerate(lines):
            self.assertTrue(line.startswith(f"FAURE; generated 10C #{cycle};"), line)
            self.assertEqual(len(line.split("; ")), 7)

        details = self.read_lines(self.details)
        self.assertEqual(details[0], "FAURE generated 10C #0")
        self.assertEqual([line.split("; ")[0] for line in details[1:5]], ["50", "100", "150", "200"])
        self.assertEqual(details[5], "")
        self.assertEqual(details[6], "FAURE generated 10C #1")

    def test_requirements_run_with_halton(self):
        code = main(["--test", "8", "--problem", "requirements", "--generator", "halton",
                     "--max-evaluations", "300", "--output", self.output])

        self.assertEqual(code, 0)
        line = self.read_lines(self.output)[0]
        self.assertTrue(line.startswith("HALTON; generated 8x16 #0;"), line)
        solution = line.split("; ")[-1]
        self.assertEqual(len(solution.strip("[]").split()), 8)

    def test_portfolio_file_with_plot(self):
        input_path = os.path.join(self.tmp_dir.name, "portfolio.json")
        with open(input_path, 'w') as f:
            json.dump(generate_portfolio_data(6), f)
        plot_path = os.path.join(self.tmp_dir.name, "progress.png")

        code = main(["--input", input_path, "--max-evaluations", "400", "--progress-interval", "100",
                     "--output", self.output, "--plot", plot_path])

        self.assertEqual(code, 0)
        self.assertTrue(self.read_lines(self.output)[0].startswith("FAURE; generated 6P #0;"))
        self.assertTrue(os.path.exists(plot_path))

    def test_missing_input(self):
        code = main(["--input", os.path.join(self.tmp_dir.name, "nothing.json"), "--output", self.output])

        self.assertEqual(code, 1)

    def test_invalid_settings(self):
        self.assertEqual(main(["--test", "10", "--cycles", "0", "--output", self.output]), 1)
        self.assertEqual(main(["--test", "0", "3", "--output", self.output]), 1)
        self.assertEqual(main(["--test", "10", "-5", "--output", self.output]), 1)

    def test_unwritable_output_files(self):
        missing_dir = os.path.join(self.tmp_dir.name, "no_such_dir")

        self.assertEqual(main(["--test", "10", "--max-evaluations", "50",
                               "--output", os.path.join(missing_dir, "results.txt")]), 1)
        self.assertEqual(main(["--test", "10", "--max-evaluations", "50", "--output", self.output,
                               "--log", os.path.join(missing_dir, "details.txt")]), 1)

    def test_non_numeric_customer_value(self):
        input_path = os.path.join(self.tmp_dir.name, "nrp.json")
        with open(input_path, 'w') as f:
            json.dump({"budget": 5, "requirements": [{"id": 0, "cost": 1}],
                       "customers": [{"id": 0, "value": "7", "requirements": [0]}]}, f)

        self.assertEqual(main(["--input", input_path, "--output", self.output]), 1)

    def test_sobol_generator(self):
        code = main(["--test", "10", "3", "--generator", "sobol", "--max-evaluations", "100",
                     "--output", self.output])

        self.assertEqual(code, 0)
        self.assertTrue(self.read_lines(self.output)[0].startswith("SOBOL; generated 10C #0;"))

    def test_too_few_groups_for_the_original_packages(self):
        code = main(["--test", "10", "3", "--groups", "1", "--max-evaluations", "50", "--output", self.output])

        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
