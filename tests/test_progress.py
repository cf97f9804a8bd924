import io
import os
import tempfile
import unittest

from qrsearch.local_search.hill_climbing import SearchResult, SearchStatistics
from qrsearch.local_search.progress import ProgressLog, ProgressRecord
from qrsearch.util.search_visualizer import log_output, format_solution, format_result_line, plot_progress


class TestProgressLog(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_records_are_mirrored_into_details_file(self):
        details = io.StringIO()
        log = ProgressLog(details)

        log.record(10000, 3.5)
        log.record(20000, 4.0)

        self.assertEqual(details.getvalue(), "10000; 3.5\n20000; 4.0\n")
        self.assertEqual(log.records, [ProgressRecord(10000, 3.5), ProgressRecord(20000, 4.0)])

    def test_save_and_load(self):
        log = ProgressLog()
        log.record(5, -2.0)
        log.record(10, 7.25)
        path = os.path.join(self.tmp_dir.name, "progress.json")

        log.save_log(path)
        loaded = ProgressLog.load_log(path)

        self.assertEqual(loaded.records, log.records)

    def test_clear(self):
        log = ProgressLog()
        log.record(1, 1.0)
        log.clear()

        self.assertEqual(log.records, [])


class TestSearchVisualizer(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def test_format_solution(self):
        self.assertEqual(format_solution([True, False, True]), "[S - S]")
        self.assertEqual(format_solution([0, 2, 1]), "[0 2 1]")
        self.assertEqual(format_solution([]), "[]")

    def test_format_result_line(self):
        result = SearchResult(best_solution=[1, 0, 1], fitness=1.25,
                              statistics=SearchStatistics(evaluations=101, random_restarts=4,
                                                          restart_best_found=2, duration_seconds=0.0425))

        line = format_result_line("FAURE", "demo", 3, result)

        self.assertEqual(line, "FAURE; demo #3; 42; 1.25; 4; 2; [1 0 1]")

    def test_log_output_writes_to_file(self):
        log_file = io.StringIO()
        log_output("first", log_file)
        log_output("second", None)

        self.assertEqual(log_file.getvalue(), "first\n")

    def test_plot_progress(self):
        path = os.path.join(self.tmp_dir.name, "progress.png")
        records = [ProgressRecord(100, 1.0), ProgressRecord(200, 1.5), ProgressRecord(300, 1.5)]

        self.assertTrue(plot_progress(records, path))
        self.assertTrue(os.path.getsize(path) > 0)

    def test_plot_without_records(self):
        path = os.path.join(self.tmp_dir.name, "empty.png")

        self.assertFalse(plot_progress([], path))
        self.assertFalse(os.path.exists(path))


if __name__ == "__main__":
    unittest.main()
