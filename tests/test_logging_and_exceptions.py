"""
Unit tests for logging and error handling components.

Tests the StructuredLogger, LoggingManager and exception classes to ensure they work as expected.
"""

import json
import logging
import os
import shutil
import tempfile
import unittest

import numpy as np

from satengine.formula import Clause, Literal
from satengine.solvers import solve
from satengine.utils.exceptions import (
    InvalidClauseError,
    SATBaseException,
    SolverNotFoundError,
)
from satengine.utils.logging_utils import LoggingManager, NumpyJSONEncoder, StructuredLogger

from sat_helpers import fm


class TestExceptions(unittest.TestCase):
    """Test cases for custom exception classes."""

    def test_base_exception(self):
        error = SATBaseException("boom")
        self.assertEqual(str(error), "boom")
        self.assertEqual(error.message, "boom")

    def test_invalid_clause_error(self):
        """Test InvalidClauseError class."""
        error = InvalidClauseError()
        self.assertEqual(str(error), "Invalid clause detected")

        clause = Clause([Literal.pos("a"), Literal.pos("b"), Literal.pos("c")])
        error = InvalidClauseError("Too wide", clause=clause, max_width=2)
        self.assertIn("(a v b v c)", str(error))
        self.assertIn("max width 2", str(error))
        self.assertEqual(error.clause, clause)
        self.assertIsInstance(error, SATBaseException)

    def test_solver_not_found_error(self):
        error = SolverNotFoundError("minisat", ["dpll", "2sat"])
        self.assertIn("minisat", str(error))
        self.assertIn("dpll, 2sat", str(error))
        self.assertIsInstance(error, ValueError)


class TestNumpyJSONEncoder(unittest.TestCase):
    def test_numpy_values(self):
        data = {
            "int": np.int64(3),
            "float": np.float32(0.5),
            "flag": np.bool_(True),
            "array": np.arange(3),
        }
        decoded = json.loads(json.dumps(data, cls=NumpyJSONEncoder))
        self.assertEqual(decoded, {"int": 3, "float": 0.5, "flag": True, "array": [0, 1, 2]})


class TestStructuredLogger(unittest.TestCase):
    """Test cases for StructuredLogger."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_log_solve(self):
        logger = StructuredLogger(self.test_dir, "run")
        result = solve(fm(("a", "b"), ("~a",)))
        logger.log_solve("inline", result)
        logger.close()

        with open(os.path.join(self.test_dir, "run_solve.jsonl")) as f:
            lines = f.readlines()
        self.assertEqual(len(lines), 1)
        event = json.loads(lines[0])
        self.assertEqual(event["source"], "inline")
        self.assertEqual(event["status"], "satisfiable")
        self.assertEqual(event["assignment"], {"a": False, "b": True})
        self.assertEqual(event["statistics"]["solver_name"], "2sat")

    def test_log_unsat_and_exception(self):
        logger = StructuredLogger(self.test_dir, "run")
        logger.log_solve("inline", solve(fm(("a",), ("~a",))))
        logger.log_exception("bad.cnf", "ValueError", "No problem line found")
        metadata_path = logger.finalize()

        with open(metadata_path) as f:
            metadata = json.load(f)
        self.assertEqual(metadata["record_counts"], {"solve": 1, "exception": 1})
        self.assertIn("end_time", metadata)

        with open(metadata["log_files"]["solve"]) as f:
            self.assertIsNone(json.loads(f.readline())["assignment"])


class TestLoggingManager(unittest.TestCase):
    """Test cases for LoggingManager."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_file_and_structured_logging(self):
        log_file = os.path.join(self.test_dir, "logs", "run.log")
        manager = LoggingManager(
            name="satengine.test_manager",
            level="DEBUG",
            log_file=log_file,
            structured_dir=os.path.join(self.test_dir, "events"),
            run_name="unit",
        )
        manager.get_logger().debug("hello from the test")
        self.assertIsNotNone(manager.get_structured_logger())
        manager.close()

        with open(log_file) as f:
            self.assertIn("hello from the test", f.read())
        self.assertTrue(
            os.path.exists(os.path.join(self.test_dir, "events", "unit_metadata.json"))
        )
        self.assertEqual(manager.get_logger().handlers, [])

    def test_without_structured_logger(self):
        manager = LoggingManager(name="satengine.test_plain", level=logging.WARNING)
        self.assertIsNone(manager.get_structured_logger())
        self.assertEqual(manager.get_logger().level, logging.WARNING)
        manager.close()


if __name__ == "__main__":
    unittest.main()
