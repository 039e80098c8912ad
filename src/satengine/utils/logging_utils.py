"""
Logging utilities for satengine.

This module provides a StructuredLogger that records solver runs as JSON
lines, a NumpyJSONEncoder for serializing numpy values found in solver
statistics, and a LoggingManager that configures Python's logging system.
"""

import json
import logging
import os
import time
from datetime import datetime
from typing import Any

import numpy as np


class NumpyJSONEncoder(json.JSONEncoder):
    """JSON encoder that can handle NumPy arrays and scalars."""

    def default(self, obj):
        """Convert numpy objects to standard Python types."""
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


class StructuredLogger:
    """
    A logger for structured solver events.

    Each event type is written to its own JSON Lines file inside
    ``output_dir``.
    """

    def __init__(self, output_dir: str, run_name: str):
        """
        Initialize the structured logger.

        Args:
            output_dir: Directory to save log files in
            run_name: Name of the run (used in filenames)
        """
        self.output_dir = output_dir
        self.run_name = run_name

        os.makedirs(output_dir, exist_ok=True)

        self.files = {}
        self.write_counts = {}
        self.metadata = {
            "run_name": run_name,
            "start_time": datetime.now().isoformat(),
            "log_files": {},
        }

    def _get_file(self, event_type: str):
        if event_type not in self.files:
            filepath = os.path.join(self.output_dir, f"{self.run_name}_{event_type}.jsonl")
            self.metadata["log_files"][event_type] = filepath
            self.files[event_type] = open(filepath, "w")
            self.write_counts[event_type] = 0
        return self.files[event_type]

    def _write_event(self, event_type: str, data: dict[str, Any]):
        file = self._get_file(event_type)
        file.write(json.dumps(data, cls=NumpyJSONEncoder) + "\n")
        file.flush()
        self.write_counts[event_type] += 1

    def log_solve(self, source: str, result) -> None:
        """
        Log the outcome of one solver run.

        Args:
            source: Where the formula came from (file path or label)
            result: SolverResult returned by the solver
        """
        data = {
            "source": source,
            "status": result.status.value,
            "runtime": result.runtime,
            "statistics": result.statistics,
            "assignment": (
                {str(var): value for var, value in result.assignment.items()}
                if result.assignment is not None
                else None
            ),
            "timestamp": time.time(),
        }
        self._write_event("solve", data)

    def log_exception(self, source: str, exception_type: str, exception_message: str):
        """
        Log an exception raised while handling ``source``.

        Args:
            source: Where the formula came from
            exception_type: Type of the exception
            exception_message: Exception message
        """
        data = {
            "source": source,
            "exception_type": exception_type,
            "exception_message": exception_message,
            "timestamp": time.time(),
        }
        self._write_event("exception", data)

    def close(self):
        """Close all open file handles."""
        for file in self.files.values():
            file.close()
        self.files = {}

    def finalize(self) -> str:
        """
        Close all files and write a metadata file describing the run.

        Returns:
            Path to the metadata file
        """
        self.close()
        self.metadata["end_time"] = datetime.now().isoformat()
        self.metadata["record_counts"] = self.write_counts

        metadata_path = os.path.join(self.output_dir, f"{self.run_name}_metadata.json")
        with open(metadata_path, "w") as f:
            json.dump(self.metadata, f, indent=2)
        return metadata_path


class LoggingManager:
    """
    Configures Python's logging system for the satengine package, with an
    optional structured logger alongside it.
    """

    def __init__(
        self,
        name: str = "satengine",
        level: int | str = logging.INFO,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        log_file: str | None = None,
        structured_dir: str | None = None,
        run_name: str = "satengine",
    ):
        """
        Initialize the logging manager.

        Args:
            name: Logger to configure (the package logger by default)
            level: Logging level for all handlers
            fmt: Format string for the handlers
            log_file: Optional file to mirror log messages to
            structured_dir: Directory for JSON-lines event logs, or None
            run_name: Prefix for structured log files
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Remove any existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(fmt)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            directory = os.path.dirname(os.path.abspath(log_file))
            os.makedirs(directory, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        self.structured_logger = (
            StructuredLogger(structured_dir, run_name) if structured_dir else None
        )

    def get_logger(self) -> logging.Logger:
        """Get the Python logger."""
        return self.logger

    def get_structured_logger(self) -> StructuredLogger | None:
        """Get the structured event logger, if one was requested."""
        return self.structured_logger

    def close(self):
        """Close all loggers."""
        if self.structured_logger is not None:
            self.structured_logger.finalize()

        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)
