"""
Unit tests for the JSON logging configuration.
"""
import json
import logging
import sys
import pytest
from unittest.mock import patch
from firelookout.logging_config import JSONFormatter, setup_logging


def make_record(**extra):
	record = logging.LogRecord(
		name="firelookout.scouts.fire_lookout",
		level=logging.WARNING,
		pathname=__file__,
		lineno=42,
		msg="%s: conditioned surface fuel unavailable",
		args=("Ojai Lookout",),
		exc_info=None,
		func="_run_pass"
	)
	for key, value in extra.items():
		setattr(record, key, value)
	return record


class TestJSONFormatter:
	"""Test cases for JSONFormatter."""

	def test_format(self):
		"""Test that a record is written as one JSON object."""
		data = json.loads(JSONFormatter().format(make_record()))

		assert data["level"] == "WARNING"
		assert data["logger"] == "firelookout.scouts.fire_lookout"
		assert data["message"] == "Ojai Lookout: conditioned surface fuel unavailable"
		assert data["function"] == "_run_pass"
		assert data["line"] == 42
		assert data["timestamp"].endswith("Z")

	def test_extra_fields(self):
		"""Test that extra fields are merged into the JSON object."""
		data = json.loads(JSONFormatter().format(make_record(extra_fields={"scout_id": "abc"})))

		assert data["scout_id"] == "abc"

	def test_exception(self):
		"""Test that exception details are included."""
		try:
			raise RuntimeError("boom")
		except RuntimeError:
			record = make_record()
			record.exc_info = sys.exc_info()

		data = json.loads(JSONFormatter().format(record))

		assert "RuntimeError: boom" in data["exception"]


class TestSetupLogging:
	"""Test cases for setup_logging."""

	@pytest.fixture(autouse=True)
	def restore_root_logger(self):
		root_logger = logging.getLogger()
		handlers = list(root_logger.handlers)
		level = root_logger.level
		named_levels = {name: logging.getLogger(name).level for name in ("firelookout", "httpx", "httpcore", "asyncio")}
		yield
		root_logger.handlers = handlers
		root_logger.setLevel(level)
		for name, named_level in named_levels.items():
			logging.getLogger(name).setLevel(named_level)

	@patch.dict("os.environ", {"PYTHONDEBUG": ""})
	def test_installs_json_handler(self):
		"""Test that the root logger writes JSON at the requested level."""
		setup_logging("debug")

		root_logger = logging.getLogger()
		assert root_logger.level == logging.DEBUG
		assert len(root_logger.handlers) == 1
		assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)
		assert logging.getLogger("httpx").level == logging.WARNING

	@patch.dict("os.environ", {"PYTHONDEBUG": "1"})
	def test_debug_mode_keeps_handlers(self):
		"""Test that debug mode only adjusts the package logger level."""
		root_logger = logging.getLogger()
		handlers = list(root_logger.handlers)

		setup_logging("error")

		assert root_logger.handlers == handlers
		assert logging.getLogger("firelookout").level == logging.ERROR
