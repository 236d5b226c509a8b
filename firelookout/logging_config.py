"""
Structured JSON logging configuration.
Outputs to stdout so log collectors can categorize log levels.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict


class JSONFormatter(logging.Formatter):
	"""
	Formatter that outputs one JSON object per log record.
	"""

	def format(self, record: logging.LogRecord) -> str:
		"""Format log record as JSON."""
		log_data: Dict[str, Any] = {
			"timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}

		if record.exc_info:
			log_data["exception"] = self.formatException(record.exc_info)

		# Scout id / name passed through `extra={"extra_fields": {...}}`
		if hasattr(record, "extra_fields"):
			log_data.update(record.extra_fields)

		if record.module:
			log_data["module"] = record.module
		if record.funcName:
			log_data["function"] = record.funcName
		if record.lineno:
			log_data["line"] = record.lineno

		return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO") -> None:
	"""
	Configure application-wide logging to use structured JSON output to stdout.

	Args:
		level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

	Note:
		If PYTHONDEBUG is set, this function only adjusts the level of the
		firelookout loggers so an interactive logging setup is preserved.
	"""
	log_level = getattr(logging, level.upper(), logging.INFO)

	is_debug_mode = os.getenv("PYTHONDEBUG", "").lower() in ("1", "true")
	if is_debug_mode:
		logging.getLogger("firelookout").setLevel(log_level)
		return

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)
	root_logger.handlers.clear()

	# stdout, not stderr: collectors treat stderr as errors
	stdout_handler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(log_level)
	stdout_handler.setFormatter(JSONFormatter())
	root_logger.addHandler(stdout_handler)

	# Noisy libraries
	logging.getLogger("httpx").setLevel(logging.WARNING)
	logging.getLogger("httpcore").setLevel(logging.WARNING)
	logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger instance with the given name.

	Args:
		name: Logger name (typically __name__)

	Returns:
		Logger instance
	"""
	return logging.getLogger(name)
