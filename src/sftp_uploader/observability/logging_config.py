"""Structured JSON logging configuration.

Provides centralized logging setup with transfer ID correlation and JSON formatting.
"""

import logging
import json
import sys
from datetime import datetime, timezone

from .transfer_id import get_transfer_id


class TransferIDFilter(logging.Filter):
    """Add transfer_id to all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add transfer_id attribute to log record.

        Args:
            record: Log record to enhance

        Returns:
            bool: Always True (don't filter out records)
        """
        record.transfer_id = get_transfer_id()
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string.

        Args:
            record: Log record to format

        Returns:
            str: JSON-formatted log message
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "transfer_id": getattr(record, "transfer_id", "no-transfer-id"),
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["error"] = str(record.exc_info[1])
            log_data["traceback"] = self.formatException(record.exc_info)

        if hasattr(record, "remote_path"):
            log_data["remote_path"] = record.remote_path
        if hasattr(record, "host"):
            log_data["host"] = record.host

        return json.dumps(log_data)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, use JSON formatter; otherwise use simple format
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(transfer_id)s - %(module)s.%(funcName)s - %(message)s'
        )

    handler.setFormatter(formatter)
    handler.addFilter(TransferIDFilter())
    root_logger.addHandler(handler)

    # paramiko logs every channel event at INFO
    logging.getLogger("paramiko").setLevel(logging.WARNING)
