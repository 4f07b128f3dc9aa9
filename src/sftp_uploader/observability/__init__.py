"""Observability module for the SFTP uploader.

Provides structured logging, transfer correlation and metrics.
"""

from .logging_config import configure_logging
from .metrics import (
    connections_total,
    upload_bytes_total,
    upload_duration_seconds,
    uploads_total,
)
from .transfer_id import transfer_id_var, get_transfer_id, set_transfer_id, generate_transfer_id

__all__ = [
    # Logging
    "configure_logging",
    # Metrics
    "connections_total",
    "uploads_total",
    "upload_bytes_total",
    "upload_duration_seconds",
    # Transfer ID
    "transfer_id_var",
    "get_transfer_id",
    "set_transfer_id",
    "generate_transfer_id",
]
