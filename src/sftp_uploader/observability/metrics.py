"""Prometheus metrics for SFTP connections and uploads."""

from prometheus_client import Counter, Histogram

connections_total = Counter(
    "sftp_uploader_connections_total",
    "Total SFTP connection attempts",
    ["status"]  # success|dial_error|session_error
)

uploads_total = Counter(
    "sftp_uploader_uploads_total",
    "Total upload attempts",
    ["status"]  # success|create_error|write_error|close_error
)

upload_bytes_total = Counter(
    "sftp_uploader_upload_bytes_total",
    "Total bytes successfully uploaded"
)

upload_duration_seconds = Histogram(
    "sftp_uploader_upload_duration_seconds",
    "Time spent on a single upload (create, write, close) in seconds",
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]
)
