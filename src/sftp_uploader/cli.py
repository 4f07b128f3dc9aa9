"""Command line entry point: upload one buffer to an SFTP server.

Usage:
    sftp-upload test.txt
    sftp-upload /upload/report.csv --file report.csv --host sftp.example.com

Connection options not given on the command line come from the environment
(see ``sftp_uploader.config.Settings``).
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sftp_uploader.config import Settings, get_settings
from sftp_uploader.domain.errors import SFTPError
from sftp_uploader.infrastructure.sftp import connect
from sftp_uploader.observability.logging_config import configure_logging

logger = logging.getLogger(__name__)

DEFAULT_CONTENT = b"This is a test file content."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sftp-upload",
        description="Write a single file to an SFTP server.",
    )
    parser.add_argument("remote_path", help="Destination path on the server")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=Path, help="Local file whose content is uploaded")
    source.add_argument("--data", help="Literal text to upload (UTF-8)")

    parser.add_argument("--host", help="Server hostname (env SFTP_HOST)")
    parser.add_argument("--port", type=int, help="Server port (env SFTP_PORT)")
    parser.add_argument("--username", help="SSH username (env SFTP_USERNAME)")
    parser.add_argument("--password", help="SSH password (env SFTP_PASSWORD)")
    return parser


def _option(value, default):
    # an explicit empty string on the command line still overrides the setting
    return value if value is not None else default


def read_payload(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        return args.file.read_bytes()
    if args.data is not None:
        return args.data.encode("utf-8")
    return DEFAULT_CONTENT


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    """Run the upload and return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    try:
        payload = read_payload(args)
    except OSError as e:
        print(f"ERROR: Cannot read {args.file}: {e}")
        return 1

    try:
        client = connect(
            _option(args.username, settings.SFTP_USERNAME),
            _option(args.password, settings.SFTP_PASSWORD),
            _option(args.host, settings.SFTP_HOST),
            _option(args.port, settings.SFTP_PORT),
            timeout=settings.SFTP_TIMEOUT,
        )
    except SFTPError as e:
        print(f"ERROR: Error connecting to SFTP server: {e}")
        return 1

    try:
        with client:
            client.upload_file(payload, args.remote_path)
    except SFTPError as e:
        print(f"ERROR: Error uploading file: {e}")
        return 1

    print("File uploaded successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
