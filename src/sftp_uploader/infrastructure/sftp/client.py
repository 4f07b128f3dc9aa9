"""SFTP session handle with single-buffer upload.

``SFTPClient`` owns one SSH transport and one file-transfer session. Its only
file operation is ``upload_file``, which writes an in-memory byte buffer to a
remote path in a single create/write/close sequence.
"""

import logging
import time
from typing import Any, Optional

from sftp_uploader.domain.errors import (
    CloseError,
    CreateError,
    SessionError,
    SFTPError,
    WriteError,
)
from sftp_uploader.domain.ports import Payload, RemoteFile, SFTPSessionPort
from sftp_uploader.observability.metrics import (
    upload_bytes_total,
    upload_duration_seconds,
    uploads_total,
)
from sftp_uploader.observability.transfer_id import (
    generate_transfer_id,
    set_transfer_id,
    transfer_id_var,
)

logger = logging.getLogger(__name__)

_UPLOAD_STATUS = {
    CreateError: "create_error",
    WriteError: "write_error",
    CloseError: "close_error",
}


class SFTPClient:
    """Open SFTP session handle.

    Instances are normally obtained from ``connect()``. The handle must be
    released exactly once with ``close()`` (or by leaving a ``with`` block);
    further ``close()`` calls are no-ops.

    Example:
        client = connect("tester", "password", "127.0.0.1", 22)
        try:
            client.upload_file(b"This is a test file content.", "test.txt")
        finally:
            client.close()
    """

    def __init__(self, session: SFTPSessionPort, transport: Optional[Any] = None):
        """Initialize the handle.

        Args:
            session: Negotiated file-transfer session
            transport: SSH transport the session runs over, closed together with it
        """
        self._session = session
        self._transport = transport
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_connected(self) -> None:
        """Ensure the session has not been released.

        Raises:
            SessionError: If close() was already called
        """
        if self._closed:
            raise SessionError("SFTP session is closed")

    def upload_file(self, data: Payload, remote_path: str) -> None:
        """Write ``data`` to ``remote_path``, creating or truncating it.

        The remote handle is released on every exit path once it was created.
        If both the write and the release fail, the WriteError is raised and
        the CloseError is attached to it as ``close_error``.

        Args:
            data: Full file content
            remote_path: Destination path on the server

        Raises:
            CreateError: Remote file could not be created; nothing was written
            WriteError: Write failed or was short
            CloseError: Write succeeded but the handle could not be released
            SessionError: The handle is closed
        """
        self._ensure_connected()
        payload = bytes(data)

        token = set_transfer_id(generate_transfer_id())
        started = time.monotonic()
        try:
            logger.info(
                f"Uploading {len(payload)} bytes to {remote_path}",
                extra={"remote_path": remote_path},
            )
            self._upload(payload, remote_path)
        except SFTPError as e:
            uploads_total.labels(status=_UPLOAD_STATUS.get(type(e), "error")).inc()
            logger.error(f"Upload to {remote_path} failed: {e}", extra={"remote_path": remote_path})
            raise
        else:
            uploads_total.labels(status="success").inc()
            upload_bytes_total.inc(len(payload))
            logger.info(f"Successfully uploaded file: {remote_path}", extra={"remote_path": remote_path})
        finally:
            upload_duration_seconds.observe(time.monotonic() - started)
            transfer_id_var.reset(token)

    def _upload(self, payload: bytes, remote_path: str) -> None:
        remote_file = self._create(remote_path)

        try:
            self._write(remote_file, payload, remote_path)
        except WriteError as write_error:
            self._release_after_failure(remote_file, remote_path, write_error)
            raise
        except BaseException:
            self._release_after_failure(remote_file, remote_path, None)
            raise

        self._release(remote_file, remote_path)

    def _create(self, remote_path: str) -> RemoteFile:
        try:
            return self._session.create(remote_path)
        except Exception as e:
            raise CreateError(f"failed to create remote file {remote_path}: {e}") from e

    def _write(self, remote_file: RemoteFile, payload: bytes, remote_path: str) -> None:
        try:
            written = remote_file.write(payload)
        except Exception as e:
            raise WriteError(f"failed to write remote file {remote_path}: {e}") from e

        # paramiko's SFTPFile.write returns None after writing everything
        if written is not None and written != len(payload):
            raise WriteError(
                f"short write to {remote_path}: {written} of {len(payload)} bytes"
            )
        logger.debug(f"Wrote {len(payload)} bytes to {remote_path}")

    def _release(self, remote_file: RemoteFile, remote_path: str) -> None:
        try:
            remote_file.close()
        except Exception as e:
            raise CloseError(f"failed to close remote file {remote_path}: {e}") from e

    def _release_after_failure(
        self,
        remote_file: RemoteFile,
        remote_path: str,
        write_error: Optional[WriteError],
    ) -> None:
        try:
            self._release(remote_file, remote_path)
        except CloseError as close_error:
            logger.warning(
                f"Releasing {remote_path} after a failed write also failed: {close_error}",
                extra={"remote_path": remote_path},
            )
            if write_error is not None:
                write_error.close_error = close_error

    def close(self) -> None:
        """Release the file-transfer session and its SSH transport.

        Raises:
            CloseError: If the session or the transport failed to close
        """
        if self._closed:
            logger.debug("SFTP session already closed")
            return
        self._closed = True

        session_error: Optional[Exception] = None
        try:
            self._session.close()
        except Exception as e:
            session_error = e

        if self._transport is not None:
            try:
                self._transport.close()
            except Exception as e:
                if session_error is None:
                    raise CloseError(f"failed to close SSH transport: {e}") from e
                logger.warning(f"Failed to close SSH transport after session close failure: {e}")

        if session_error is not None:
            raise CloseError(f"failed to close SFTP session: {session_error}") from session_error

        logger.info("SFTP connection closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - auto-close.

        An exception leaving the block is never replaced by a close failure.
        """
        if exc_type is None:
            self.close()
            return False

        try:
            self.close()
        except CloseError as close_error:
            logger.warning(f"Closing SFTP session after a failed operation also failed: {close_error}")
            if isinstance(exc_val, WriteError) and exc_val.close_error is None:
                exc_val.close_error = close_error
        return False
