"""Error kinds raised by the connector and the uploader.

Every error wraps its underlying cause via exception chaining, so
``err.__cause__`` is the exception raised by paramiko (or by a test double).
Nothing is retried or recovered internally.
"""

from typing import Optional


class SFTPError(Exception):
    """Base exception for SFTP operations."""
    pass


class DialError(SFTPError):
    """SSH dial failed (network unreachable, refused, authentication)."""
    pass


class SessionError(SFTPError):
    """SFTP subsystem could not be negotiated, or the handle is closed."""
    pass


class CreateError(SFTPError):
    """Remote file could not be created or truncated."""
    pass


class CloseError(SFTPError):
    """Remote file handle could not be released."""
    pass


class WriteError(SFTPError):
    """Write to the remote file failed or was short.

    When releasing the handle also failed, that failure is kept in
    ``close_error`` instead of replacing the write failure.
    """

    def __init__(self, message: str, close_error: Optional[CloseError] = None):
        super().__init__(message)
        self.close_error = close_error
