"""Domain layer - SFTP ports and error kinds."""

from .errors import (
    CloseError,
    CreateError,
    DialError,
    SessionError,
    SFTPError,
    WriteError,
)
from .ports import (
    DialFunc,
    Payload,
    RemoteFile,
    SessionFactory,
    SFTPSessionPort,
    SSHAuthConfig,
)

__all__ = [
    # Errors
    "SFTPError",
    "DialError",
    "SessionError",
    "CreateError",
    "WriteError",
    "CloseError",
    # Ports
    "DialFunc",
    "Payload",
    "RemoteFile",
    "SessionFactory",
    "SFTPSessionPort",
    "SSHAuthConfig",
]
