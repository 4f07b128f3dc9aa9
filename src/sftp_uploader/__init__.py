"""Minimal SFTP uploader built on paramiko.

Opens an SSH session with password authentication, negotiates SFTP on it,
and writes one in-memory byte buffer to a remote path.
"""

from .domain.errors import (
    CloseError,
    CreateError,
    DialError,
    SessionError,
    SFTPError,
    WriteError,
)
from .domain.ports import SFTPSessionPort, SSHAuthConfig
from .infrastructure.sftp import SFTPClient, connect

__version__ = "0.1.0"

__all__ = [
    "connect",
    "SFTPClient",
    "SFTPSessionPort",
    "SSHAuthConfig",
    "SFTPError",
    "DialError",
    "SessionError",
    "CreateError",
    "WriteError",
    "CloseError",
]
