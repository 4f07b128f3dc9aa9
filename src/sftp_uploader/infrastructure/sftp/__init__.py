"""SFTP infrastructure module - connection setup and single-file upload."""

from .client import SFTPClient
from .connector import connect, open_sftp_session, paramiko_dial
from .memory import InMemoryRemoteFile, InMemorySFTPSession
from .paramiko_session import ParamikoSFTPSession

__all__ = [
    "SFTPClient",
    "connect",
    "paramiko_dial",
    "open_sftp_session",
    "ParamikoSFTPSession",
    "InMemorySFTPSession",
    "InMemoryRemoteFile",
]
