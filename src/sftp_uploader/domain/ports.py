"""SFTP ports - abstract seams between the uploader and the transport library.

The connector depends on two injectable callables (``DialFunc`` and
``SessionFactory``) and the uploader depends on ``SFTPSessionPort``. The
paramiko-backed adapters and the in-memory test double both implement them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Union

Payload = Union[bytes, bytearray, memoryview]


@dataclass
class SSHAuthConfig:
    """Authentication settings handed to the dial function.

    Attributes:
        username: SSH username
        password: Plaintext password (the only supported credential)
        verify_host_key: Always False; unknown host keys are accepted
        timeout: TCP connect timeout in seconds (None disables it)
    """
    username: str
    password: str
    verify_host_key: bool = False
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"SSHAuthConfig(username={self.username!r}, password='***', "
            f"verify_host_key={self.verify_host_key}, timeout={self.timeout})"
        )


class RemoteFile(Protocol):
    """Open handle to a file on the remote system."""

    def write(self, data: bytes) -> Optional[int]:
        ...

    def close(self) -> None:
        ...


class SFTPSessionPort(ABC):
    """Port interface for a negotiated file-transfer session."""

    @abstractmethod
    def create(self, path: str) -> RemoteFile:
        """Create (or truncate) the remote file at ``path`` for writing.

        Args:
            path: Remote file path

        Returns:
            RemoteFile: Writable handle; the caller must close it
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the file-transfer session."""
        pass


# dial(network, address, auth_config) -> transport
DialFunc = Callable[[str, str, SSHAuthConfig], Any]

# new_session(transport) -> session
SessionFactory = Callable[[Any], SFTPSessionPort]
