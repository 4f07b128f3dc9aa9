"""In-memory SFTPSessionPort used as a test double.

Remote files live in a dict keyed by path. Failures can be injected per
stage (create, write, close) and every call is counted, which lets tests
check that each created handle is released exactly once.
"""

from typing import Dict, List, Optional

from sftp_uploader.domain.ports import SFTPSessionPort


class InMemoryRemoteFile:
    """Remote file handle that commits its buffer to the session on close."""

    def __init__(self, session: "InMemorySFTPSession", path: str):
        self._session = session
        self._path = path
        self._buffer = bytearray()
        self.closed = False

    def write(self, data: bytes) -> int:
        self._session.write_calls += 1
        if self._session.write_error is not None:
            raise self._session.write_error
        if self.closed:
            raise ValueError(f"I/O operation on closed remote file: {self._path}")
        self._buffer.extend(data)
        if self._session.short_write is not None:
            return min(self._session.short_write, len(data))
        return len(data)

    def close(self) -> None:
        self._session.close_calls += 1
        if self._session.close_error is not None:
            raise self._session.close_error
        if not self.closed:
            self._session.files[self._path] = bytes(self._buffer)
            self.closed = True


class InMemorySFTPSession(SFTPSessionPort):
    """Dict-backed file-transfer session.

    Attributes:
        files: Committed remote files (path -> content)
        create_error: Raised by ``create`` when set
        write_error: Raised by ``RemoteFile.write`` when set
        close_error: Raised by ``RemoteFile.close`` when set
        short_write: When set, ``write`` reports at most this many bytes
        created_paths: Paths passed to ``create``, in order
    """

    def __init__(
        self,
        create_error: Optional[Exception] = None,
        write_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
        short_write: Optional[int] = None,
    ):
        self.files: Dict[str, bytes] = {}
        self.create_error = create_error
        self.write_error = write_error
        self.close_error = close_error
        self.short_write = short_write

        self.created_paths: List[str] = []
        self.create_calls = 0
        self.write_calls = 0
        self.close_calls = 0
        self.session_close_calls = 0

    def create(self, path: str) -> InMemoryRemoteFile:
        self.create_calls += 1
        if self.create_error is not None:
            raise self.create_error
        self.created_paths.append(path)
        # Truncation: the previous content disappears as soon as the file is opened
        self.files[path] = b""
        return InMemoryRemoteFile(self, path)

    def read(self, path: str) -> bytes:
        """Return the committed content of ``path``.

        Raises:
            FileNotFoundError: If nothing was ever created at ``path``
        """
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None

    def close(self) -> None:
        self.session_close_calls += 1

    @property
    def closed(self) -> bool:
        return self.session_close_calls > 0
