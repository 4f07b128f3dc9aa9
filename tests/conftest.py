"""Shared pytest fixtures for the SFTP uploader tests.

Provides:
- An in-memory file-transfer session (the test double for SFTPSessionPort)
- An SFTPClient handle wired to that session and a mock transport
- Mock remote file handles for create/write/close failure scenarios
"""

from unittest.mock import Mock

import pytest

from sftp_uploader.infrastructure.sftp import InMemorySFTPSession, SFTPClient


@pytest.fixture
def memory_session():
    """Fresh in-memory SFTP session."""
    return InMemorySFTPSession()


@pytest.fixture
def transport():
    """Mock SSH transport."""
    return Mock(name="transport")


@pytest.fixture
def client(memory_session, transport):
    """SFTPClient backed by the in-memory session."""
    return SFTPClient(memory_session, transport)


@pytest.fixture
def mock_remote_file():
    """Remote file handle whose write reports a full write."""
    remote_file = Mock(name="remote_file")
    remote_file.write.side_effect = lambda data: len(data)
    remote_file.close.return_value = None
    return remote_file


@pytest.fixture
def mock_session(mock_remote_file):
    """Session port mock returning mock_remote_file from create()."""
    session = Mock(name="session")
    session.create.return_value = mock_remote_file
    return session
