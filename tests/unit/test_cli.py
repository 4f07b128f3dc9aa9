"""Unit tests for the sftp-upload command line entry point."""

import logging
from unittest.mock import Mock, patch

import pytest

from sftp_uploader import cli
from sftp_uploader.config import Settings
from sftp_uploader.domain.errors import DialError
from sftp_uploader.infrastructure.sftp import InMemorySFTPSession, SFTPClient


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        SFTP_HOST="10.0.0.5",
        SFTP_PORT=2222,
        SFTP_USERNAME="env-user",
        SFTP_PASSWORD="env-pass",
        LOG_LEVEL="WARNING",
        LOG_JSON=False,
    )


@pytest.fixture
def memory_session():
    return InMemorySFTPSession()


@pytest.fixture
def mock_connect(memory_session):
    with patch.object(cli, "connect", return_value=SFTPClient(memory_session)) as mocked:
        yield mocked


class TestCli:
    """Test argument handling and exit codes."""

    def test_default_payload(self, settings, memory_session, mock_connect, capsys):
        """Test upload of the demo content with connection settings from the environment"""
        exit_code = cli.main(["test.txt"], settings=settings)

        assert exit_code == 0
        assert memory_session.read("test.txt") == b"This is a test file content."
        mock_connect.assert_called_once_with("env-user", "env-pass", "10.0.0.5", 2222, timeout=None)
        assert "File uploaded successfully" in capsys.readouterr().out
        assert memory_session.closed

    def test_data_option(self, settings, memory_session, mock_connect):
        """Test --data uploads the UTF-8 text"""
        assert cli.main(["notes.txt", "--data", "grüße"], settings=settings) == 0

        assert memory_session.read("notes.txt") == "grüße".encode("utf-8")

    def test_file_option(self, settings, memory_session, mock_connect, tmp_path):
        """Test --file uploads the local file content"""
        local = tmp_path / "report.csv"
        local.write_bytes(b"a,b\n1,2\n")

        assert cli.main(["/upload/report.csv", "--file", str(local)], settings=settings) == 0

        assert memory_session.read("/upload/report.csv") == b"a,b\n1,2\n"

    def test_command_line_overrides_settings(self, settings, mock_connect):
        """Test connection options on the command line win over settings"""
        cli.main(
            ["x.txt", "--host", "h", "--port", "23", "--username", "u", "--password", "p"],
            settings=settings,
        )

        mock_connect.assert_called_once_with("u", "p", "h", 23, timeout=None)

    def test_empty_password_overrides_settings(self, settings, mock_connect):
        """Test an explicit empty password is passed through instead of the setting"""
        cli.main(["x.txt", "--password", ""], settings=settings)

        mock_connect.assert_called_once_with("env-user", "", "10.0.0.5", 2222, timeout=None)

    def test_missing_local_file(self, settings, mock_connect, tmp_path, capsys):
        """Test unreadable --file exits with 1 before connecting"""
        exit_code = cli.main(["x.txt", "--file", str(tmp_path / "nope")], settings=settings)

        assert exit_code == 1
        assert "ERROR: Cannot read" in capsys.readouterr().out
        mock_connect.assert_not_called()

    def test_connect_failure(self, settings, capsys):
        """Test connection errors exit with 1"""
        with patch.object(cli, "connect", side_effect=DialError("failed to dial SSH: refused")):
            exit_code = cli.main(["x.txt"], settings=settings)

        assert exit_code == 1
        assert "Error connecting to SFTP server" in capsys.readouterr().out

    def test_upload_failure(self, settings, capsys):
        """Test upload errors exit with 1 and the handle is still released"""
        session = InMemorySFTPSession(create_error=PermissionError("denied"))
        with patch.object(cli, "connect", return_value=SFTPClient(session)):
            exit_code = cli.main(["x.txt"], settings=settings)

        assert exit_code == 1
        assert "Error uploading file" in capsys.readouterr().out
        assert session.closed

    def test_write_failure_reported_when_close_also_fails(self, settings, capsys):
        """Test the printed error is the write failure, not the later close failure"""
        transport = Mock()
        transport.close.side_effect = OSError("socket reset")
        client = SFTPClient(InMemorySFTPSession(write_error=OSError("disk full")), transport)
        with patch.object(cli, "connect", return_value=client):
            exit_code = cli.main(["x.txt"], settings=settings)

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "ERROR: Error uploading file: failed to write remote file x.txt: disk full" in out
