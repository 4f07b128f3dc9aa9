"""paramiko-backed implementation of SFTPSessionPort."""

import logging

import paramiko

from sftp_uploader.domain.ports import RemoteFile, SFTPSessionPort

logger = logging.getLogger(__name__)


class ParamikoSFTPSession(SFTPSessionPort):
    """Wraps a ``paramiko.SFTPClient`` so it satisfies SFTPSessionPort.

    Args:
        sftp_client: Open SFTP client negotiated over an SSH transport
    """

    def __init__(self, sftp_client: paramiko.SFTPClient):
        self._sftp_client = sftp_client

    def create(self, path: str) -> RemoteFile:
        # "wb" maps to SFTP_FLAG_CREATE | SFTP_FLAG_TRUNC | SFTP_FLAG_WRITE
        logger.debug(f"Opening remote file for writing: {path}")
        return self._sftp_client.open(path, "wb")

    def close(self) -> None:
        self._sftp_client.close()
