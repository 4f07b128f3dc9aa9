"""SSH dial and SFTP session setup.

``connect`` performs an SSH dial through an injectable dial function, then
negotiates the SFTP subsystem on the resulting transport through an
injectable session factory. The defaults use paramiko; tests pass fakes.
"""

import logging
from typing import Any, Optional, Tuple

import paramiko

from sftp_uploader.domain.errors import DialError, SessionError
from sftp_uploader.domain.ports import (
    DialFunc,
    SessionFactory,
    SFTPSessionPort,
    SSHAuthConfig,
)
from sftp_uploader.observability.metrics import connections_total

from .client import SFTPClient
from .paramiko_session import ParamikoSFTPSession

logger = logging.getLogger(__name__)


def split_address(address: str) -> Tuple[str, int]:
    """Split ``host:port`` (or ``[v6-host]:port``) into its parts.

    Raises:
        ValueError: If the port is missing or not an integer
    """
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"missing port in address: {address}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"invalid port in address: {address}") from None


def paramiko_dial(network: str, address: str, config: SSHAuthConfig) -> paramiko.SSHClient:
    """Open an authenticated SSH connection with paramiko.

    Host keys are not verified: unknown keys are accepted and added to the
    in-memory key set of this client only.

    Args:
        network: Must be "tcp"
        address: "host:port"
        config: Credentials and connect timeout

    Returns:
        paramiko.SSHClient: Connected client
    """
    if network != "tcp":
        raise ValueError(f"unsupported network: {network}")
    if config.verify_host_key:
        raise ValueError("host key verification is not supported")
    host, port = split_address(address)

    ssh_client = paramiko.SSHClient()
    ssh_client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
    try:
        ssh_client.connect(
            hostname=host,
            port=port,
            username=config.username,
            password=config.password,
            look_for_keys=False,
            allow_agent=False,
            timeout=config.timeout,
        )
    except Exception:
        ssh_client.close()
        raise
    return ssh_client


def open_sftp_session(transport: Any) -> SFTPSessionPort:
    """Negotiate the SFTP subsystem on an SSH connection."""
    return ParamikoSFTPSession(transport.open_sftp())


def connect(
    username: str,
    password: str,
    host: str,
    port: int,
    dial: DialFunc = paramiko_dial,
    new_session: SessionFactory = open_sftp_session,
    timeout: Optional[float] = None,
) -> SFTPClient:
    """Dial ``host:port`` and open an SFTP session on it.

    Args:
        username: SSH username
        password: SSH password
        host: Server hostname or IP address
        port: Server port
        dial: Transport dial function
        new_session: Builds the file-transfer session from the transport
        timeout: TCP connect timeout in seconds (None disables it)

    Returns:
        SFTPClient: Open session handle, owned by the caller

    Raises:
        DialError: If the SSH dial or authentication fails
        SessionError: If the SFTP subsystem cannot be negotiated
    """
    config = SSHAuthConfig(
        username=username,
        password=password,
        verify_host_key=False,
        timeout=timeout,
    )
    bracket = ":" in host and not host.startswith("[")
    address = f"[{host}]:{port}" if bracket else f"{host}:{port}"

    logger.info(f"Connecting to SFTP server {address}", extra={"host": host})
    try:
        transport = dial("tcp", address, config)
    except Exception as e:
        connections_total.labels(status="dial_error").inc()
        raise DialError(f"failed to dial SSH: {e}") from e

    try:
        session = new_session(transport)
    except Exception as e:
        connections_total.labels(status="session_error").inc()
        _close_quietly(transport)
        raise SessionError(f"failed to create SFTP client: {e}") from e

    connections_total.labels(status="success").inc()
    logger.info("SFTP connection established", extra={"host": host})
    return SFTPClient(session, transport)


def _close_quietly(transport: Any) -> None:
    try:
        transport.close()
    except Exception as e:
        logger.warning(f"Failed to close SSH transport after session setup failure: {e}")
