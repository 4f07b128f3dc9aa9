"""Transfer ID management for log correlation.

Every upload gets its own transfer ID so that the log lines of one
create/write/close sequence can be grouped together.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Optional

# Context variable for transfer_id
transfer_id_var: ContextVar[Optional[str]] = ContextVar("transfer_id", default=None)


def generate_transfer_id() -> str:
    """Generate a new unique transfer ID.

    Returns:
        str: UUID v4 transfer ID
    """
    return str(uuid.uuid4())


def get_transfer_id() -> str:
    """Get current transfer ID from context.

    Returns:
        str: Current transfer ID or "no-transfer-id" if not set
    """
    return transfer_id_var.get() or "no-transfer-id"


def set_transfer_id(transfer_id: Optional[str]) -> Token:
    """Set transfer ID in current context.

    Args:
        transfer_id: Transfer ID to set

    Returns:
        Token: Pass to ``transfer_id_var.reset()`` to restore the previous value
    """
    return transfer_id_var.set(transfer_id)
