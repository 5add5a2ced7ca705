"""Failures raised by the agent API clients.

Every failure is terminal for the operation that produced it and never for
the process: the caller turns it into a message for the user.
"""

from typing import Optional


class ChatClientError(Exception):
    """Base class for agent API failures."""


class TransportError(ChatClientError):
    """Connection refused, timeout or other transport-level failure."""


class ProtocolError(ChatClientError):
    """Unexpected HTTP status.

    Attributes:
        status_code: Status returned by the server
        body: Raw response body, kept for display
    """

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(ChatClientError):
    """Response body does not match the expected shape."""


class NoActiveAgents(ChatClientError):
    """Directory listed no agent with status "active"."""

    def __init__(self, message: str = "no active agents found"):
        super().__init__(message)
