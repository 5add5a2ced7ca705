"""HTTP clients for the agent API.

Both clients are stateless request/response wrappers; every failure is
raised as a ChatClientError subclass.
"""

from .base import AgentApiClient
from .directory import AgentDirectoryClient
from .errors import ChatClientError, DecodeError, NoActiveAgents, ProtocolError, TransportError
from .messages import MessageClient

__all__ = [
    "AgentApiClient",
    "AgentDirectoryClient",
    "MessageClient",
    "ChatClientError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "NoActiveAgents",
]
