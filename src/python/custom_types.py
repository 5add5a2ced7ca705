"""
Type definitions for cowchat.

This module defines the TypedDict structures for configuration sections and
for the JSON bodies exchanged with the agent API.
"""

from typing import TypedDict


# Configuration TypedDict definitions
class ApiConfig(TypedDict, total=False):
    """Agent API connection settings."""
    baseUrl: str
    timeout: float


class SessionConfig(TypedDict, total=False):
    """Identity attached to outgoing messages."""
    userName: str
    source: str


class LoggingConfig(TypedDict, total=False):
    """Logging configuration section."""
    level: str
    file: str
    maxBytes: int
    backupCount: int
    console: bool
    consoleLevel: str


# Wire payloads
class MessageRequestBody(TypedDict, total=False):
    """JSON body posted to /agents/<id>/message.

    roomId is omitted entirely when the client has none.
    """
    text: str
    senderId: str
    roomId: str
    source: str
    entityId: str
    userName: str
