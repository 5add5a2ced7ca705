"""
Enumerations for cowchat using Python 3.11+ StrEnum.

This module defines string-based enumerations for the constants shared by
the state machine, the HTTP clients and the presentation layer.
"""

from enum import StrEnum


class Role(StrEnum):
    """Speaker role of a transcript entry.

    Attributes:
        USER: Text typed by the local user
        AGENT: Reply received from the remote agent
        SYSTEM: Notes generated by the client itself
    """
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"


class Phase(StrEnum):
    """Tag of the connection variant.

    Attributes:
        DISCOVERING: Directory lookup in flight
        SELECTING: User is choosing among several active agents
        CONNECTED: Chatting with one agent
        FAILED: Discovery failed; no retry is offered
    """
    DISCOVERING = "discovering"
    SELECTING = "selecting"
    CONNECTED = "connected"
    FAILED = "failed"


class InputKind(StrEnum):
    """Closed vocabulary of terminal input events.

    Attributes:
        QUIT: Leave the application (accepted in every state)
        MOVE_UP: Move the selection cursor up
        MOVE_DOWN: Move the selection cursor down
        CONFIRM: Confirm the selection or submit the compose buffer
        BACKSPACE: Remove one trailing character
        SPACE: Append a single space
        TEXT: Append printable character(s)
    """
    QUIT = "quit"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    CONFIRM = "confirm"
    BACKSPACE = "backspace"
    SPACE = "space"
    TEXT = "text"


class AgentStatus(StrEnum):
    """Agent status values reported by the directory endpoint.

    Only ACTIVE agents are offered; any other string is excluded.
    """
    ACTIVE = "active"
    INACTIVE = "inactive"
