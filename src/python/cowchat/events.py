"""Events consumed by the state machine.

Two families share one queue: terminal input (`InputEvent`) and the results
of the asynchronous operations the machine schedules.
"""

from dataclasses import dataclass
from typing import Union

from enums import InputKind
from .state import AgentInfo


@dataclass(frozen=True)
class InputEvent:
    """One item of the closed input vocabulary.

    `text` is only meaningful for InputKind.TEXT.
    """
    kind: InputKind
    text: str = ""

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(InputKind.QUIT)

    @classmethod
    def up(cls) -> "InputEvent":
        return cls(InputKind.MOVE_UP)

    @classmethod
    def down(cls) -> "InputEvent":
        return cls(InputKind.MOVE_DOWN)

    @classmethod
    def confirm(cls) -> "InputEvent":
        return cls(InputKind.CONFIRM)

    @classmethod
    def backspace(cls) -> "InputEvent":
        return cls(InputKind.BACKSPACE)

    @classmethod
    def space(cls) -> "InputEvent":
        return cls(InputKind.SPACE)

    @classmethod
    def chars(cls, text: str) -> "InputEvent":
        return cls(InputKind.TEXT, text)


@dataclass(frozen=True)
class AgentFound:
    """Discovery found exactly one active agent."""
    agent: AgentInfo


@dataclass(frozen=True)
class AgentsListed:
    """Discovery found several active agents, in directory order."""
    agents: tuple[AgentInfo, ...]


@dataclass(frozen=True)
class DiscoveryFailed:
    reason: str


@dataclass(frozen=True)
class ReplyReceived:
    text: str


@dataclass(frozen=True)
class SendFailed:
    """A message send failed.

    Attributes:
        reason: Human-readable failure, including the raw body for bad statuses
        text: The utterance that was being sent
    """
    reason: str
    text: str = ""


ResultEvent = Union[AgentFound, AgentsListed, DiscoveryFailed, ReplyReceived, SendFailed]
Event = Union[InputEvent, ResultEvent]
