"""Application state for the chat client.

All types here are frozen dataclasses. The state machine never mutates a
state in place; it builds the next one with `dataclasses.replace`.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from enums import AgentStatus, Phase, Role


@dataclass(frozen=True)
class Utterance:
    """One transcript entry."""
    role: Role
    text: str


@dataclass(frozen=True)
class AgentInfo:
    """An agent as listed by the directory endpoint."""
    id: str
    name: str
    status: str = AgentStatus.ACTIVE


@dataclass(frozen=True)
class SessionIdentity:
    """User id/name pair attached to every outgoing message.

    Created once at startup and never changed for the process lifetime.
    """
    user_id: str
    user_name: str

    @classmethod
    def generate(cls, user_name: str = "User") -> "SessionIdentity":
        return cls(user_id=str(uuid.uuid4()), user_name=user_name)


# Connection variants. Exactly one of these is held by AppState.connection.

@dataclass(frozen=True)
class Discovering:
    phase = Phase.DISCOVERING


@dataclass(frozen=True)
class Selecting:
    """Several active agents were found; the user picks one.

    Attributes:
        candidates: Active agents in directory order (never empty)
        cursor: Index into candidates, clamped to [0, len-1]
    """
    candidates: tuple[AgentInfo, ...]
    cursor: int = 0
    phase = Phase.SELECTING

    def __post_init__(self):
        if not self.candidates:
            raise ValueError("Selecting requires at least one candidate agent")
        clamped = min(max(self.cursor, 0), len(self.candidates) - 1)
        object.__setattr__(self, "cursor", clamped)

    @property
    def current(self) -> AgentInfo:
        return self.candidates[self.cursor]


@dataclass(frozen=True)
class Connected:
    agent_id: str
    agent_name: str
    phase = Phase.CONNECTED


@dataclass(frozen=True)
class Failed:
    """Discovery failed. Terminal for the discovery phase."""
    reason: str
    phase = Phase.FAILED


Connection = Union[Discovering, Selecting, Connected, Failed]


@dataclass(frozen=True)
class AppState:
    """The single authoritative application state.

    Attributes:
        identity: Session identity, fixed at startup
        connection: Current connection variant
        transcript: Utterances in display order, oldest first; append-only
        compose_buffer: Text currently being typed
        pending: True exactly while one network operation is in flight
        last_error: Most recent failure message, cleared on the next success
    """
    identity: SessionIdentity
    connection: Connection = field(default_factory=Discovering)
    transcript: tuple[Utterance, ...] = ()
    compose_buffer: str = ""
    pending: bool = True
    last_error: Optional[str] = None

    @classmethod
    def initial(cls, identity: SessionIdentity) -> "AppState":
        """State at process start: discovering, with the lookup already pending."""
        return cls(identity=identity, connection=Discovering(), pending=True)

    @property
    def phase(self) -> Phase:
        return self.connection.phase

    def append(self, role: Role, text: str) -> "AppState":
        """Return a copy with one utterance appended to the transcript."""
        return replace(self, transcript=self.transcript + (Utterance(role, text),))
