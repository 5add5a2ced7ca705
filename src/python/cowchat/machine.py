"""Interaction state machine.

`update` is a pure function of (state, event). It returns the next state and
at most one effect for the caller to run. Effects are plain descriptors; the
machine never performs I/O itself.

Network effects are only ever returned together with a state whose `pending`
flag is set, and every input that could schedule one is ignored while
`pending` is true. At most one operation is therefore outstanding and result
events arrive in the order their operations were scheduled.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from enums import InputKind, Phase, Role
from .events import (
    AgentFound,
    AgentsListed,
    DiscoveryFailed,
    Event,
    InputEvent,
    ReplyReceived,
    SendFailed,
)
from .state import AgentInfo, AppState, Connected, Failed, Selecting, SessionIdentity

logger = logging.getLogger(__name__)

NO_ACTIVE_AGENTS = "no active agents found"


@dataclass(frozen=True)
class DiscoverAgents:
    """Look up the agent directory."""


@dataclass(frozen=True)
class SendMessage:
    """Send one utterance to the connected agent."""
    agent_id: str
    text: str
    identity: SessionIdentity


@dataclass(frozen=True)
class Exit:
    """End the process."""


Effect = Union[DiscoverAgents, SendMessage, Exit]


@dataclass(frozen=True)
class Transition:
    state: AppState
    effect: Optional[Effect] = None


def start(identity: SessionIdentity) -> Transition:
    """Initial state plus the directory lookup it is already waiting on."""
    return Transition(AppState.initial(identity), DiscoverAgents())


def connected_note(agent_name: str) -> str:
    return f"Connected to agent: {agent_name}"


def _connect(state: AppState, agent: AgentInfo) -> AppState:
    logger.info("Connected to agent %s (%s)", agent.name, agent.id)
    state = replace(
        state,
        connection=Connected(agent.id, agent.name),
        pending=False,
        last_error=None,
    )
    return state.append(Role.SYSTEM, connected_note(agent.name))


def _discovery_failed(state: AppState, reason: str) -> AppState:
    logger.warning("Agent discovery failed: %s", reason)
    return replace(state, connection=Failed(reason), pending=False, last_error=reason)


def _on_agents(state: AppState, agents: tuple[AgentInfo, ...]) -> AppState:
    if not agents:
        return _discovery_failed(state, NO_ACTIVE_AGENTS)
    if len(agents) == 1:
        return _connect(state, agents[0])
    logger.info("Discovered %d active agents, waiting for selection", len(agents))
    return replace(
        state,
        connection=Selecting(candidates=tuple(agents), cursor=0),
        pending=False,
        last_error=None,
    )


def _on_selecting_input(state: AppState, event: InputEvent) -> AppState:
    selecting: Selecting = state.connection
    last = len(selecting.candidates) - 1

    if event.kind == InputKind.MOVE_UP and selecting.cursor > 0:
        return replace(state, connection=replace(selecting, cursor=selecting.cursor - 1))
    if event.kind == InputKind.MOVE_DOWN and selecting.cursor < last:
        return replace(state, connection=replace(selecting, cursor=selecting.cursor + 1))
    if event.kind == InputKind.CONFIRM:
        return _connect(state, selecting.current)
    return state


def _on_connected_input(state: AppState, event: InputEvent) -> Transition:
    if state.pending:
        # No queuing: anything typed while a send is in flight is dropped
        return Transition(state)

    buffer = state.compose_buffer
    if event.kind == InputKind.TEXT:
        return Transition(replace(state, compose_buffer=buffer + event.text))
    if event.kind == InputKind.SPACE:
        return Transition(replace(state, compose_buffer=buffer + " "))
    if event.kind == InputKind.BACKSPACE:
        return Transition(replace(state, compose_buffer=buffer[:-1]))
    if event.kind == InputKind.CONFIRM and buffer:
        connection: Connected = state.connection
        next_state = replace(state, compose_buffer="", pending=True).append(Role.USER, buffer)
        effect = SendMessage(agent_id=connection.agent_id, text=buffer, identity=state.identity)
        return Transition(next_state, effect)
    return Transition(state)


def _on_input(state: AppState, event: InputEvent) -> Transition:
    if event.kind == InputKind.QUIT:
        return Transition(state, Exit())
    if state.phase == Phase.SELECTING:
        return Transition(_on_selecting_input(state, event))
    if state.phase == Phase.CONNECTED:
        return _on_connected_input(state, event)
    # Discovering and failed accept nothing but quit
    return Transition(state)


def _on_result(state: AppState, event: Event) -> AppState:
    phase = state.phase

    if isinstance(event, (AgentFound, AgentsListed, DiscoveryFailed)):
        if phase != Phase.DISCOVERING:
            logger.warning("Ignoring %s outside discovery (phase=%s)", type(event).__name__, phase)
            return state
        if isinstance(event, AgentFound):
            return _connect(state, event.agent)
        if isinstance(event, AgentsListed):
            return _on_agents(state, event.agents)
        return _discovery_failed(state, event.reason)

    if phase != Phase.CONNECTED or not state.pending:
        logger.warning("Ignoring %s with no send in flight", type(event).__name__)
        return state

    if isinstance(event, ReplyReceived):
        state = replace(state, pending=False, last_error=None)
        return state.append(Role.AGENT, event.text)

    # SendFailed: transcript untouched, the unsent text goes back into the buffer
    logger.warning("Message send failed: %s", event.reason)
    return replace(
        state,
        pending=False,
        last_error=event.reason,
        compose_buffer=state.compose_buffer or event.text,
    )


def update(state: AppState, event: Event) -> Transition:
    """Compute the next state and optional effect for one event.

    Args:
        state: Current application state
        event: Terminal input or async operation result

    Returns:
        Transition holding the next state and at most one effect
    """
    if isinstance(event, InputEvent):
        transition = _on_input(state, event)
    else:
        transition = Transition(_on_result(state, event))

    if transition.state is not state or transition.effect is not None:
        logger.debug(
            "%s: %s -> %s effect=%s",
            type(event).__name__,
            state.phase,
            transition.state.phase,
            type(transition.effect).__name__ if transition.effect else None,
        )
    return transition
