"""Read-only view model handed to the presentation layer.

Nothing here mutates state; widgets render a `Snapshot` and nothing else.
"""

from dataclasses import dataclass
from typing import Optional

from enums import Phase, Role
from .state import AppState, Selecting, Utterance

PREFIXES = {
    Role.USER: "You: ",
    Role.AGENT: "Agent: ",
    Role.SYSTEM: "",
}

LOADING = "Loading..."
CONNECTING = "Connecting to agent API..."
READY = "Ready to chat!"
WAITING = "Waiting for first response..."

CHAT_HELP = "Press Ctrl+C or Esc to exit"
SELECT_HELP = "Use ↑/↓ to navigate, Enter to select, Ctrl+C to quit"


@dataclass(frozen=True)
class CandidateRow:
    label: str
    selected: bool


@dataclass(frozen=True)
class Snapshot:
    """Everything the presentation layer needs for one frame.

    Attributes:
        phase: Current connection phase
        transcript: Formatted transcript lines, oldest first
        prompt: Compose line, or the pending indicator
        head_text: What the talking head is saying
        candidates: Selection rows (empty unless selecting)
        error: Last error, if any
    """
    phase: Phase
    transcript: tuple[str, ...]
    prompt: str
    head_text: str
    candidates: tuple[CandidateRow, ...] = ()
    error: Optional[str] = None


def format_utterance(utterance: Utterance) -> str:
    return PREFIXES[utterance.role] + utterance.text


def last_agent_text(state: AppState) -> Optional[str]:
    for utterance in reversed(state.transcript):
        if utterance.role == Role.AGENT:
            return utterance.text
    return None


def head_text(state: AppState) -> str:
    """Text for the talking head, by priority: error, pending, connecting, latest reply."""
    if state.last_error:
        return f"Error: {state.last_error}"
    if state.pending:
        return LOADING
    if state.phase != Phase.CONNECTED:
        return CONNECTING
    reply = last_agent_text(state)
    if reply is not None:
        return reply
    # The connection note is always there, so only the user's own lines count
    if any(u.role == Role.USER for u in state.transcript):
        return WAITING
    return READY


def prompt_line(state: AppState) -> str:
    if state.pending:
        return "Waiting for response... " + state.compose_buffer
    return "Your message: " + state.compose_buffer + "_"


def candidate_rows(state: AppState) -> tuple[CandidateRow, ...]:
    if not isinstance(state.connection, Selecting):
        return ()
    selecting = state.connection
    rows = []
    for i, agent in enumerate(selecting.candidates):
        selected = i == selecting.cursor
        marker = "> " if selected else "  "
        rows.append(CandidateRow(label=f"{marker}{agent.name} ({agent.status})", selected=selected))
    return tuple(rows)


def snapshot(state: AppState) -> Snapshot:
    """Shape the current state into a Snapshot."""
    return Snapshot(
        phase=state.phase,
        transcript=tuple(format_utterance(u) for u in state.transcript),
        prompt=prompt_line(state),
        head_text=head_text(state),
        candidates=candidate_rows(state),
        error=state.last_error,
    )
