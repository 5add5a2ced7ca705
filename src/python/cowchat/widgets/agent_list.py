"""Agent selection list for Textual TUI."""

from rich.text import Text
from textual.widgets import Static

from ..view import CandidateRow


class AgentList(Static):
    """Shows the candidate agents with the cursor row highlighted."""

    DEFAULT_CSS = """
    AgentList {
        height: auto;
        border: round $accent;
        padding: 1;
    }
    """

    def show(self, rows: tuple[CandidateRow, ...]) -> None:
        text = Text("Select an Agent\n\n", style="bold")
        for row in rows:
            style = "bold magenta" if row.selected else ""
            text.append(row.label + "\n", style=style)
        self.update(text)
