"""Talking head widget for Textual TUI."""

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from ..talking_head import format_head


class TalkingHeadWidget(Widget):
    """ASCII character saying the current utterance or status."""

    DEFAULT_CSS = """
    TalkingHeadWidget {
        height: auto;
        border: round $accent;
        padding: 0 1;
    }
    """

    # Reactive attributes - changes trigger re-render
    utterance: reactive[str] = reactive("")
    is_error: reactive[bool] = reactive(False)

    def __init__(
        self,
        character: str = "bender",
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.character = character

    def say(self, message: str, is_error: bool = False) -> None:
        self.utterance = message
        self.is_error = is_error

    def render(self) -> Text:
        # Leave room for the border, the padding and the bubble edges
        width = self.size.width - 8 if self.size.width > 16 else 40
        return format_head(self.utterance, self.character, width=width, is_error=self.is_error)
