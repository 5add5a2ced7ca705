"""Compose bar widget: owns keyboard focus and translates keys into input events."""

from typing import Optional

from textual.events import Key, Paste
from textual.message import Message
from textual.widgets import Static

from ..events import InputEvent

QUIT_KEYS = {"ctrl+c", "escape"}

NAMED_KEYS = {
    "up": InputEvent.up,
    "down": InputEvent.down,
    "enter": InputEvent.confirm,
    "backspace": InputEvent.backspace,
    "space": InputEvent.space,
}


def key_to_input(key: str, character: Optional[str] = None) -> Optional[InputEvent]:
    """Map a Textual key to the closed input vocabulary.

    Args:
        key: Textual key name (e.g. 'enter', 'a', 'ctrl+c')
        character: Printable character for the key, if any

    Returns:
        The InputEvent, or None for keys outside the vocabulary
    """
    if key in QUIT_KEYS:
        return InputEvent.quit()
    factory = NAMED_KEYS.get(key)
    if factory is not None:
        return factory()
    if character and character.isprintable() and not character.isspace():
        return InputEvent.chars(character)
    return None


class ComposeBar(Static):
    """Single-line prompt that shows the compose buffer.

    It never edits text itself. Every recognised key is posted as an
    InputReceived message and the app decides what happens.
    """

    DEFAULT_CSS = """
    ComposeBar {
        dock: bottom;
        height: 3;
        border: round $accent;
        padding: 0 1;
    }
    """

    can_focus = True

    class InputReceived(Message):
        """Posted for every key that maps to an input event."""
        def __init__(self, event: InputEvent) -> None:
            self.event = event
            super().__init__()

    def on_key(self, event: Key) -> None:
        translated = key_to_input(event.key, event.character)
        if translated is None:
            return
        self.post_message(self.InputReceived(translated))
        event.stop()
        event.prevent_default()

    def on_paste(self, event: Paste) -> None:
        """Pasted text arrives as one multi-character input."""
        text = " ".join(event.text.split())
        if text:
            self.post_message(self.InputReceived(InputEvent.chars(text)))
        event.stop()
