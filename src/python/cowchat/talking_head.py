"""ASCII talking-head renderer for the TUI.

Draws a speech bubble around the current utterance with a character below
it, cowsay style.
"""

import textwrap

from rich.text import Text

CHARACTERS = {
    "bender": r"""
         \
          \
             ( )
              H
              H
             _H_
          .-'-.-'-.
         /         \
        |           |
        |   .-------'._
        |  / /  '.' '. \
        |  \ \ @   @ / /
        |   '---------'
        |    _______|
        |  .'-+-+-+|
        |  '.-+-+-+|
        |    ====== |
        '-.__   __.-'
             ~~~
""",
    "cow": r"""
        \   ^__^
         \  (oo)\_______
            (__)\       )\/\
                ||----w |
                ||     ||
""",
}

COLORS = {
    "bubble": "bright_white",
    "character": "cyan",
    "error": "red",
}


def render_bubble(message: str, width: int = 40) -> list[str]:
    """Wrap message into a speech bubble.

    Args:
        message: Text to say; newlines are kept as paragraph breaks
        width: Maximum text width inside the bubble

    Returns:
        Bubble lines, top border first
    """
    width = max(width, 4)
    lines: list[str] = []
    for paragraph in message.splitlines() or [""]:
        lines.extend(textwrap.wrap(paragraph, width=width) or [""])

    inner = max(len(line) for line in lines)
    top = " " + "_" * (inner + 2)
    bottom = " " + "-" * (inner + 2)

    if len(lines) == 1:
        body = [f"< {lines[0].ljust(inner)} >"]
    else:
        body = []
        for i, line in enumerate(lines):
            if i == 0:
                left, right = "/", "\\"
            elif i == len(lines) - 1:
                left, right = "\\", "/"
            else:
                left, right = "|", "|"
            body.append(f"{left} {line.ljust(inner)} {right}")

    return [top, *body, bottom]


def format_head(message: str, character: str = "bender", width: int = 40, is_error: bool = False) -> Text:
    """Render the talking head as colored Rich Text."""
    bubble = render_bubble(message, width)
    art = CHARACTERS.get(character, CHARACTERS["bender"]).strip("\n")

    result = Text()
    bubble_style = COLORS["error"] if is_error else COLORS["bubble"]
    result.append("\n".join(bubble) + "\n", style=bubble_style)
    result.append(art, style=COLORS["character"])
    return result
