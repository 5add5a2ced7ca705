"""TUI Application - Textual-based terminal chat client.

A terminal client for a remote conversational agent with:
- Agent discovery and selection
- Scrolling transcript
- ASCII talking head for the current utterance

All state changes go through `cowchat.machine.update` on the Textual message
loop. Network effects run in thread workers and post their result back as
a ResultReady message, so results are serialized with keyboard input.
"""

import logging
from functools import partial
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static, TextArea

from config_manager import ConfigManager, get_config, set_config
from enums import Phase
from logging_config import setup_logging

from .events import Event, InputEvent, ResultEvent
from .machine import DiscoverAgents, Effect, Exit, SendMessage, start, update
from .operations import OperationRunner, create_runner
from .state import AppState, SessionIdentity
from .view import CHAT_HELP, SELECT_HELP, snapshot
from .widgets import AgentList, ComposeBar, TalkingHeadWidget

logger = logging.getLogger(__name__)


class ChatApp(App):
    """Main Textual TUI application for cowchat."""

    TITLE = "cowchat"

    CSS = """
    .hidden {
        display: none;
    }
    #help {
        dock: bottom;
        height: 1;
        color: $text-muted;
    }
    #transcript {
        height: 1fr;
        border: round $accent;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "request_quit", "Quit", show=False, priority=True),
        Binding("escape", "request_quit", "Quit", show=False, priority=True),
    ]

    class ResultReady(Message):
        """Posted from a worker thread when a network effect completes."""
        def __init__(self, event: ResultEvent) -> None:
            self.event = event
            super().__init__()

    def __init__(self, runner: OperationRunner, identity: SessionIdentity, character: str = "bender"):
        super().__init__()
        self.runner = runner
        self.character = character
        transition = start(identity)
        self.chat_state: AppState = transition.state
        self._startup_effect: Optional[Effect] = transition.effect

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield AgentList(id="agents", classes="hidden")
        transcript = TextArea(id="transcript", read_only=True, soft_wrap=True)
        transcript.can_focus = False
        yield transcript
        yield TalkingHeadWidget(character=self.character, id="head")
        yield ComposeBar(id="compose")
        yield Static(CHAT_HELP, id="help")

    def on_mount(self) -> None:
        self._render_state()
        self.query_one("#compose", ComposeBar).focus()
        if self._startup_effect is not None:
            effect, self._startup_effect = self._startup_effect, None
            self._run_effect(effect)

    # ------------------------------------------------------------------
    # Event loop plumbing
    # ------------------------------------------------------------------

    def process_event(self, event: Event) -> None:
        """Feed one event through the state machine and act on the result."""
        transition = update(self.chat_state, event)
        changed = transition.state is not self.chat_state
        self.chat_state = transition.state
        if changed:
            self._render_state()
        if transition.effect is not None:
            self._run_effect(transition.effect)

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, Exit):
            logger.info("Quit requested")
            self.exit()
            return
        name = "discover" if isinstance(effect, DiscoverAgents) else "send"
        self.run_worker(partial(self._perform, effect), name=name, group="network", thread=True)

    def _perform(self, effect: DiscoverAgents | SendMessage) -> None:
        """Worker thread body: run the effect and post its result to the UI loop."""
        result = self.runner.run(effect)
        self.post_message(self.ResultReady(result))

    def on_chat_app_result_ready(self, message: ResultReady) -> None:
        self.process_event(message.event)

    def on_compose_bar_input_received(self, message: ComposeBar.InputReceived) -> None:
        self.process_event(message.event)

    def action_request_quit(self) -> None:
        self.process_event(InputEvent.quit())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_state(self) -> None:
        snap = snapshot(self.chat_state)
        selecting = snap.phase == Phase.SELECTING

        agents = self.query_one("#agents", AgentList)
        transcript = self.query_one("#transcript", TextArea)
        head = self.query_one("#head", TalkingHeadWidget)
        compose = self.query_one("#compose", ComposeBar)

        agents.set_class(not selecting, "hidden")
        transcript.set_class(selecting, "hidden")
        head.set_class(selecting, "hidden")
        self.query_one("#help", Static).set_class(selecting, "hidden")

        if selecting:
            agents.show(snap.candidates)
            compose.update(SELECT_HELP)
            return

        text = "\n".join(snap.transcript)
        if transcript.text != text:
            transcript.text = text
            transcript.scroll_end(animate=False)
        head.say(snap.head_text, is_error=snap.error is not None)
        compose.update(snap.prompt)


def main():
    """Entry point for the cowchat TUI."""
    import argparse

    parser = argparse.ArgumentParser(description='cowchat - terminal chat with a remote agent')
    parser.add_argument('--base-url', '-u', default=None,
                        help='Agent API base URL (default: from config, http://localhost:3000/api)')
    parser.add_argument('--user-name', '-n', default=None,
                        help='Display name sent with every message (default: from config)')
    parser.add_argument('--config', '-c', default=None,
                        help='Path to an alternative config.json')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args()

    if args.config:
        set_config(ConfigManager(cfg_path=args.config))
    config = get_config()

    # Initialize centralized logging (suppresses console noise, logs to file)
    setup_logging(config=config)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    identity = SessionIdentity.generate(args.user_name or config.get_user_name())
    logger.info("Session user %s (%s)", identity.user_name, identity.user_id)

    runner = create_runner(config, base_url=args.base_url)
    app = ChatApp(runner=runner, identity=identity, character=config.get_character())
    app.run()


if __name__ == '__main__':
    main()
