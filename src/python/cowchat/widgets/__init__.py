"""TUI widgets for the cowchat Textual app."""

from .agent_list import AgentList
from .compose_bar import ComposeBar, key_to_input
from .talking_head import TalkingHeadWidget

__all__ = ["AgentList", "ComposeBar", "TalkingHeadWidget", "key_to_input"]
