"""cowchat - terminal chat client for a remote conversational agent.

The interaction state machine (`cowchat.machine`) is importable without
Textual; the TUI lives in `cowchat.app`.
"""

__version__ = "0.1.0"
