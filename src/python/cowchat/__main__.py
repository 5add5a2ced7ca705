"""Run the cowchat TUI: python -m cowchat"""

from .app import main

main()
