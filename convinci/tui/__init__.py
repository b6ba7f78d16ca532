"""Interactive Terminal UI Package"""

from convinci.tui.app import App, AppView, InputField, FIELD_CYCLE
from convinci.tui.keys import KeyCode, KeyEvent, KeyEventKind, KeyModifiers, to_key_event
from convinci.tui.render import render, DEFAULT_COMPACT_HEIGHT
from convinci.tui.session import TerminalError, build_application, run_session

__all__ = [
    "App",
    "AppView",
    "InputField",
    "FIELD_CYCLE",
    "KeyCode",
    "KeyEvent",
    "KeyEventKind",
    "KeyModifiers",
    "to_key_event",
    "render",
    "DEFAULT_COMPACT_HEIGHT",
    "TerminalError",
    "build_application",
    "run_session",
]
