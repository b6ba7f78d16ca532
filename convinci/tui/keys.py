"""Key events, and their translation from prompt_toolkit key presses."""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    TAB = "tab"
    BACK_TAB = "back_tab"
    BACKSPACE = "backspace"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class KeyModifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()


class KeyEventKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press. ``char`` is set only for KeyCode.CHAR."""
    code: KeyCode
    char: Optional[str] = None
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS

    @classmethod
    def of(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> 'KeyEvent':
        return cls(KeyCode.CHAR, char=char, modifiers=modifiers)

    def is_ctrl(self, char: str) -> bool:
        return (
            self.code is KeyCode.CHAR
            and self.char == char
            and bool(self.modifiers & KeyModifiers.CONTROL)
        )

    @property
    def is_text(self) -> bool:
        """Plain printable input, i.e. not chorded with Ctrl."""
        return self.code is KeyCode.CHAR and not self.modifiers & KeyModifiers.CONTROL


NAMED_KEYS = {
    Keys.Enter: KeyEvent(KeyCode.ENTER),
    # Terminals without extended key reporting send LF (Ctrl+J) for Ctrl+Enter
    Keys.ControlJ: KeyEvent(KeyCode.ENTER, modifiers=KeyModifiers.CONTROL),
    Keys.Tab: KeyEvent(KeyCode.TAB),
    Keys.BackTab: KeyEvent(KeyCode.BACK_TAB, modifiers=KeyModifiers.SHIFT),
    Keys.Backspace: KeyEvent(KeyCode.BACKSPACE),
    Keys.Escape: KeyEvent(KeyCode.ESC),
    Keys.Up: KeyEvent(KeyCode.UP),
    Keys.Down: KeyEvent(KeyCode.DOWN),
    Keys.Left: KeyEvent(KeyCode.LEFT),
    Keys.Right: KeyEvent(KeyCode.RIGHT),
}

# Ctrl+letter chords other than the ones above (Ctrl+H/I/J/M)
CONTROL_LETTERS = {
    Keys(f"c-{letter}"): KeyEvent.of(letter, KeyModifiers.CONTROL)
    for letter in "abcdefgklnopqrstuvwxyz"
}

BOUND_KEYS = tuple(NAMED_KEYS) + tuple(CONTROL_LETTERS)


def to_key_event(key_press: KeyPress) -> Optional[KeyEvent]:
    """Translate a prompt_toolkit KeyPress, or None for keys the session ignores."""
    key = key_press.key
    if isinstance(key, Keys):
        return NAMED_KEYS.get(key) or CONTROL_LETTERS.get(key)
    if key.isprintable():
        return KeyEvent.of(key)
    return None
