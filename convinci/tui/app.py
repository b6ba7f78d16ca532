"""Field State Machine - which field has focus and what each field accepts."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from convinci import COMMIT_SCOPES, COMMIT_TYPE_NAMES
from convinci.commit import ConventionalCommit
from convinci.tui.keys import KeyCode, KeyEvent, KeyEventKind, KeyModifiers

logger = logging.getLogger(__name__)


class InputField(Enum):
    TYPE = "type"
    SCOPE = "scope"
    DESCRIPTION = "description"
    BODY = "body"
    BREAKING_TOGGLE = "breaking_toggle"
    BREAKING_DESCRIPTION = "breaking_description"
    UNFOCUSED = "unfocused"


# Cycle order before the conditional BreakingDescription stop
FIELD_CYCLE = (
    InputField.TYPE,
    InputField.SCOPE,
    InputField.DESCRIPTION,
    InputField.BODY,
    InputField.BREAKING_TOGGLE,
)

TEXT_FIELDS = (InputField.DESCRIPTION, InputField.BODY, InputField.BREAKING_DESCRIPTION)


@dataclass(frozen=True)
class AppView:
    """Read-only snapshot of the session handed to renderers."""
    field: InputField
    commit_type: str
    scope: Optional[str]
    description: str
    body: Optional[str]
    breaking: bool
    breaking_description: str
    type_index: int
    scope_index: int
    dry_run: bool = False
    use_emoji: bool = False
    show_help: bool = True


class App:
    """Interactive session state.

    Owns the ConventionalCommit being composed and is the only thing that
    mutates it. Feed key events through ``handle_key``; the session is over
    once ``should_quit`` is set, and ``should_confirm`` tells whether the
    user asked for the commit to be made.
    """

    def __init__(self, dry_run: bool = False, use_emoji: bool = False, show_help: bool = True):
        self.commit = ConventionalCommit()
        self.current_field = InputField.TYPE
        self.type_index = 0
        self.scope_index = 0
        self.should_quit = False
        self.should_confirm = False
        self.dry_run = dry_run
        self.use_emoji = use_emoji
        self.show_help = show_help

    # ------------------------------------------------------------------
    # Session outcome
    # ------------------------------------------------------------------

    def cancel(self) -> None:
        logger.debug("Session cancelled in %s", self.current_field.value)
        self.should_quit = True

    def confirm_commit(self) -> None:
        logger.debug("Session confirmed in %s", self.current_field.value)
        self.should_confirm = True
        self.should_quit = True

    def snapshot(self) -> AppView:
        return AppView(
            field=self.current_field,
            commit_type=self.commit.commit_type,
            scope=self.commit.scope,
            description=self.commit.description,
            body=self.commit.body,
            breaking=self.commit.breaking,
            breaking_description=self.commit.breaking_description,
            type_index=self.type_index,
            scope_index=self.scope_index,
            dry_run=self.dry_run,
            use_emoji=self.use_emoji,
            show_help=self.show_help,
        )

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def focus_field(self, field: InputField) -> None:
        logger.debug("Focus %s -> %s", self.current_field.value, field.value)
        self.current_field = field

    def _cycle(self) -> tuple[InputField, ...]:
        if self.commit.breaking:
            return FIELD_CYCLE + (InputField.BREAKING_DESCRIPTION,)
        return FIELD_CYCLE

    def last_field(self) -> InputField:
        return self._cycle()[-1]

    def next_field(self) -> None:
        self.focus_field(self._step(1))

    def previous_field(self) -> None:
        self.focus_field(self._step(-1))

    def _step(self, direction: int) -> InputField:
        cycle = self._cycle()
        if self.current_field not in cycle:
            # Unfocused, or BreakingDescription after the flag was cleared
            return InputField.TYPE if direction > 0 else cycle[-1]
        idx = cycle.index(self.current_field)
        return cycle[(idx + direction) % len(cycle)]

    def defocus(self) -> None:
        if self.current_field is InputField.BREAKING_DESCRIPTION:
            self.focus_field(InputField.BREAKING_TOGGLE)
        else:
            self.focus_field(InputField.UNFOCUSED)

    # ------------------------------------------------------------------
    # Key dispatch
    # ------------------------------------------------------------------

    def handle_key(self, key: KeyEvent) -> None:
        if key.kind is not KeyEventKind.PRESS:
            return

        # Global Ctrl+C / Ctrl+Q shortcut to exit
        if key.is_ctrl('c') or key.is_ctrl('q'):
            self.cancel()
            return

        # Global Ctrl+Enter shortcut to confirm
        if key.code is KeyCode.ENTER and key.modifiers & KeyModifiers.CONTROL:
            self.confirm_commit()
            return

        handler = {
            InputField.TYPE: self._handle_type,
            InputField.SCOPE: self._handle_scope,
            InputField.DESCRIPTION: self._handle_text,
            InputField.BODY: self._handle_body,
            InputField.BREAKING_TOGGLE: self._handle_breaking_toggle,
            InputField.BREAKING_DESCRIPTION: self._handle_text,
            InputField.UNFOCUSED: self._handle_unfocused,
        }[self.current_field]

        if not handler(key):
            self._handle_common(key)

    def _handle_common(self, key: KeyEvent) -> None:
        """Tab/Shift+Tab/Esc/Enter, shared by every focused field."""
        if key.code is KeyCode.TAB:
            self.next_field()
        elif key.code is KeyCode.BACK_TAB:
            self.previous_field()
        elif key.code is KeyCode.ESC:
            self.defocus()
        elif key.code is KeyCode.ENTER:
            self.confirm_commit()

    def _handle_unfocused(self, key: KeyEvent) -> bool:
        if key.code is KeyCode.TAB:
            self.focus_field(InputField.TYPE)
        elif key.code is KeyCode.BACK_TAB:
            self.focus_field(self.last_field())
        elif key.code is KeyCode.ESC:
            self.cancel()
        elif key.code is KeyCode.ENTER:
            self.confirm_commit()
        return True

    # ------------------------------------------------------------------
    # List fields
    # ------------------------------------------------------------------

    def _list_move(self, key: KeyEvent, selected: int, size: int) -> Optional[int]:
        """New index for a navigation key, or None if the key is not one."""
        if key.code is KeyCode.DOWN or (key.is_text and key.char == 'j'):
            return (selected + 1) % size
        if key.code is KeyCode.UP or (key.is_text and key.char == 'k'):
            return (selected - 1) % size
        return None

    @staticmethod
    def _digit_index(key: KeyEvent, size: int) -> Optional[int]:
        """Zero-based index for a 1-9 shortcut, or None."""
        if not key.is_text or key.char not in '123456789':
            return None
        idx = int(key.char) - 1
        return idx if idx < size else None

    def select_type(self, index: int) -> None:
        self.type_index = index
        self.commit.commit_type = COMMIT_TYPE_NAMES[index]

    def select_scope(self, index: int) -> None:
        self.scope_index = index
        self.commit.scope = COMMIT_SCOPES[index] if index else None

    def _handle_type(self, key: KeyEvent) -> bool:
        size = len(COMMIT_TYPE_NAMES)
        moved = self._list_move(key, self.type_index, size)
        if moved is not None:
            self.select_type(moved)
            return True
        if key.is_text and key.char.isdigit():
            idx = self._digit_index(key, size)
            if idx is not None:
                self.select_type(idx)
                self.next_field()
            return True
        return False

    def _handle_scope(self, key: KeyEvent) -> bool:
        size = len(COMMIT_SCOPES)
        moved = self._list_move(key, self.scope_index, size)
        if moved is not None:
            self.select_scope(moved)
            return True
        if key.is_text and key.char.isdigit():
            idx = self._digit_index(key, size)
            if idx is not None:
                self.select_scope(idx)
                self.next_field()
            return True
        if key.code is KeyCode.BACKSPACE:
            self.select_scope(0)
            return True
        return False

    # ------------------------------------------------------------------
    # Text fields
    # ------------------------------------------------------------------

    def _get_text(self) -> str:
        if self.current_field is InputField.DESCRIPTION:
            return self.commit.description
        if self.current_field is InputField.BODY:
            return self.commit.body or ""
        return self.commit.breaking_description

    def _set_text(self, value: str) -> None:
        if self.current_field is InputField.DESCRIPTION:
            self.commit.description = value
        elif self.current_field is InputField.BODY:
            self.commit.body = value
        else:
            self.commit.breaking_description = value

    def _handle_text(self, key: KeyEvent) -> bool:
        if key.is_text:
            self._set_text(self._get_text() + key.char)
            return True
        if key.code is KeyCode.BACKSPACE:
            self._set_text(self._get_text()[:-1])
            return True
        return False

    def _handle_body(self, key: KeyEvent) -> bool:
        # Enter breaks the line instead of confirming
        if key.code is KeyCode.ENTER:
            self._set_text(self._get_text() + "\n")
            return True
        if key.code is KeyCode.BACKSPACE and self.commit.body is None:
            return True
        return self._handle_text(key)

    def handle_paste(self, text: str) -> None:
        """Insert pasted text into the focused text field.

        Line breaks survive only in the body; single-line fields get spaces
        instead. A paste while a list or the toggle has focus is dropped.
        """
        if self.should_quit or self.current_field not in TEXT_FIELDS:
            return
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if self.current_field is not InputField.BODY:
            text = text.replace("\n", " ")
        self._set_text(self._get_text() + text)

    # ------------------------------------------------------------------
    # Breaking change
    # ------------------------------------------------------------------

    def _handle_breaking_toggle(self, key: KeyEvent) -> bool:
        if key.is_text and key.char == ' ':
            # The description survives being switched off
            self.commit.breaking = not self.commit.breaking
            logger.debug("Breaking change %s", "on" if self.commit.breaking else "off")
            return True
        return False
