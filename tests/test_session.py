"""
Tests for key translation and the prompt_toolkit session.

Sessions run against a pipe input and a DummyOutput, so no terminal is
needed. Every scripted session ends with a key that quits.

Run with:
    pytest tests/test_session.py -v
"""

import io
import sys

import pytest
from prompt_toolkit.data_structures import Size
from prompt_toolkit.formatted_text import to_plain_text
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from convinci.tui import App, InputField, TerminalError, run_session
from convinci.tui.keys import KeyCode, KeyEvent, KeyModifiers, to_key_event
from convinci.tui.session import frame

PASTE_START = "\x1b[200~"
PASTE_END = "\x1b[201~"


class SizedOutput(DummyOutput):
    """DummyOutput with a chosen screen size."""

    def __init__(self, columns, rows):
        self._size = Size(rows=rows, columns=columns)

    def get_size(self):
        return self._size


@pytest.fixture
def pipe():
    with create_pipe_input() as pipe_input:
        yield pipe_input


@pytest.fixture
def session(pipe):
    """Return a function that types ``text`` into a fresh session and runs it."""
    def _run(text, app=None, **kwargs):
        pipe.send_text(text)
        return run_session(app or App(), input=pipe, output=DummyOutput(), **kwargs)
    return _run


# ---------------------------------------------------------------------------
# to_key_event
# ---------------------------------------------------------------------------

class TestToKeyEvent:

    @pytest.mark.parametrize("key, code", [
        (Keys.Enter, KeyCode.ENTER),
        (Keys.Tab, KeyCode.TAB),
        (Keys.BackTab, KeyCode.BACK_TAB),
        (Keys.Backspace, KeyCode.BACKSPACE),
        (Keys.Escape, KeyCode.ESC),
        (Keys.Up, KeyCode.UP),
        (Keys.Down, KeyCode.DOWN),
        (Keys.Left, KeyCode.LEFT),
        (Keys.Right, KeyCode.RIGHT),
    ])
    def test_named_keys(self, key, code):
        assert to_key_event(KeyPress(key)).code is code

    def test_plain_enter_has_no_modifiers(self):
        assert to_key_event(KeyPress(Keys.Enter)).modifiers == KeyModifiers.NONE

    def test_line_feed_is_ctrl_enter(self):
        assert to_key_event(KeyPress(Keys.ControlJ)) == KeyEvent(KeyCode.ENTER, modifiers=KeyModifiers.CONTROL)

    @pytest.mark.parametrize("char", ["a", "1", " ", "é", "✓"])
    def test_printable_characters(self, char):
        assert to_key_event(KeyPress(char)) == KeyEvent.of(char)

    def test_ctrl_letters(self):
        ctrl_c = to_key_event(KeyPress(Keys.ControlC))
        ctrl_q = to_key_event(KeyPress(Keys.ControlQ))
        assert ctrl_c.is_ctrl("c")
        assert ctrl_q.is_ctrl("q")
        assert not ctrl_c.is_text

    @pytest.mark.parametrize("key_press", [
        KeyPress(Keys.F1),
        KeyPress(Keys.PageUp),
        KeyPress(Keys.Delete),
        KeyPress("\x00"),
    ])
    def test_unbound_keys_dropped(self, key_press):
        assert to_key_event(key_press) is None


# ---------------------------------------------------------------------------
# run_session
# ---------------------------------------------------------------------------

class TestRunSession:

    def test_compose_and_confirm(self, session):
        app = session("2" + "\x1b[B\x1b[B" + "\t" + "null check" + "\r")
        assert app.should_confirm is True
        assert app.commit.commit_type == "fix"
        assert app.commit.scope == "api"
        assert app.commit.description == "null check"

    @pytest.mark.parametrize("text", ["\x03", "\x11"])
    def test_cancel(self, session, text):
        app = session(text)
        assert app.should_quit is True
        assert app.should_confirm is False

    def test_keys_after_quit_are_dropped(self, session):
        app = session("\x03\t")
        assert app.current_field is InputField.TYPE

    def test_escape_defocuses(self, session):
        app = session("\x1b\x03")
        assert app.current_field is InputField.UNFOCUSED
        assert app.should_confirm is False

    def test_line_feed_confirms_from_body(self, session):
        app = App()
        app.focus_field(InputField.BODY)
        app = session("why\n", app)
        assert app.should_confirm is True
        assert app.commit.body == "why"

    def test_pasted_lines_stay_in_body(self, session):
        app = App()
        app.focus_field(InputField.BODY)
        app = session(PASTE_START + "line one\nline two" + PASTE_END + "\x03", app)
        assert app.commit.body == "line one\nline two"
        assert app.should_confirm is False

    def test_pasted_description_is_one_line(self, session):
        app = App()
        app.focus_field(InputField.DESCRIPTION)
        app = session(PASTE_START + "add\nparser" + PASTE_END + "\r", app)
        assert app.should_confirm is True
        assert app.commit.description == "add parser"

    def test_split_utf8_character_survives(self, pipe):
        pipe.send_bytes("é".encode("utf-8")[:1])
        pipe.send_bytes("é".encode("utf-8")[1:] + b"\r")
        app = App()
        app.focus_field(InputField.DESCRIPTION)
        run_session(app, input=pipe, output=DummyOutput())
        assert app.commit.description == "é"

    def test_requires_terminal_on_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        with pytest.raises(TerminalError, match="requires a terminal"):
            run_session(App())


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

class TestFrame:

    def test_tall_screen_full_layout(self):
        text = to_plain_text(frame(App(), SizedOutput(100, 40)))
        assert "Step" not in text
        assert "Scope (optional)" in text

    def test_short_screen_single_field(self):
        text = to_plain_text(frame(App(), SizedOutput(80, 12)))
        assert "Step 1/5" in text

    def test_compact_height_is_configurable(self):
        text = to_plain_text(frame(App(), SizedOutput(80, 40), compact_height=50))
        assert "Step 1/5" in text

    def test_frame_follows_state(self):
        app = App()
        assert "Backspace: Clear" not in to_plain_text(frame(app, SizedOutput(100, 40)))
        app.next_field()
        assert "Backspace: Clear" in to_plain_text(frame(app, SizedOutput(100, 40)))
