"""Interactive session on a full-screen prompt_toolkit Application.

prompt_toolkit owns raw mode and the alternate screen and puts the terminal
back however ``Application.run`` ends. Key presses are translated to
KeyEvents and fed to the App; every redraw renders a fresh snapshot.
"""

import asyncio
import logging
import signal
import sys

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from convinci.tui.app import App
from convinci.tui.keys import BOUND_KEYS, to_key_event
from convinci.tui.render import DEFAULT_COMPACT_HEIGHT, render

logger = logging.getLogger(__name__)

# Wait this long after a lone ESC for the rest of an escape sequence
ESCAPE_TIMEOUT = 0.05


class TerminalError(Exception):
    """Raised when there is no terminal to run the session on."""
    pass


def frame(app: App, output, compact_height: int = DEFAULT_COMPACT_HEIGHT) -> ANSI:
    """The current screen as formatted text, sized to ``output``."""
    size = output.get_size()
    return ANSI(render(app.snapshot(), size.columns, size.rows, compact_height))


def build_key_bindings(app: App) -> KeyBindings:
    kb = KeyBindings()

    def _dispatch(event: KeyPressEvent) -> None:
        if app.should_quit:
            return
        for key_press in event.key_sequence:
            key = to_key_event(key_press)
            if key is not None:
                app.handle_key(key)
            if app.should_quit:
                event.app.exit()
                return

    # Named keys are bound one by one so they win over prompt_toolkit's
    # default bindings; eager so Esc and Ctrl+X never wait for a longer chord
    for bound in BOUND_KEYS:
        kb.add(bound, eager=True)(_dispatch)
    kb.add(Keys.Any)(_dispatch)

    @kb.add(Keys.BracketedPaste, eager=True)
    def _paste(event: KeyPressEvent) -> None:
        app.handle_paste(event.data)

    @kb.add(Keys.SIGINT, eager=True)
    def _interrupt(event: KeyPressEvent) -> None:
        if not app.should_quit:
            app.cancel()
            event.app.exit()

    return kb


def build_application(app: App, compact_height: int = DEFAULT_COMPACT_HEIGHT,
                      input=None, output=None) -> Application:
    control = FormattedTextControl(lambda: frame(app, application.output, compact_height), show_cursor=False)
    application = Application(
        layout=Layout(Window(control, wrap_lines=False)),
        key_bindings=build_key_bindings(app),
        full_screen=True,
        input=input,
        output=output,
    )
    application.ttimeoutlen = ESCAPE_TIMEOUT
    return application


def run_session(app: App, compact_height: int = DEFAULT_COMPACT_HEIGHT, input=None, output=None) -> App:
    """Run the session until the app quits and return it.

    Without an explicit ``input``, stdin must be a terminal. SIGTERM and
    SIGINT end the session as a cancel.

    Raises:
        TerminalError: stdin is not a terminal
    """
    if input is None and not sys.stdin.isatty():
        raise TerminalError("Interactive mode requires a terminal on stdin")

    application = build_application(app, compact_height, input, output)

    def _terminate() -> None:
        if not app.should_quit:
            app.cancel()
            application.exit()

    def _watch_sigterm() -> None:
        if sys.platform != 'win32':
            asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, _terminate)

    try:
        application.run(pre_run=_watch_sigterm)
    except KeyboardInterrupt:
        app.cancel()

    logger.debug("Session ended (confirmed=%s)", app.should_confirm)
    return app
