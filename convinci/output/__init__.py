"""Terminal Output Formatting Package"""

import re
import shutil
import sys
import os
import textwrap


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    MAGENTA = '\033[35m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
POINTER = '▶' if UNICODE_ENABLED else '>'
CURSOR = '█' if UNICODE_ENABLED else '_'
RULE = '─' if UNICODE_ENABLED else '-'

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_success(message: str) -> None:
    print(f"{success(CHECK)} {message}")


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"{warning('⚠')} {warning(message)}" if UNICODE_ENABLED else f"[!] {message}")


def print_box(text: str) -> None:
    term_width = shutil.get_terminal_size((80, 24)).columns
    # Box chrome takes 4 chars: "│ " + " │"
    max_width = max(int(term_width * 0.8), 60) - 4

    lines = text.split('\n')
    wrapped_lines = []
    for line in lines:
        if len(strip_ansi(line)) > max_width:
            wrapped_lines.extend(textwrap.wrap(strip_ansi(line), width=max_width) or [''])
        else:
            wrapped_lines.append(line)

    content_width = max(len(strip_ansi(line)) for line in wrapped_lines)

    if UNICODE_ENABLED:
        top = f'┌─{"─" * content_width}─┐'
        bottom = f'└─{"─" * content_width}─┘'
        side = '│'
    else:
        top = f'+-{"-" * content_width}-+'
        bottom = f'+-{"-" * content_width}-+'
        side = '|'

    print(dim(top))
    for line in wrapped_lines:
        padding = ' ' * (content_width - len(strip_ansi(line)))
        print(f"{dim(side)} {line}{padding} {dim(side)}")
    print(dim(bottom))


COMMIT_TYPE_COLORS = {
    'feat': Colors.GREEN,
    'fix': Colors.RED,
    'refactor': Colors.YELLOW,
    'docs': Colors.CYAN,
    'test': Colors.MAGENTA,
    'perf': Colors.GREEN,
    'chore': Colors.DIM,
    'style': Colors.DIM,
    'ci': Colors.CYAN,
    'build': Colors.CYAN,
}


def colorize_commit_type(message: str) -> str:
    """Color the commit type prefix on the first line of a commit message.

    A leading type icon is left as it is.
    """
    if not COLORS_ENABLED:
        return message
    lines = message.split('\n')
    match = re.match(r'^(\S+ )?([a-z]+)(\([^)]*\))?(!?:)', lines[0])
    if match:
        color = COMMIT_TYPE_COLORS.get(match.group(2))
        if color:
            start = len(match.group(1) or '')
            prefix = lines[0][start:match.end()]
            lines[0] = lines[0][:start] + _colorize(prefix, Colors.BOLD, color) + lines[0][match.end():]
    return '\n'.join(lines)


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "POINTER", "CURSOR", "RULE", "ANSI_RE",
    "strip_ansi", "success", "error", "warning", "info", "dim", "bold",
    "print_success", "print_error", "print_warning", "print_box",
    "colorize_commit_type", "COMMIT_TYPE_COLORS",
]
