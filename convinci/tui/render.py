"""Screen renderer - draws an AppView as ANSI-coloured text.

The renderer only reads the snapshot it is given. Two layouts exist: the
full form with every field stacked, and a single-field layout for short
terminals that only shows the active field.
"""

from convinci import COMMIT_SCOPES, COMMIT_TYPES, COMMIT_TYPE_NAMES
from convinci.commit import ConventionalCommit
from convinci.commit.formatter import format_header
from convinci.output import (
    CURSOR, POINTER, RULE,
    bold, colorize_commit_type, dim, error, warning,
)
from convinci.tui.app import AppView, InputField

DEFAULT_COMPACT_HEIGHT = 25
BODY_ROWS = 3

FIELD_TITLES = {
    InputField.TYPE: "Commit Type",
    InputField.SCOPE: "Scope (optional)",
    InputField.DESCRIPTION: "Description",
    InputField.BODY: "Body (optional)",
    InputField.BREAKING_TOGGLE: "Breaking Change",
    InputField.BREAKING_DESCRIPTION: "Breaking Change Description",
}

KEY_HINTS = {
    InputField.UNFOCUSED: "Tab: Focus field  Esc: Exit  Enter: Confirm  Ctrl+C: Exit",
    InputField.TYPE: "↑/↓/jk: Navigate  1-9: Select  Tab: Next  Shift+Tab: Previous  Enter: Confirm",
    InputField.SCOPE: "↑/↓/jk: Navigate  1-9: Select  Backspace: Clear  Tab: Next  Enter: Confirm",
    InputField.DESCRIPTION: "Type text  Tab: Next  Esc: Defocus  Enter: Confirm",
    InputField.BODY: "Type text  Enter: New line  Tab: Next  Esc: Defocus  Ctrl+Enter: Confirm",
    InputField.BREAKING_TOGGLE: "Space: Toggle  Tab: Next  Shift+Tab: Previous  Enter: Confirm",
    InputField.BREAKING_DESCRIPTION: "Type description  Enter: Confirm  Esc: Back",
}


def _clip(text: str, width: int) -> str:
    return text if len(text) <= width else text[:max(width - 1, 0)] + "…"


def _title(view: AppView, field: InputField, width: int) -> str:
    text = _clip(f" {FIELD_TITLES[field]} ", width)
    if view.field is not field:
        return bold(text)
    if field in (InputField.BREAKING_TOGGLE, InputField.BREAKING_DESCRIPTION):
        return bold(error(text))
    return bold(warning(text))


def _list_lines(items: list[str], selected: int, width: int, rows: int | None = None) -> list[str]:
    # Scroll long lists so the selection stays in view
    rows = len(items) if rows is None else max(rows, 1)
    start = max(0, min(selected - rows // 2, len(items) - rows))
    lines = []
    for i, item in list(enumerate(items))[start:start + rows]:
        prefix = f"{POINTER} " if i == selected else "  "
        text = _clip(f"  {prefix}{i + 1}. {item}", width)
        lines.append(bold(text) if i == selected else text)
    return lines


def _text_lines(value: str, active: bool, width: int) -> list[str]:
    cursor = CURSOR if active else ""
    return [_clip(f"    {value}{cursor}", width)]


def _type_section(view: AppView, width: int, rows: int | None = None) -> list[str]:
    # Descriptions only on wide screens; items stay plain so clipping never cuts an escape code
    items = [f"{name:<9} {COMMIT_TYPES[name]}" if width >= 60 else name for name in COMMIT_TYPE_NAMES]
    return [_title(view, InputField.TYPE, width)] + _list_lines(items, view.type_index, width, rows)


def _scope_section(view: AppView, width: int, rows: int | None = None) -> list[str]:
    return [_title(view, InputField.SCOPE, width)] + _list_lines(list(COMMIT_SCOPES), view.scope_index, width, rows)


def _description_section(view: AppView, width: int) -> list[str]:
    active = view.field is InputField.DESCRIPTION
    return [_title(view, InputField.DESCRIPTION, width)] + _text_lines(view.description, active, width)


def _body_section(view: AppView, width: int, rows: int = BODY_ROWS) -> list[str]:
    active = view.field is InputField.BODY
    body_lines = (view.body or "").split("\n")
    # Keep the end of the body in view, like a scrolled text box
    shown = body_lines[-rows:]
    lines = [_clip(f"    {line}", width) for line in shown]
    if active:
        lines[-1] = _clip(lines[-1] + CURSOR, width)
    lines += [""] * (rows - len(lines))
    return [_title(view, InputField.BODY, width)] + lines


def _toggle_line(view: AppView, width: int) -> str:
    checkbox = "[X]" if view.breaking else "[ ]"
    text = _clip(f"    {checkbox} Breaking Change (API incompatible)", width)
    return error(text) if view.breaking else text


def _breaking_section(view: AppView, width: int) -> list[str]:
    lines = [_title(view, InputField.BREAKING_TOGGLE, width), _toggle_line(view, width)]
    if view.breaking:
        active = view.field is InputField.BREAKING_DESCRIPTION
        lines.append(_title(view, InputField.BREAKING_DESCRIPTION, width))
        lines += _text_lines(view.breaking_description, active, width)
    else:
        lines.append(dim(_clip(f" {FIELD_TITLES[InputField.BREAKING_DESCRIPTION]} (disabled) ", width)))
        lines.append("")
    return lines


def _preview_line(view: AppView, width: int) -> str:
    commit = ConventionalCommit(
        commit_type=view.commit_type,
        scope=view.scope,
        description=view.description,
        breaking=view.breaking,
    )
    header = _clip(format_header(commit, view.use_emoji), max(width - 10, 1))
    return f"{dim(' Preview:')} {colorize_commit_type(header)}"


def _footer_line(view: AppView, width: int) -> str:
    mode = " [DRY RUN] " if view.dry_run else " [GIT MODE] "
    hints = KEY_HINTS[view.field] if view.show_help else "Ctrl+Enter: Confirm  Ctrl+C: Exit"
    return dim(_clip(f"{mode}{hints}", width))


def render_full(view: AppView, width: int) -> list[str]:
    lines = []
    lines += _type_section(view, width)
    lines += _scope_section(view, width)
    lines += _description_section(view, width)
    lines += _body_section(view, width)
    lines += _breaking_section(view, width)
    lines.append(dim(RULE * width))
    lines.append(_preview_line(view, width))
    lines.append(_footer_line(view, width))
    return lines


def _progress(view: AppView) -> str:
    steps = len(FIELD_TITLES) if view.breaking else len(FIELD_TITLES) - 1
    order = list(FIELD_TITLES)
    if view.field not in order:
        return ""
    return f"Step {order.index(view.field) + 1}/{steps}"


def render_single_field(view: AppView, width: int, height: int) -> list[str]:
    title = FIELD_TITLES.get(view.field, "No field selected")
    progress = _progress(view)
    heading = _clip(f" Conventional Commits Helper - {title} ", max(width - len(progress) - 1, 1))
    padding = " " * max(width - len(heading) - len(progress), 1)
    lines = [bold(warning(heading)) + padding + dim(progress), dim(RULE * width)]

    # Heading, rule, field title, preview and footer take five rows
    rows = max(height - 5, 1)
    if view.field is InputField.TYPE:
        lines += _type_section(view, width, rows)
    elif view.field is InputField.SCOPE:
        lines += _scope_section(view, width, rows)
    elif view.field is InputField.DESCRIPTION:
        lines += _description_section(view, width)
    elif view.field is InputField.BODY:
        lines += _body_section(view, width, rows)
    elif view.field is InputField.BREAKING_TOGGLE:
        lines += [_title(view, InputField.BREAKING_TOGGLE, width), _toggle_line(view, width)]
    elif view.field is InputField.BREAKING_DESCRIPTION:
        lines += _breaking_section(view, width)[2:]

    lines.append(_preview_line(view, width))
    lines.append(_footer_line(view, width))
    return lines


def render(view: AppView, width: int, height: int, compact_height: int = DEFAULT_COMPACT_HEIGHT) -> str:
    """Render a full frame as one string of newline-separated lines.

    Short terminals, and any terminal the full form would overflow, get the
    single-field layout.
    """
    lines = render_full(view, width) if height >= compact_height else []
    if not lines or len(lines) > height:
        lines = render_single_field(view, width, height)
    return "\n".join(lines)
