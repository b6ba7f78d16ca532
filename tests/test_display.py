"""
Tests for screen rendering and CLI output formatting.

Shows sample output for each scenario. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import pytest

from convinci.cli.main import _display_message
from convinci.output import strip_ansi as _strip_ansi
from convinci.tui import App, InputField
from convinci.tui.render import render, render_full, render_single_field


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    return _strip_ansi


@pytest.fixture
def print_sample(capsys):
    """Return a function that replays a rendered frame for -s viewing."""
    def _print(frame: str):
        with capsys.disabled():
            try:
                print(frame)
            except UnicodeEncodeError:
                cleaned = _strip_ansi(frame)
                print(cleaned.encode('ascii', errors='replace').decode('ascii'))
    return _print


@pytest.fixture
def make_view():
    """Return a factory building an AppView from App attribute overrides."""
    def _make(field=InputField.TYPE, dry_run=False, use_emoji=False, show_help=True, **commit):
        app = App(dry_run=dry_run, use_emoji=use_emoji, show_help=show_help)
        for name, value in commit.items():
            setattr(app.commit, name, value)
        app.current_field = field
        return app.snapshot()
    return _make


def visible(lines, strip):
    return [strip(line) for line in lines]


# ---------------------------------------------------------------------------
# Full layout
# ---------------------------------------------------------------------------

class TestRenderFull:
    """Output from render_full()."""

    def test_shows_every_field(self, make_view, strip_ansi):
        out = "\n".join(visible(render_full(make_view(), 100), strip_ansi))
        for title in ("Commit Type", "Scope (optional)", "Description", "Body (optional)", "Breaking Change"):
            assert title in out

    def test_lists_are_numbered_with_selection(self, make_view, strip_ansi):
        lines = visible(render_full(make_view(), 100), strip_ansi)
        assert any("▶ 1. feat" in line for line in lines)
        assert any("10. chore" in line for line in lines)
        assert any("▶ 1. <None>" in line for line in lines)
        assert any("9. storage" in line for line in lines)

    def test_type_descriptions_on_wide_screens(self, make_view, strip_ansi):
        wide = "\n".join(visible(render_full(make_view(), 100), strip_ansi))
        narrow = "\n".join(visible(render_full(make_view(), 40), strip_ansi))
        assert "A bug fix" in wide
        assert "A bug fix" not in narrow

    def test_lines_fit_width(self, make_view, strip_ansi):
        view = make_view(field=InputField.DESCRIPTION, description="x" * 200)
        for line in visible(render_full(view, 50), strip_ansi):
            assert len(line) <= 50

    def test_cursor_on_active_text_field(self, make_view, strip_ansi):
        lines = visible(render_full(make_view(field=InputField.DESCRIPTION, description="add"), 100), strip_ansi)
        assert "    add█" in lines

    def test_breaking_description_disabled_when_off(self, make_view, strip_ansi):
        out = "\n".join(visible(render_full(make_view(breaking_description="gone"), 100), strip_ansi))
        assert "(disabled)" in out
        assert "gone" not in out

    def test_breaking_description_shown_when_on(self, make_view, strip_ansi):
        view = make_view(breaking=True, breaking_description="gone")
        out = "\n".join(visible(render_full(view, 100), strip_ansi))
        assert "[X] Breaking Change" in out
        assert "    gone" in out

    def test_body_scrolls_to_end(self, make_view, strip_ansi):
        view = make_view(field=InputField.BODY, body="1\n2\n3\n4\n5")
        lines = visible(render_full(view, 100), strip_ansi)
        assert "    1" not in lines
        assert "    5█" in lines

    def test_preview_header(self, make_view, strip_ansi):
        view = make_view(commit_type="fix", scope="api", description="null check", breaking=True)
        lines = visible(render_full(view, 100), strip_ansi)
        assert " Preview: fix(api)!: null check" in lines

    def test_preview_with_emoji(self, make_view, strip_ansi):
        view = make_view(use_emoji=True, description="x")
        assert " Preview: ✨ feat: x" in visible(render_full(view, 100), strip_ansi)

    @pytest.mark.parametrize("dry_run, label", [(True, "[DRY RUN]"), (False, "[GIT MODE]")])
    def test_mode_indicator(self, make_view, strip_ansi, dry_run, label):
        footer = strip_ansi(render_full(make_view(dry_run=dry_run), 100)[-1])
        assert label in footer

    def test_help_hidden(self, make_view, strip_ansi):
        footer = strip_ansi(render_full(make_view(show_help=False), 100)[-1])
        assert "1-9" not in footer
        assert "Ctrl+Enter: Confirm" in footer


# ---------------------------------------------------------------------------
# Single-field layout
# ---------------------------------------------------------------------------

class TestRenderSingleField:
    """Output from render_single_field()."""

    @pytest.mark.parametrize("field, title, progress", [
        (InputField.TYPE, "Commit Type", "Step 1/5"),
        (InputField.SCOPE, "Scope (optional)", "Step 2/5"),
        (InputField.DESCRIPTION, "Description", "Step 3/5"),
        (InputField.BODY, "Body (optional)", "Step 4/5"),
        (InputField.BREAKING_TOGGLE, "Breaking Change", "Step 5/5"),
    ])
    def test_heading_and_progress(self, make_view, strip_ansi, field, title, progress):
        heading = strip_ansi(render_single_field(make_view(field=field), 80, 20)[0])
        assert f"Conventional Commits Helper - {title}" in heading
        assert heading.endswith(progress)

    def test_breaking_adds_step(self, make_view, strip_ansi):
        view = make_view(field=InputField.BREAKING_DESCRIPTION, breaking=True)
        assert strip_ansi(render_single_field(view, 80, 20)[0]).endswith("Step 6/6")

    def test_only_active_field(self, make_view, strip_ansi):
        out = "\n".join(visible(render_single_field(make_view(field=InputField.SCOPE), 80, 20), strip_ansi))
        assert "storage" in out
        assert "chore" not in out
        assert "Body (optional)" not in out

    def test_unfocused_shows_preview_only(self, make_view, strip_ansi):
        lines = visible(render_single_field(make_view(field=InputField.UNFOCUSED), 80, 20), strip_ansi)
        assert "Conventional Commits Helper - No field selected" in lines[0]
        assert any(line.startswith(" Preview:") for line in lines)

    @pytest.mark.parametrize("index", [0, 4, 9])
    def test_long_list_keeps_selection_visible(self, make_view, strip_ansi, index):
        app = App()
        app.select_type(index)
        lines = visible(render_single_field(app.snapshot(), 80, 10), strip_ansi)
        assert len(lines) == 10
        assert any(f"▶ {index + 1}." in line for line in lines)

    def test_footer_never_cut(self, make_view, strip_ansi):
        lines = visible(render_single_field(make_view(), 80, 8), strip_ansi)
        assert "[GIT MODE]" in lines[-1]


class TestRenderLayoutChoice:

    def test_tall_terminal_full_layout(self, make_view):
        frame = render(make_view(), 100, 40)
        assert "Step 1/5" not in frame
        assert len(frame.split("\n")) == len(render_full(make_view(), 100))

    def test_short_terminal_single_field(self, make_view):
        assert "Step 1/5" in render(make_view(), 100, 24)

    def test_overflowing_full_layout_falls_back(self, make_view):
        frame = render(make_view(), 100, 30)
        assert "Step 1/5" in frame
        assert len(frame.split("\n")) <= 30

    def test_sample_frame(self, make_view, print_sample):
        view = make_view(
            field=InputField.BODY, commit_type="feat", scope="auth",
            description="add token refresh", body="Refresh before expiry.\n",
        )
        frame = render(view, 100, 40)
        print_sample(frame)
        assert "feat(auth): add token refresh" in _strip_ansi(frame)


# ---------------------------------------------------------------------------
# Final message display
# ---------------------------------------------------------------------------

class TestDisplayMessage:
    """Output from _display_message()."""

    def test_boxed_message(self, capsys, strip_ansi):
        _display_message("feat(auth): add JWT token refresh\n\nrefresh before expiry")
        out = strip_ansi(capsys.readouterr().out)

        assert "Generated commit message:" in out
        assert "feat(auth): add JWT token refresh" in out
        assert "refresh before expiry" in out

    def test_box_is_aligned(self, capsys, strip_ansi):
        _display_message("fix: a\n\nlonger body line")
        out = strip_ansi(capsys.readouterr().out)
        box = [line for line in out.split("\n") if line.startswith(("┌", "│", "└"))]
        assert len({len(line) for line in box}) == 1
