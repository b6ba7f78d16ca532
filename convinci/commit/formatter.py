"""Message Formatter - turn a ConventionalCommit into commit message text."""

from convinci import COMMIT_ICONS
from convinci.commit.model import ConventionalCommit

BREAKING_LABEL = "BREAKING CHANGE: "
BLOCK_SEPARATOR = "\n\n"


def get_icon(commit_type: str) -> str:
    """Icon prefix for a commit type, including its trailing space."""
    icon = COMMIT_ICONS.get(commit_type)
    return f"{icon} " if icon else ""


def format_header(commit: ConventionalCommit, use_emoji: bool = False) -> str:
    icon = get_icon(commit.commit_type) if use_emoji else ""
    scope = f"({commit.scope})" if commit.scope else ""
    bang = "!" if commit.breaking else ""
    return f"{icon}{commit.commit_type}{scope}{bang}: {commit.description}"


def format_message(commit: ConventionalCommit, use_emoji: bool = False) -> str:
    """Render header, optional body block and optional breaking footer.

    Each optional block brings its own leading separator, so nothing trails
    the last block.
    """
    header = format_header(commit, use_emoji)

    body = f"{BLOCK_SEPARATOR}{commit.body}" if commit.has_body else ""

    footer = ""
    if commit.has_breaking_footer:
        footer = f"{BLOCK_SEPARATOR}{BREAKING_LABEL}{commit.breaking_description}"

    return f"{header}{body}{footer}"
