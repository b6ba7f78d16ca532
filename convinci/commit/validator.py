"""Message Validator - check a commit message header against the grammar."""

import re

# type, optional (scope), optional !, ": ", description; anchored at line start
HEADER_PATTERN = re.compile(r'^([a-z]+)(\([^()\r\n]+\))?(!)?: [^\r\n]+')
LINE_BREAK = re.compile(r'\r\n|\r|\n')

GRAMMAR = "<type>[(scope)][!]: <description>"
EXAMPLE = "feat(parser): add new parsing algorithm"
EMPTY_MESSAGE_ERROR = "Commit message is empty"


def _grammar_error(first_line: str) -> str:
    return (
        "Commit message does not follow the Conventional Commits format.\n"
        f"  Expected: {GRAMMAR}\n"
        f"  Example:  {EXAMPLE}\n"
        f"  Got:      {first_line}"
    )


def validate_message(message: str) -> tuple[bool, str]:
    """Validate the first line of a commit message.

    Only the first line is inspected; anything after the matched description
    on that line, and every following line, is ignored.

    Returns:
        (True, "") when the header conforms, otherwise (False, diagnostic)
    """
    if not message or not message.strip():
        return False, EMPTY_MESSAGE_ERROR

    first_line = LINE_BREAK.split(message, maxsplit=1)[0]
    if not HEADER_PATTERN.match(first_line):
        return False, _grammar_error(first_line)

    return True, ""
