"""Commit Model, Formatting and Validation Package"""

from convinci.commit.model import ConventionalCommit
from convinci.commit.formatter import format_message, get_icon
from convinci.commit.validator import (
    validate_message,
    EMPTY_MESSAGE_ERROR,
    GRAMMAR,
    EXAMPLE,
    HEADER_PATTERN,
)

__all__ = [
    "ConventionalCommit",
    "format_message",
    "get_icon",
    "validate_message",
    "EMPTY_MESSAGE_ERROR",
    "GRAMMAR",
    "EXAMPLE",
    "HEADER_PATTERN",
]
