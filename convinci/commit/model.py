"""Commit Model - the fields of one commit being composed."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ConventionalCommit:
    """A commit in progress.

    ``scope`` is None for "no scope", never an empty string. ``body`` stays
    None until something is typed into it. ``breaking_description`` is kept
    even when ``breaking`` is switched off; it is only emitted while the flag
    is set.
    """
    commit_type: str = "feat"
    scope: Optional[str] = None
    description: str = ""
    body: Optional[str] = None
    breaking: bool = False
    breaking_description: str = ""

    @property
    def has_body(self) -> bool:
        return bool(self.body and self.body.strip())

    @property
    def has_breaking_footer(self) -> bool:
        return self.breaking and bool(self.breaking_description)
