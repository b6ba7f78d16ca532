"""commit-msg hook management."""

import logging
import os
import sys
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

HOOK_NAME = "commit-msg"
HOOK_MARKER = "convinci"

HOOK_SCRIPT = """#!/bin/sh
# convinci commit-msg hook
# Validates conventional commits format

# Pass commit message file content via stdin
cat "$1" | convinci validate -
"""


class HookError(Exception):
    """Raised when a hook cannot be installed."""
    pass


class UninstallResult(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FOREIGN = "foreign"


def _is_own_hook(path: Path) -> bool:
    try:
        return HOOK_MARKER in path.read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        raise HookError(f"Failed to read existing hook: {e}")


def install_hook(hooks_dir: Path) -> tuple[Path, bool]:
    """Write the commit-msg hook into ``hooks_dir``.

    Returns:
        (hook path, True if an existing convinci hook was replaced)

    Raises:
        HookError: hooks directory cannot be created, or a commit-msg hook
            that convinci did not write is already there
    """
    hooks_dir = Path(hooks_dir)
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HookError(f"Failed to create hooks directory {hooks_dir}: {e}")

    hook_path = hooks_dir / HOOK_NAME
    updated = False
    if hook_path.exists():
        if not _is_own_hook(hook_path):
            raise HookError(
                "A commit-msg hook already exists. Please remove it and try again.\n"
                f"Path: {hook_path}"
            )
        updated = True

    try:
        hook_path.write_text(HOOK_SCRIPT, encoding='utf-8', newline='\n')
        if sys.platform != 'win32':
            os.chmod(hook_path, 0o755)
    except OSError as e:
        raise HookError(f"Failed to write hook {hook_path}: {e}")

    logger.info("%s commit-msg hook at %s", "Updated" if updated else "Installed", hook_path)
    return hook_path, updated


def uninstall_hook(hooks_dir: Path) -> UninstallResult:
    """Remove the commit-msg hook if convinci wrote it; otherwise leave it alone."""
    hook_path = Path(hooks_dir) / HOOK_NAME
    if not hook_path.exists():
        return UninstallResult.NOT_FOUND

    if not _is_own_hook(hook_path):
        logger.info("Leaving foreign commit-msg hook at %s", hook_path)
        return UninstallResult.FOREIGN

    try:
        hook_path.unlink()
    except OSError as e:
        raise HookError(f"Failed to remove hook {hook_path}: {e}")
    logger.info("Removed commit-msg hook at %s", hook_path)
    return UninstallResult.REMOVED
