"""Git Operations Package"""

from convinci.git.repo import GitRepo, GitError
from convinci.git.hooks import (
    HookError,
    UninstallResult,
    HOOK_NAME,
    HOOK_SCRIPT,
    install_hook,
    uninstall_hook,
)

__all__ = [
    "GitRepo",
    "GitError",
    "HookError",
    "UninstallResult",
    "HOOK_NAME",
    "HOOK_SCRIPT",
    "install_hook",
    "uninstall_hook",
]
