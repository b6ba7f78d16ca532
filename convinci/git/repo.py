"""Git Repository - run git and make the commit."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitRepo:
    """Thin wrapper over the git command line for the current directory."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def is_inside_work_tree(self) -> bool:
        try:
            return self._run_git('rev-parse', '--is-inside-work-tree').strip() == 'true'
        except GitError as e:
            if "not installed" in str(e):
                raise
            return False

    def verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        if not self.is_inside_work_tree():
            raise GitError("Not inside a Git repository")

    def hooks_dir(self) -> Path:
        """Hooks directory of the repository, honouring core.hooksPath."""
        try:
            path = Path(self._run_git('rev-parse', '--git-path', 'hooks').strip())
        except GitError as e:
            if "not installed" in str(e):
                raise
            raise GitError("Not a Git repository")
        if self.cwd is not None and not path.is_absolute():
            path = Path(self.cwd) / path
        return path

    def commit(self, message: str) -> None:
        """Run ``git commit -m message``, letting git talk to the terminal."""
        self.verify_in_repo()
        logger.info("Running git commit (%d chars)", len(message))
        try:
            result = subprocess.run(['git', 'commit', '-m', message], cwd=self.cwd)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        if result.returncode != 0:
            raise GitError(f"Error executing git commit (exit code {result.returncode})")
