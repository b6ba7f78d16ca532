"""CLI Main Entry Point"""

import logging

from convinci.commit import format_message
from convinci.config import Config, load_config
from convinci.git import GitRepo, GitError
from convinci.logging_config import configure_logging, hold_stderr_logs
from convinci.output import bold, dim, print_box, print_error, print_success, colorize_commit_type
from convinci.tui import App, TerminalError, run_session

from convinci.cli.args import parse_args
from convinci.cli.commands import (
    display_config,
    run_hooks_install,
    run_hooks_uninstall,
    run_install_completion,
    run_validate,
)

logger = logging.getLogger(__name__)


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.command == 'validate':
        return run_validate(args.message), True
    if args.command == 'hooks':
        if args.action == 'install':
            return run_hooks_install(), True
        return run_hooks_uninstall(), True
    return 0, False


def _resolve_config(args) -> Config:
    """Precedence: CLI args > environment variables > config file"""
    config = load_config()
    config.apply_env()
    if args.demo:
        config.dry_run = True
    if args.emoji:
        config.use_emoji = True
    return config


def _run_interactive(config: Config, input=None, output=None) -> App | None:
    """Run the guided session. Returns the finished App, or None if there is no terminal."""
    app = App(dry_run=config.dry_run, use_emoji=config.use_emoji, show_help=config.show_help)
    try:
        with hold_stderr_logs():
            run_session(app, config.compact_height, input=input, output=output)
    except TerminalError as e:
        print_error(str(e))
        return None
    return app


def _display_message(message: str) -> None:
    print(bold("Generated commit message:"))
    print()
    print_box(colorize_commit_type(message))


def _execute_commit(app: App, config: Config, repo: GitRepo | None = None) -> int:
    """Print or commit the confirmed message.

    Returns:
        int: Exit code
    """
    if not app.commit.description.strip():
        print_error("Description is required. Nothing was committed.")
        return 1

    message = format_message(app.commit, use_emoji=config.use_emoji)

    if config.dry_run:
        _display_message(message)
        return 0

    repo = repo or GitRepo()
    try:
        repo.commit(message)
    except GitError as e:
        logger.debug("Commit failed: %s", e)
        print_error(str(e))
        return 1

    print_success("Commit successful!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    # Handle subcommands that exit early
    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    config = _resolve_config(args)

    app = _run_interactive(config)
    if app is None:
        return 1

    if not app.should_confirm:
        print(dim("Cancelled."))
        return 0

    return _execute_commit(app, config)
