"""CLI Commands"""

import os
import sys

from convinci.commit import validate_message
from convinci.config import load_config, get_config_path
from convinci.git import GitRepo, GitError, HookError, UninstallResult, install_hook, uninstall_hook
from convinci.output import bold, dim, info, print_success, print_error, print_warning


def run_validate(message: str, stdin=None) -> int:
    """Validate a message; '-' reads the whole message from stdin."""
    if message == '-':
        message = (stdin or sys.stdin).read()

    valid, diagnostic = validate_message(message)
    if not valid:
        print_error(diagnostic)
        return 1

    print_success("Commit message is valid!")
    return 0


def run_hooks_install(repo: GitRepo | None = None) -> int:
    repo = repo or GitRepo()
    try:
        hook_path, updated = install_hook(repo.hooks_dir())
    except (GitError, HookError) as e:
        print_error(str(e))
        return 1

    if updated:
        print(dim("Updating existing convinci hook"))
    print_success(f"Commit-msg hook installed at {hook_path}")
    return 0


def run_hooks_uninstall(repo: GitRepo | None = None) -> int:
    repo = repo or GitRepo()
    try:
        result = uninstall_hook(repo.hooks_dir())
    except (GitError, HookError) as e:
        print_error(str(e))
        return 1

    if result is UninstallResult.REMOVED:
        print_success("Commit-msg hook uninstalled")
    elif result is UninstallResult.FOREIGN:
        print_warning("Existing hook is not a convinci hook. Leaving it untouched.")
    else:
        print(dim("No convinci hook found"))
    return 0


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .convincirc found)")

    env_emoji = os.environ.get('CONVINCI_EMOJI')
    env_dry_run = os.environ.get('CONVINCI_DRY_RUN')
    if env_emoji or env_dry_run:
        print(f"  {dim('Environment overrides:')}")
        if env_emoji:
            print(f"    CONVINCI_EMOJI={env_emoji}")
        if env_dry_run:
            print(f"    CONVINCI_DRY_RUN={env_dry_run}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    use_emoji:      {info(str(config.use_emoji).lower())}")
    print(f"    dry_run:        {info(str(config.dry_run).lower())}")
    print(f"    show_help:      {info(str(config.show_help).lower())}")
    print(f"    compact_height: {info(str(config.compact_height))}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .convincirc (in current directory)")
    print(f"    Global: ~/.convincirc\n")

    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')

    print(f"\n{bold('Tab Completion Setup')}\n")

    line = 'eval "$(register-python-argcomplete convinci)"'
    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish convinci | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
