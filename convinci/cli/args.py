"""CLI Argument Parsing"""

import argparse
import argcomplete

from convinci import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='convinci',
        description='Compose Conventional Commits messages field by field',
        epilog='Example: convinci --demo (print the message instead of committing)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Session options
    parser.add_argument('-d', '--demo', action='store_true', help='Dry run: print the commit message, do not commit')
    parser.add_argument('-e', '--emoji', action='store_true', help='Prefix the header with an icon for the commit type')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug logging (use CONVINCI_LOG_FILE during the session)')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')

    validate = subparsers.add_parser('validate', help='Validate a commit message')
    validate.add_argument('message', metavar='MESSAGE', help="Commit message, or '-' to read it from stdin")

    hooks = subparsers.add_parser('hooks', help='Manage the commit-msg validation hook')
    hooks.add_argument('action', choices=['install', 'uninstall'], help='Install or uninstall the hook')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
