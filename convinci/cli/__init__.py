"""Command Line Interface Package"""

from convinci.cli.main import main

__all__ = ["main"]
