"""Allow running as ``python -m convinci``."""

import sys

from convinci.cli import main

if __name__ == "__main__":
    sys.exit(main())
