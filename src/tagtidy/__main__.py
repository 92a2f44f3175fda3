"""Module entry point for ``python -m tagtidy``."""

import sys

from tagtidy.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
