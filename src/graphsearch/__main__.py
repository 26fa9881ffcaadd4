"""Entry point for ``python -m graphsearch``."""

import sys

from graphsearch.cli import main

if __name__ == "__main__":
    sys.exit(main())
