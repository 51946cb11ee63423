"""Entry point for `python -m weekgrid`."""

import sys

from weekgrid.cli import main

if __name__ == "__main__":
    sys.exit(main())
