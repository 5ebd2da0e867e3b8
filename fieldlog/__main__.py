"""Allows `python -m fieldlog`."""

import sys

from fieldlog.cli import main

if __name__ == "__main__":
    sys.exit(main())
