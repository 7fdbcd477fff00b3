"""Main entry point for the graphwalk package when run as a module.

This module enables running graphwalk directly using 'python -m graphwalk'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
