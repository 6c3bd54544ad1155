"""Entry point for running simple_database as a module."""

import sys

from simple_database.demo import main

if __name__ == "__main__":
    sys.exit(main())
