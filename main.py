"""Command-line Entry Point - Root Module.

It imports from the disaster_alerts package.
"""

import sys

from disaster_alerts.main import main

__all__ = [
    "main",
]


if __name__ == "__main__":
    sys.exit(main())
