"""
Main entry point for running the package as a module.

Usage:
    python -m synothumb /volume1/photo
    python -m synothumb --force /volume1/photo
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
