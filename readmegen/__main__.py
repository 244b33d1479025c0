"""
Entry point for running readmegen as a module.

Usage:
    python -m readmegen project.json [options]
"""

import sys

from readmegen.cli import main

if __name__ == "__main__":
    sys.exit(main())
