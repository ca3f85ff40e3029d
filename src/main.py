"""
DeskUtils - desktop application utilities.
Entry point for the demo application.
"""

import sys

from app import run_app

if __name__ == "__main__":
    sys.exit(run_app())
