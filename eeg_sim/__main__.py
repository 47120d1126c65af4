"""
Main entry point for EEG Sim package

This allows running the package with: python -m eeg_sim
"""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
