"""
Command-line interface for EEG simulation
"""

from .main import main

__all__ = ['main']
