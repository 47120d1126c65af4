"""
Simulation entry points
"""

from .compositor import compose, simulate, place_responses

__all__ = ['compose', 'simulate', 'place_responses']
