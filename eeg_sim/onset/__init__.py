"""
Inter-onset distance models and onset sampling
"""

from .onsets import (
    Onset, UniformOnset, LogNormalOnset, DistributionOnset, FixedOnset,
    simulate_interonset_distances, simulate_onsets,
)

__all__ = [
    'Onset', 'UniformOnset', 'LogNormalOnset', 'DistributionOnset', 'FixedOnset',
    'simulate_interonset_distances', 'simulate_onsets',
]
