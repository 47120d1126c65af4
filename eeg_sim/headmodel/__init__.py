"""
Forward (head) models

The mne-backed builder lives in ``eeg_sim.headmodel.montage`` and is
imported on demand.
"""

from .headmodel import Headmodel, LeadfieldHeadmodel

__all__ = ['Headmodel', 'LeadfieldHeadmodel']
