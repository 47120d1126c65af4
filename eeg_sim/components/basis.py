"""
Basis functions for response components

A basis is the template waveform of a component before it is scaled by the
per-trial weights. The ERP-like templates below are Hann windows placed so
that their peak sits at the given latency.
"""

import numpy as np
from scipy.signal import windows

from ..core.config import SFREQ


def hanning(width: float, offset: float, sfreq: float = SFREQ) -> np.ndarray:
    """
    Hann window peaking at ``offset``

    Args:
        width: Window width in seconds
        offset: Latency of the peak in seconds
        sfreq: Sampling frequency in Hz

    Returns:
        np.ndarray: zero-padded window with its maximum at ``offset * sfreq``

    Raises:
        ValueError: If the peak lies closer to zero than half the window width
    """
    n_width = int(round(width * sfreq))
    n_offset = int(round(offset * sfreq))
    window = windows.hann(n_width, sym=True)
    pad_by = int(round(n_offset - n_width / 2))
    if pad_by < 0:
        raise ValueError(f"Offset ({offset}s) must be at least half the width ({width}s)")
    return np.concatenate([np.zeros(pad_by), window])


def p100(sfreq: float = SFREQ) -> np.ndarray:
    """Positive deflection peaking at 100 ms"""
    return hanning(0.1, 0.1, sfreq)


def n170(sfreq: float = SFREQ) -> np.ndarray:
    """Negative deflection peaking at 170 ms"""
    return -hanning(0.15, 0.17, sfreq)


def p300(sfreq: float = SFREQ) -> np.ndarray:
    """Positive deflection peaking at 300 ms"""
    return hanning(0.3, 0.3, sfreq)


def n400(sfreq: float = SFREQ) -> np.ndarray:
    """Negative deflection peaking at 400 ms"""
    return -hanning(0.4, 0.4, sfreq)
