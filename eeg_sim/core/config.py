"""
Configuration constants for EEG simulation

This module contains the default parameters used by the simulation building
blocks. Users may override any of them by passing explicit arguments.
"""

from typing import Tuple

# ============================================================================
# SAMPLING
# ============================================================================

SFREQ = 100                       # Default sampling rate for basis functions (Hz)

# ============================================================================
# ONSETS
# ============================================================================

UNIFORM_ONSET_WIDTH = 50          # Width of the uniform inter-onset distribution (samples)
UNIFORM_ONSET_OFFSET = 1          # Minimum separation added to every gap; keeps onsets distinct

# ============================================================================
# NOISE
# ============================================================================

NOISELEVEL = 1.0                  # Uniform noise scaling applied after generation

# ============================================================================
# ARTIFACTS
# ============================================================================

# Power line interference
POWERLINE_BASE_FREQ = 50.0        # Mains frequency (50 Hz EU, 60 Hz US)
POWERLINE_HARMONICS: Tuple[int, ...] = (1, 3, 5)
POWERLINE_SAMPLING_RATE = 1000.0  # Sampling rate the sinusoids are evaluated at (Hz)

# Eye movement
HREF_DISTANCE = 15000.0           # Head-referenced (HREF) eye-to-plane distance, in HREF units
EYE_MODEL = "crd"                 # Corneoretinal dipole model

# Eye model identifier -> (headmodel source label, polarity) driven by the gaze vector.
# The cornea is positive and the retina negative relative to the gaze direction.
EYE_SOURCE_LABELS = {
    "crd": (("eye_center", 1.0),),
    "ensemble": (("cornea", 1.0), ("retina", -1.0)),
}

# ============================================================================
# HEAD MODEL
# ============================================================================

CONDUCTIVITY = 0.33               # Homogeneous tissue conductivity (S/m)
MONTAGE = "standard_1020"         # mne montage used for electrode positions

DEFAULT_CHANNELS = [
    'Fp1', 'Fp2', 'F7', 'F3', 'Fz', 'F4', 'F8',
    'T7', 'C3', 'Cz', 'C4', 'T8',
    'P7', 'P3', 'Pz', 'P4', 'P8',
    'O1', 'O2'
]

# Source positions in head coordinates (meters; x right, y anterior, z up)
# and their normal orientations
EYE_RADIUS = 0.012
DEFAULT_SOURCES = {
    "eye_center": [(-0.032, 0.075, -0.035), (0.032, 0.075, -0.035)],
    "Left Postcentral Gyrus": [(-0.045, -0.020, 0.060)],
    "Right Postcentral Gyrus": [(0.045, -0.020, 0.060)],
    "Left Occipital Pole": [(-0.020, -0.085, 0.010)],
    "Right Occipital Pole": [(0.020, -0.085, 0.010)],
}
