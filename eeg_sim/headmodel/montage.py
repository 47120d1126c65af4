"""
Dipole head model on standard electrode positions

Builds a LeadfieldHeadmodel from the electrode positions of an mne
standard montage, treating the head as an infinite homogeneous conductor.
This is a coarse approximation that is good enough to give artifacts and
components a plausible spatial topography.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import mne

from ..core.config import CONDUCTIVITY, DEFAULT_CHANNELS, DEFAULT_SOURCES, EYE_RADIUS, MONTAGE
from .headmodel import LeadfieldHeadmodel


def electrode_positions(ch_names: Sequence[str], montage: str = MONTAGE) -> np.ndarray:
    """
    Electrode positions of an mne standard montage

    Returns:
        np.ndarray: positions in head coordinates [n_channels x 3] (meters)

    Raises:
        ValueError: If a channel is not part of the montage
    """
    ch_pos = mne.channels.make_standard_montage(montage).get_positions()["ch_pos"]
    missing = [ch for ch in ch_names if ch not in ch_pos]
    if missing:
        raise ValueError(f"Channels {missing} not in montage '{montage}'")
    return np.array([ch_pos[ch] for ch in ch_names])


def dipole_leadfield(electrodes: np.ndarray, sources: np.ndarray,
                     conductivity: float = CONDUCTIVITY) -> np.ndarray:
    """
    Leadfield of current dipoles in an infinite homogeneous medium

    V = (r - r0) · p / (4 pi sigma |r - r0|^3)

    Returns:
        np.ndarray: leadfield [n_channels x n_sources x 3]
    """
    diff = electrodes[:, np.newaxis, :] - sources[np.newaxis, :, :]
    dist = np.linalg.norm(diff, axis=2, keepdims=True)
    return diff / (4 * np.pi * conductivity * dist ** 3)


def _expand_sources(sources: Dict[str, List[Tuple[float, float, float]]], include_eyes: bool):
    labels, positions, orientations = [], [], []
    anterior = np.array([0.0, 1.0, 0.0])

    for label, points in sources.items():
        for point in points:
            point = np.asarray(point, dtype=float)
            if label == "eye_center":
                normal = anterior
            else:
                normal = point / np.linalg.norm(point)  # radial
            labels.append(label)
            positions.append(point)
            orientations.append(normal)

    if include_eyes:
        for center in sources.get("eye_center", []):
            center = np.asarray(center, dtype=float)
            for label, sign in (("cornea", 1.0), ("retina", -1.0)):
                labels.append(label)
                positions.append(center + sign * EYE_RADIUS * anterior)
                orientations.append(sign * anterior)

    return labels, np.array(positions), np.array(orientations)


def make_dipole_headmodel(
    ch_names: Optional[Sequence[str]] = None,
    sources: Optional[Dict[str, List[Tuple[float, float, float]]]] = None,
    conductivity: float = CONDUCTIVITY,
    montage: str = MONTAGE,
    include_eyes: bool = True,
    normalize: bool = True
) -> LeadfieldHeadmodel:
    """
    Build a dipole head model on standard electrode positions

    Args:
        ch_names: Channels to model (default: standard 10-20 layout)
        sources: Source label -> list of positions (meters, head coordinates).
            Sources labelled ``eye_center`` point anteriorly, all others radially.
        conductivity: Tissue conductivity in S/m
        montage: Name of the mne standard montage
        include_eyes: Add ``cornea`` and ``retina`` sources around every eye center
        normalize: Scale the leadfield so its largest absolute entry is 1

    Returns:
        LeadfieldHeadmodel
    """
    ch_names = list(ch_names or DEFAULT_CHANNELS)
    sources = sources or DEFAULT_SOURCES

    electrodes = electrode_positions(ch_names, montage)
    labels, positions, orientations = _expand_sources(sources, include_eyes)
    leadfield = dipole_leadfield(electrodes, positions, conductivity)

    if normalize:
        leadfield = leadfield / np.max(np.abs(leadfield))

    logging.info(f"Dipole head model: {len(ch_names)} channels, {len(labels)} sources "
                 f"({len(set(labels))} labels)")
    return LeadfieldHeadmodel(leadfield, labels, orientations, ch_names)
