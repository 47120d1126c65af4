"""
Control signals driving artifact generation

A control signal describes a time-varying physical state, sampled at the
rate of the simulated signal. It always starts at the first sample of the
simulation; ``start`` records this anchor and is checked before use.
"""

from dataclasses import dataclass

import numpy as np

from ..core.config import HREF_DISTANCE


@dataclass(frozen=True)
class HREFCoordinates:
    """
    Head-referenced eye tracker coordinates

    Args:
        val: Gaze coordinates [2 x n_samples] (horizontal, vertical) on a plane
            ``distance`` HREF units in front of the eye
        distance: Eye-to-plane distance in HREF units
        start: Sample at which the control signal starts (must be 0)
    """
    val: np.ndarray
    distance: float = HREF_DISTANCE
    start: int = 0

    @property
    def n_samples(self) -> int:
        return np.asarray(self.val).shape[1]

    def gaze_vectors(self) -> np.ndarray:
        """
        Unit gaze direction vectors [3 x n_samples]

        Head coordinates: x to the right, y anterior, z up.
        """
        val = np.asarray(self.val, dtype=float)
        if val.ndim != 2 or val.shape[0] != 2:
            raise ValueError(f"HREF coordinates must be (2 x samples), got {val.shape}")
        vectors = np.vstack([val[0], np.full(val.shape[1], self.distance), val[1]])
        return vectors / np.linalg.norm(vectors, axis=0, keepdims=True)


@dataclass(frozen=True)
class GazeDirectionVectors:
    """Gaze direction vectors [3 x n_samples] in head coordinates"""
    val: np.ndarray
    start: int = 0

    @property
    def n_samples(self) -> int:
        return np.asarray(self.val).shape[1]

    def gaze_vectors(self) -> np.ndarray:
        val = np.asarray(self.val, dtype=float)
        if val.ndim != 2 or val.shape[0] != 3:
            raise ValueError(f"Gaze direction vectors must be (3 x samples), got {val.shape}")
        return val
