"""
Forward (head) models

A head model maps source activity to channel space. Sources are grouped
under labels (e.g. a brain region or ``eye_center``); projecting a label
sums the contributions of all its sources.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np


class Headmodel(ABC):
    """Interface for forward models"""

    @property
    @abstractmethod
    def n_channels(self) -> int:
        """Number of channels"""

    @abstractmethod
    def forward(self, source: np.ndarray, label: str) -> np.ndarray:
        """
        Project one source sample into channel space

        Args:
            source: Dipole moment vector (3,) applied to every source of ``label``
            label: Source label

        Returns:
            np.ndarray: channel values (n_channels,)
        """

    @abstractmethod
    def magnitude(self, label: str) -> np.ndarray:
        """Channel projection of a label's sources at their normal orientation"""


class LeadfieldHeadmodel(Headmodel):
    """
    Linear head model backed by a leadfield matrix

    Args:
        leadfield: Leadfield [n_channels x n_sources x 3]
        source_labels: Label of every source (n_sources,)
        orientations: Normal orientation of every source [n_sources x 3]
        channel_names: Optional channel names
    """

    def __init__(self, leadfield: np.ndarray, source_labels: Sequence[str],
                 orientations: Optional[np.ndarray] = None,
                 channel_names: Optional[List[str]] = None):
        self.leadfield = np.asarray(leadfield, dtype=float)
        self.source_labels = list(source_labels)
        self.orientations = None if orientations is None else np.asarray(orientations, dtype=float)
        self.channel_names = channel_names

        if self.leadfield.ndim != 3 or self.leadfield.shape[2] != 3:
            raise ValueError(f"Leadfield must be (channels x sources x 3), got {self.leadfield.shape}")
        if len(self.source_labels) != self.leadfield.shape[1]:
            raise ValueError(
                f"{len(self.source_labels)} labels for {self.leadfield.shape[1]} leadfield sources"
            )

    @property
    def n_channels(self) -> int:
        return self.leadfield.shape[0]

    @property
    def labels(self) -> List[str]:
        """Distinct source labels in order of first appearance"""
        return list(dict.fromkeys(self.source_labels))

    def source_indices(self, label: str) -> List[int]:
        indices = [i for i, name in enumerate(self.source_labels) if name == label]
        if not indices:
            raise KeyError(f"Unknown source label '{label}'. Available labels: {self.labels}")
        return indices

    def forward(self, source: np.ndarray, label: str) -> np.ndarray:
        source = np.asarray(source, dtype=float)
        if source.shape != (3,):
            raise ValueError(f"Source moment must be a 3-vector, got shape {source.shape}")
        idx = self.source_indices(label)
        return self.leadfield[:, idx, :].sum(axis=1) @ source

    def magnitude(self, label: str) -> np.ndarray:
        if self.orientations is None:
            raise ValueError("Head model has no source orientations")
        idx = self.source_indices(label)
        return np.einsum('csk,sk->c', self.leadfield[:, idx, :], self.orientations[idx])
