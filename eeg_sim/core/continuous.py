"""
Shared interface of continuous signal sources

Noise models and artifact generators both produce a continuous
(channels x samples) signal spanning the whole simulation, so the
compositor can treat them uniformly and sum them in the order given.
"""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class ContinuousSource(ABC):
    """A source of a continuous signal starting at the first sample"""

    def required_length(self) -> int:
        """Minimum number of samples the simulation must span for this source"""
        return 0

    def output_channels(self) -> Optional[int]:
        """Channel count the source always produces, or None if it follows the target"""
        return None

    @abstractmethod
    def simulate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        """
        Generate the signal

        Args:
            rng: Random stream
            n_samples: Length of the simulation in samples
            n_channels: Channel count of the rest of the simulation; sources may
                return this many channels or a single channel for broadcasting

        Returns:
            np.ndarray: signal [channels x n_samples]
        """
