"""
Background noise models

Every noise model generates a unit-scale signal with its own spectral or
statistical character; ``noiselevel`` is applied afterwards, uniformly, so
the noise level never interacts with the spectral shape.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from scipy import signal as sp_signal

from ..core.config import NOISELEVEL
from ..core.continuous import ContinuousSource
from ..core.data_types import as_channel_matrix
from ..core.exceptions import InsufficientLengthError


class Noise(ContinuousSource):
    """
    Base class for noise models

    Attributes:
        noiselevel: Scaling applied after generation
        n_channels: Fixed channel count, or None to match the simulated signal
            (independent noise in every channel)
    """

    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    @abstractmethod
    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        """Generate unscaled noise [n_channels x n_samples]"""

    def output_channels(self) -> Optional[int]:
        return self.n_channels

    def simulate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        if self.n_channels is not None:
            n_channels = self.n_channels
        noise = as_channel_matrix(self.generate(rng, n_samples, n_channels))
        logging.debug(f"{type(self).__name__}: {noise.shape}, noiselevel={self.noiselevel}")
        return self.noiselevel * noise


@dataclass(frozen=True)
class NoNoise(Noise):
    """Silent background"""
    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        return np.zeros((1, n_samples))


@dataclass(frozen=True)
class WhiteNoise(Noise):
    """Independent standard normal samples"""
    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        return rng.standard_normal((n_channels, n_samples))


@dataclass(frozen=True)
class PowerLawNoise(Noise):
    """
    Gaussian noise with a 1/f^exponent power spectrum

    The spectrum is shaped in the frequency domain (random complex Gaussian
    coefficients scaled by f^(-exponent/2), DC removed) and every channel is
    normalized to unit standard deviation. Fewer than two samples carry no
    non-DC frequency, so such requests return zeros.
    """
    exponent: float = 1.0
    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        if n_samples < 2:
            return np.zeros((n_channels, n_samples))

        freqs = np.fft.rfftfreq(n_samples)
        scale = np.zeros_like(freqs)
        scale[1:] = freqs[1:] ** (-self.exponent / 2)

        coeffs = rng.standard_normal((n_channels, freqs.size)) \
            + 1j * rng.standard_normal((n_channels, freqs.size))
        noise = np.fft.irfft(coeffs * scale, n=n_samples, axis=1)

        std = noise.std(axis=1, keepdims=True)
        std[std == 0] = 1.0
        return noise / std


@dataclass(frozen=True)
class PinkNoise(PowerLawNoise):
    """1/f noise"""
    exponent: float = 1.0


@dataclass(frozen=True)
class RedNoise(PowerLawNoise):
    """1/f^2 (Brownian) noise"""
    exponent: float = 2.0


@dataclass(frozen=True)
class AutoRegressiveNoise(Noise):
    """
    Autoregressive process driven by white noise

    ``x[t] = sum_k coefficients[k] * x[t-1-k] + e[t]``. The first ``burn_in``
    samples are discarded so the returned segment is close to stationary.
    """
    coefficients: Sequence[float] = (0.5,)
    burn_in: int = 100
    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        a = np.concatenate([[1.0], -np.asarray(self.coefficients, dtype=float)])
        white = rng.standard_normal((n_channels, n_samples + self.burn_in))
        noise = sp_signal.lfilter([1.0], a, white, axis=1)
        return noise[:, self.burn_in:]


@dataclass(frozen=True)
class UserDefinedNoise(Noise):
    """
    Pre-computed noise, e.g. resting-state recordings

    The first ``n_samples`` are used; shorter signals are rejected rather than
    looped or extrapolated.
    """
    signal: Sequence[float]
    noiselevel: float = NOISELEVEL
    n_channels: Optional[int] = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        noise = as_channel_matrix(self.signal)
        if noise.shape[1] < n_samples:
            raise InsufficientLengthError(
                f"User-defined noise has {noise.shape[1]} samples, {n_samples} required"
            )
        return noise[:, :n_samples].copy()
