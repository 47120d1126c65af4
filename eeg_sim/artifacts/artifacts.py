"""
Continuous artifact sources

Each artifact is driven by its own control signal (a gaze trajectory, an
oscillator, a drift process) that starts at the first sample of the
simulation, independently of the events.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np
from scipy import signal as sp_signal

from ..core.config import (
    EYE_MODEL, EYE_SOURCE_LABELS, POWERLINE_BASE_FREQ, POWERLINE_HARMONICS,
    POWERLINE_SAMPLING_RATE,
)
from ..core.continuous import ContinuousSource
from ..core.data_types import as_channel_matrix
from ..core.exceptions import ConfigMismatchError, ControlSignalError


class Artifact(ContinuousSource):
    """
    Base class for artifact sources

    Subclasses implement ``generate``; ``simulate`` first checks that the
    control signal is anchored at sample 0 and then fits the result to the
    requested length (zero after a finite control signal ends).
    """

    @abstractmethod
    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        """Generate the artifact [channels x samples]"""

    def check_controlsignal(self) -> None:
        start = getattr(getattr(self, "controlsignal", None), "start", 0)
        if start != 0:
            raise ControlSignalError(
                f"{type(self).__name__} control signal starts at sample {start}, must start at 0"
            )

    def simulate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        self.check_controlsignal()
        artifact = as_channel_matrix(self.generate(rng, n_samples, n_channels))

        if artifact.shape[1] < n_samples:
            padded = np.zeros((artifact.shape[0], n_samples))
            padded[:, :artifact.shape[1]] = artifact
            artifact = padded
        logging.debug(f"{type(self).__name__}: {artifact.shape}")
        return artifact[:, :n_samples]


@dataclass(frozen=True)
class EyeMovement(Artifact):
    """
    Eye movement artifact from a gaze trajectory

    At every sample the gaze direction is used as the dipole moment of the
    eye sources selected by ``eye_model`` and projected through the head model.

    Args:
        controlsignal: HREFCoordinates or GazeDirectionVectors
        headmodel: Forward model providing the eye sources
        eye_model: ``"crd"`` (corneoretinal dipole at the eye centers) or
            ``"ensemble"`` (cornea driven positively, retina negatively)
    """
    controlsignal: Any
    headmodel: Any
    eye_model: str = EYE_MODEL

    def required_length(self) -> int:
        return self.controlsignal.n_samples

    def output_channels(self) -> Optional[int]:
        return self.headmodel.n_channels

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        if self.eye_model not in EYE_SOURCE_LABELS:
            raise ConfigMismatchError(
                f"Unknown eye model '{self.eye_model}'. Available: {sorted(EYE_SOURCE_LABELS)}"
            )
        sources = EYE_SOURCE_LABELS[self.eye_model]
        gaze = self.controlsignal.gaze_vectors()

        n_used = min(gaze.shape[1], n_samples)
        artifact = np.zeros((self.headmodel.n_channels, n_used))
        for t in range(n_used):
            for label, polarity in sources:
                artifact[:, t] += polarity * self.headmodel.forward(gaze[:, t], label)
        return artifact


@dataclass(frozen=True)
class PowerLineNoise(Artifact):
    """
    Power line interference: sinusoids at the mains frequency and its harmonics

    Args:
        base_freq: Mains frequency in Hz
        harmonics: Harmonic multipliers of ``base_freq``
        weights_harmonics: Amplitude of each harmonic (default: all ones)
        sampling_rate: Sampling rate in Hz
        channel_weights: Optional per-channel amplitude; without it the signal is
            a single channel, replicated identically across channels
    """
    base_freq: float = POWERLINE_BASE_FREQ
    harmonics: Sequence[int] = POWERLINE_HARMONICS
    weights_harmonics: Optional[Sequence[float]] = None
    sampling_rate: float = POWERLINE_SAMPLING_RATE
    channel_weights: Optional[Sequence[float]] = None
    controlsignal: Any = None

    def output_channels(self) -> Optional[int]:
        return 1 if self.channel_weights is None else len(self.channel_weights)

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        harmonics = np.asarray(self.harmonics, dtype=float).ravel()
        if self.weights_harmonics is None:
            weights = np.ones_like(harmonics)
        else:
            weights = np.asarray(self.weights_harmonics, dtype=float).ravel()
        if weights.size != harmonics.size:
            raise ConfigMismatchError(
                f"{harmonics.size} harmonics but {weights.size} harmonic weights"
            )

        t = np.arange(n_samples) / self.sampling_rate
        phases = 2 * np.pi * self.base_freq * harmonics[:, np.newaxis] * t[np.newaxis, :]
        line = weights @ np.sin(phases)

        if self.channel_weights is None:
            return line[np.newaxis, :]
        channel_weights = np.asarray(self.channel_weights, dtype=float)
        return channel_weights[:, np.newaxis] * line[np.newaxis, :]


@dataclass(frozen=True)
class ARDriftNoise(Artifact):
    """
    Autoregressive drift ``x[t] = coefficient * x[t-1] + sigma * e[t]``

    The default coefficient of 1 gives a random walk.
    """
    sigma: float = 1.0
    coefficient: float = 1.0
    controlsignal: Any = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        innovations = self.sigma * rng.standard_normal(n_samples)
        return sp_signal.lfilter([1.0], [1.0, -self.coefficient], innovations)[np.newaxis, :]


@dataclass(frozen=True)
class LinearDriftNoise(Artifact):
    """Linear ramp from 0 to ``scaling_factor`` over the simulation"""
    scaling_factor: float = 1.0
    controlsignal: Any = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        return self.scaling_factor * np.linspace(0.0, 1.0, n_samples)[np.newaxis, :]


@dataclass(frozen=True)
class DCDriftNoise(Artifact):
    """Constant offset"""
    scaling_factor: float = 1.0
    controlsignal: Any = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        return np.full((1, n_samples), float(self.scaling_factor))


@dataclass(frozen=True)
class DriftNoise(Artifact):
    """
    Sum of autoregressive, linear and DC drift

    Pass None for a part to leave it out.
    """
    ar: Optional[ARDriftNoise] = ARDriftNoise(sigma=1.0)
    linear: Optional[LinearDriftNoise] = LinearDriftNoise()
    dc: Optional[DCDriftNoise] = DCDriftNoise()
    controlsignal: Any = None

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        drift = np.zeros((1, n_samples))
        for part in (self.ar, self.linear, self.dc):
            if part is not None:
                drift = drift + part.simulate(rng, n_samples, n_channels)
        return drift


@dataclass(frozen=True)
class UserDefinedContinuousSignal(Artifact):
    """Pre-computed artifact signal (e.g. a recorded artifact), used unchanged"""
    signal: Sequence[float]
    controlsignal: Any = None

    def required_length(self) -> int:
        return as_channel_matrix(self.signal).shape[1]

    def output_channels(self) -> Optional[int]:
        return as_channel_matrix(self.signal).shape[0]

    def generate(self, rng: np.random.Generator, n_samples: int, n_channels: int) -> np.ndarray:
        return as_channel_matrix(self.signal).copy()
