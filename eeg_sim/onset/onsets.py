"""
Inter-onset distance models

An onset model draws the distances between consecutive events. The onsets
are the running sum of those distances, each increased by the model's
``offset``, so the first event starts at ``offset + gap[0]``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from ..core.config import UNIFORM_ONSET_WIDTH, UNIFORM_ONSET_OFFSET
from ..core.exceptions import InvalidOnsetError


class Onset(ABC):
    """Interface for inter-onset distance models"""

    offset: int = 0

    @abstractmethod
    def draw_gaps(self, rng: np.random.Generator, n_events: int) -> np.ndarray:
        """Draw ``n_events`` inter-onset distances (before ``offset`` is added)"""


@dataclass(frozen=True)
class UniformOnset(Onset):
    """Integer gaps drawn uniformly from ``[0, width]``"""
    width: int = UNIFORM_ONSET_WIDTH
    offset: int = UNIFORM_ONSET_OFFSET

    def draw_gaps(self, rng: np.random.Generator, n_events: int) -> np.ndarray:
        return rng.integers(0, self.width, size=n_events, endpoint=True)


@dataclass(frozen=True)
class LogNormalOnset(Onset):
    """
    Gaps drawn from a log-normal distribution

    Args:
        mu: Mean of the underlying normal distribution
        sigma: Standard deviation of the underlying normal distribution
        offset: Minimum separation added to every gap
        truncate_upper: Optional upper bound; larger draws are set to this value
    """
    mu: float
    sigma: float
    offset: int = 0
    truncate_upper: Optional[float] = None

    def draw_gaps(self, rng: np.random.Generator, n_events: int) -> np.ndarray:
        gaps = rng.lognormal(self.mu, self.sigma, size=n_events)
        if self.truncate_upper is not None:
            gaps = np.minimum(gaps, self.truncate_upper)
        return gaps


@dataclass(frozen=True)
class DistributionOnset(Onset):
    """
    Gaps drawn from an arbitrary distribution

    ``distribution`` must expose ``rvs(size=..., random_state=...)``, like a
    frozen ``scipy.stats`` distribution. Negative draws are rejected.
    """
    distribution: Any
    offset: int = 0

    def draw_gaps(self, rng: np.random.Generator, n_events: int) -> np.ndarray:
        return np.asarray(self.distribution.rvs(size=n_events, random_state=rng), dtype=float)


@dataclass(frozen=True)
class FixedOnset(Onset):
    """Literal inter-onset distances, used in order"""
    gaps: Sequence[int]
    offset: int = 0

    def draw_gaps(self, rng: np.random.Generator, n_events: int) -> np.ndarray:
        if len(self.gaps) < n_events:
            raise InvalidOnsetError(f"Only {len(self.gaps)} fixed gaps for {n_events} events")
        return np.asarray(self.gaps[:n_events])


def simulate_interonset_distances(rng: np.random.Generator, onset: Onset, n_events: int) -> np.ndarray:
    """
    Draw the integer distances between consecutive events

    Raises:
        InvalidOnsetError: If a drawn gap or the offset is negative, or if an
            event after the first would coincide with its predecessor
    """
    if onset.offset < 0:
        raise InvalidOnsetError(f"Onset offset must be non-negative, got {onset.offset}")

    # Checked before rounding: draws in (-0.5, 0) would otherwise round to 0
    raw = np.asarray(onset.draw_gaps(rng, n_events), dtype=float)
    if raw.shape != (n_events,):
        raise InvalidOnsetError(f"Expected {n_events} gaps, got shape {raw.shape}")
    if not np.all(np.isfinite(raw)):
        raise InvalidOnsetError("Onset distribution produced non-finite gaps")
    if np.any(raw < 0):
        raise InvalidOnsetError(f"Onset distribution produced negative gaps: {raw[raw < 0][:5]}")

    distances = np.rint(raw).astype(np.int64) + int(onset.offset)
    if np.any(distances[1:] == 0):
        raise InvalidOnsetError(
            "Zero inter-onset distance would place two events at the same sample; increase the offset"
        )
    return distances


def simulate_onsets(rng: np.random.Generator, onset: Onset, n_events: int) -> np.ndarray:
    """
    Draw strictly increasing, non-negative event onsets (in samples)

    Args:
        rng: Random stream
        onset: Inter-onset distance model
        n_events: Number of events

    Returns:
        np.ndarray: int64 onsets [n_events]
    """
    onsets = np.cumsum(simulate_interonset_distances(rng, onset, n_events))
    if n_events:
        logging.debug(f"Simulated {n_events} onsets between {onsets[0]} and {onsets[-1]}")
    return onsets
