"""
Response components

A component turns the condition assignment of each event into a waveform:
its basis scaled by the linear predictor of a formula evaluated for that
event. Several components may be attached to one simulation; their
responses are summed before they are placed into the continuous signal.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..core.exceptions import ComponentConfigError, ShapeMismatchError
from .formula import design_matrix


class Component(ABC):
    """Interface for all response components"""

    @property
    @abstractmethod
    def n_channels(self) -> int:
        """Number of channels the component's responses span"""

    @abstractmethod
    def length(self) -> int:
        """Length of a single response in samples"""

    @abstractmethod
    def simulate(self, rng: np.random.Generator, events: pd.DataFrame) -> np.ndarray:
        """
        Simulate the responses to all events

        Args:
            rng: Random stream
            events: Event table (one row per event)

        Returns:
            np.ndarray: responses [n_channels x length x n_events]
        """


def _check_basis(basis) -> np.ndarray:
    basis = np.asarray(basis, dtype=float)
    if basis.ndim != 1:
        raise ComponentConfigError(f"Basis must be 1D, got {basis.ndim}D")
    if basis.size == 0:
        raise ComponentConfigError("Basis has zero length")
    return basis


@dataclass(frozen=True)
class LinearModelComponent(Component):
    """
    Basis scaled by a linear model of the event conditions

    For each event the response is ``basis * (x · beta)`` where ``x`` is the
    event's row of the formula's model matrix.

    Args:
        basis: Template waveform
        formula: Formula over the design factors, e.g. ``"0 ~ 1 + condition"``
        beta: One coefficient per model matrix column
        contrasts: Optional factor -> level order (first level is the reference)
        transform: Optional callable (responses [length x n_events], events) -> responses
            applied after the linear scaling
    """
    basis: Sequence[float]
    formula: str
    beta: Sequence[float]
    contrasts: Optional[Dict[str, Sequence[Any]]] = None
    transform: Optional[Callable[[np.ndarray, pd.DataFrame], np.ndarray]] = None

    @property
    def n_channels(self) -> int:
        return 1

    def length(self) -> int:
        return len(self.basis)

    def weights(self, rng: np.random.Generator, events: pd.DataFrame) -> np.ndarray:
        """Per-event scalar weights (linear predictor)"""
        X, names = design_matrix(self.formula, events, self.contrasts)
        beta = np.asarray(self.beta, dtype=float)
        if beta.ndim != 1 or beta.shape[0] != X.shape[1]:
            raise ComponentConfigError(
                f"Got {beta.size} coefficients for {X.shape[1]} model matrix columns {names}"
            )
        return X @ beta

    def simulate(self, rng: np.random.Generator, events: pd.DataFrame) -> np.ndarray:
        basis = _check_basis(self.basis)
        if len(events) == 0:
            return np.zeros((1, basis.size, 0))

        weights = self.weights(rng, events)
        responses = basis[:, np.newaxis] * weights[np.newaxis, :]

        if self.transform is not None:
            responses = np.asarray(self.transform(responses, events), dtype=float)
            if responses.shape != (basis.size, len(events)):
                raise ComponentConfigError(
                    f"Transform changed the response shape to {responses.shape}"
                )
        return responses[np.newaxis, :, :]


@dataclass(frozen=True)
class MixedModelComponent(LinearModelComponent):
    """
    Linear model component with random effects

    Every level of a grouping factor (e.g. ``subject``) gets its own
    deviation from the fixed effects ``beta``, drawn from a zero-mean normal
    distribution for each listed model matrix column.

    Args:
        random_effects: grouping factor -> {model matrix column: standard deviation},
            e.g. ``{"subject": {"(Intercept)": 1.0}}``
    """
    random_effects: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def weights(self, rng: np.random.Generator, events: pd.DataFrame) -> np.ndarray:
        weights = super().weights(rng, events)
        X, names = design_matrix(self.formula, events, self.contrasts)

        for group, sigmas in self.random_effects.items():
            if group not in events.columns:
                raise ComponentConfigError(f"Grouping factor '{group}' not in design")
            unknown = set(sigmas) - set(names)
            if unknown:
                raise ComponentConfigError(f"Random effects {sorted(unknown)} not in model matrix {names}")

            cols = [names.index(name) for name in sigmas]
            scale = np.array([sigmas[name] for name in sigmas], dtype=float)
            for level in sorted(events[group].unique(), key=str):
                mask = (events[group] == level).to_numpy()
                deviation = rng.normal(0.0, 1.0, size=len(cols)) * scale
                weights[mask] += X[np.ix_(mask, cols)] @ deviation

        return weights


@dataclass(frozen=True)
class MultichannelComponent(Component):
    """
    Project a single-channel component into channel space

    Args:
        component: Single-channel component providing the source waveform
        projection: Either an explicit channel weight vector, or a
            ``(headmodel, source_label)`` pair whose forward magnitude is used
    """
    component: Component
    projection: Union[Sequence[float], Tuple[Any, str]]

    def _uses_headmodel(self) -> bool:
        return isinstance(self.projection, tuple) and len(self.projection) == 2 \
            and isinstance(self.projection[1], str)

    def _projection(self) -> np.ndarray:
        if self._uses_headmodel():
            headmodel, label = self.projection
            return np.asarray(headmodel.magnitude(label), dtype=float)
        return np.asarray(self.projection, dtype=float)

    @property
    def n_channels(self) -> int:
        if self._uses_headmodel():
            return self.projection[0].n_channels
        return len(self.projection)

    def length(self) -> int:
        return self.component.length()

    def simulate(self, rng: np.random.Generator, events: pd.DataFrame) -> np.ndarray:
        source = self.component.simulate(rng, events)
        if source.shape[0] != 1:
            raise ComponentConfigError(
                f"Multichannel projection needs a single-channel source, got {source.shape[0]} channels"
            )
        projection = self._projection()
        if projection.ndim != 1:
            raise ComponentConfigError(f"Projection must be a channel vector, got shape {projection.shape}")
        return projection[:, np.newaxis, np.newaxis] * source[0][np.newaxis, :, :]


def common_channel_count(counts: Sequence[int]) -> int:
    """
    Channel count all sources can be broadcast to

    Raises:
        ShapeMismatchError: If more than one distinct count above one is present
    """
    multi = sorted(set(c for c in counts if c != 1))
    if len(multi) > 1:
        raise ShapeMismatchError(f"Cannot broadcast sources with channel counts {multi}")
    return multi[0] if multi else 1


def simulate_responses(
    rng: np.random.Generator,
    components: Sequence[Component],
    events: pd.DataFrame
) -> np.ndarray:
    """
    Sum the responses of all components

    Responses of different lengths are zero-padded to the longest one and
    single-channel components are broadcast to the common channel count.

    Returns:
        np.ndarray: summed responses [n_channels x max_length x n_events]
    """
    if not components:
        raise ComponentConfigError("At least one component is required")

    n_channels = common_channel_count([c.n_channels for c in components])
    responses = [c.simulate(rng, events) for c in components]
    max_length = max(r.shape[1] for r in responses)

    total = np.zeros((n_channels, max_length, len(events)))
    for r in responses:
        if r.shape[0] not in (1, n_channels):
            raise ShapeMismatchError(
                f"Component produced {r.shape[0]} channels, expected 1 or {n_channels}"
            )
        total[:, :r.shape[1], :] += r

    logging.debug(f"Simulated responses: {total.shape} (channels x samples x events)")
    return total
