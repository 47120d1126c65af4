"""
Signal composition

The compositor runs a Simulation: it enumerates the events of the design,
draws their onsets, places the summed component responses into a
continuous base signal, generates noise and artifacts over the same span,
broadcasts everything to a common channel count and sums it up.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..components.components import Component, common_channel_count, simulate_responses
from ..core.continuous import ContinuousSource
from ..core.data_types import Simulation
from ..core.exceptions import ShapeMismatchError
from ..design.designs import Design
from ..onset.onsets import Onset, simulate_onsets


def place_responses(responses: np.ndarray, onsets: np.ndarray, n_samples: int) -> np.ndarray:
    """
    Add every event's response into a continuous signal at its onset

    Overlapping responses add up sample by sample.

    Args:
        responses: [n_channels x length x n_events]
        onsets: Onset sample of every event
        n_samples: Length of the continuous signal

    Returns:
        np.ndarray: continuous signal [n_channels x n_samples]
    """
    n_channels, length, n_events = responses.shape
    signal = np.zeros((n_channels, n_samples))
    for i, onset in enumerate(onsets):
        signal[:, onset:onset + length] += responses[:, :, i]
    return signal


def compose(
    rng: np.random.Generator,
    design: Design,
    components: Union[Component, Sequence[Component]],
    onset: Onset,
    noise: Optional[ContinuousSource] = None,
    artifacts: Sequence[ContinuousSource] = ()
) -> Tuple[np.ndarray, pd.DataFrame, List[np.ndarray]]:
    """
    Simulate a continuous multichannel signal

    Args:
        rng: Random stream; the only source of randomness
        design: Experimental design
        components: Response component(s)
        onset: Inter-onset distance model
        noise: Optional background noise
        artifacts: Artifact (or noise) sources, summed in the given order

    Returns:
        Tuple of:
        - signal: composite signal [channels x samples] (1D if single channel)
        - events: event table, design factors plus the ``latency`` column
        - per_source: base signal, then noise, then each artifact, all
          broadcast to the composite shape; they sum to ``signal``

    Raises:
        ShapeMismatchError: If the sources' channel counts cannot be broadcast
    """
    simulation = Simulation(design, components, onset, noise, artifacts)

    events = simulation.design.generate_events(rng)
    n_events = len(events)
    onsets = simulate_onsets(rng, simulation.onset, n_events)
    responses = simulate_responses(rng, simulation.components, events)
    n_channels, length, _ = responses.shape

    sources = ([simulation.noise] if simulation.noise is not None else []) + list(simulation.artifacts)
    response_end = int(onsets[-1]) + length if n_events else 0
    n_samples = max([response_end] + [source.required_length() for source in sources])
    logging.info(f"Simulating {n_events} events, {n_samples} samples, {len(sources)} continuous sources")

    # Sources that follow the target (e.g. noise) get the widest declared channel count
    declared = [source.output_channels() for source in sources]
    target_channels = common_channel_count([n_channels] + [c for c in declared if c is not None])

    signals = [place_responses(responses, onsets, n_samples)]
    for source in sources:
        source_signal = np.asarray(source.simulate(rng, n_samples, target_channels), dtype=float)
        if source_signal.ndim != 2 or source_signal.shape[1] != n_samples:
            raise ShapeMismatchError(
                f"{type(source).__name__} produced shape {source_signal.shape}, "
                f"expected (channels x {n_samples})"
            )
        signals.append(source_signal)

    total_channels = common_channel_count([s.shape[0] for s in signals])
    per_source = [np.broadcast_to(s, (total_channels, n_samples)).copy() for s in signals]

    signal = np.zeros((total_channels, n_samples))
    for source_signal in per_source:
        signal = signal + source_signal

    events = events.copy()
    events["latency"] = onsets.astype(np.int64)
    logging.info(f"Composite signal shape: {signal.shape}")

    if total_channels == 1:
        return signal[0], events, [s[0] for s in per_source]
    return signal, events, per_source


def simulate(rng: np.random.Generator, *args, **kwargs):
    """
    Run a simulation

    Either ``simulate(rng, simulation)`` with a Simulation bundle, or
    ``simulate(rng, design, components, onset, noise=None, artifacts=())``.
    See ``compose`` for the return value.
    """
    if len(args) == 1 and not kwargs and isinstance(args[0], Simulation):
        sim = args[0]
        return compose(rng, sim.design, sim.components, sim.onset, sim.noise, sim.artifacts)
    return compose(rng, *args, **kwargs)
