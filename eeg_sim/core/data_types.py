"""
Core data types for EEG simulation

This module defines the value objects shared by all simulation stages:
single events and the declarative Simulation bundle.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Event:
    """A single simulated trial"""
    index: int                # Position in the design-generated sequence
    conditions: Dict[str, Any]  # Factor name -> level
    onset: int                # Onset sample (latency)


@dataclass(frozen=True)
class Simulation:
    """
    All ingredients of a simulation

    Purely declarative: it holds no random state and no generated buffers, so
    the same object can be simulated any number of times with different
    random streams.

    Fields:
    - design: experimental design producing the event conditions
    - components: response component(s) evoked by every event
    - onset: inter-onset distance model
    - noise: background noise model (or None)
    - artifacts: continuous artifact sources, summed in the given order
    """
    design: Any
    components: Tuple[Any, ...]
    onset: Any
    noise: Any = None
    artifacts: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept a single component / artifact as well as sequences
        object.__setattr__(self, "components", _as_tuple(self.components))
        object.__setattr__(self, "artifacts", _as_tuple(self.artifacts))


def _as_tuple(value) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def events_from_table(events: pd.DataFrame, latency_col: str = "latency") -> List[Event]:
    """
    Convert an event table into a list of Event records

    Args:
        events: Event table with one column per factor plus a latency column
        latency_col: Name of the onset column

    Returns:
        List of Event objects in table order
    """
    factors = [col for col in events.columns if col != latency_col]
    records = []
    for i, row in enumerate(events.to_dict("records")):
        records.append(Event(
            index=i,
            conditions={name: row[name] for name in factors},
            onset=int(row[latency_col]),
        ))
    return records


def as_channel_matrix(signal: Sequence) -> np.ndarray:
    """Return a signal as a 2-D (channels x samples) float array"""
    arr = np.asarray(signal, dtype=float)
    if arr.ndim == 1:
        arr = arr[np.newaxis, :]
    if arr.ndim != 2:
        raise ValueError(f"Signal must be 1D or 2D (channels x samples), got {arr.ndim}D")
    return arr

