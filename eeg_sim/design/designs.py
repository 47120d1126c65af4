"""
Experimental designs

A design enumerates the condition assignments of all simulated events. The
compositor treats it as an opaque, ordered, finite sequence of rows: one row
per event and one column per experimental factor.
"""

import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np
import pandas as pd


class Design(ABC):
    """Interface for all experimental designs"""

    @abstractmethod
    def generate_events(self, rng: np.random.Generator) -> pd.DataFrame:
        """
        Produce the ordered condition assignments

        Args:
            rng: Random stream (used by designs with randomized order)

        Returns:
            pd.DataFrame: one row per event, one column per factor
        """

    @abstractmethod
    def size(self) -> int:
        """Number of events the design produces"""

    @property
    def factors(self) -> list:
        return []


@dataclass(frozen=True)
class SingleSubjectDesign(Design):
    """
    Fully crossed factorial design for one subject

    Every combination of factor levels appears exactly once. Factors are
    ordered by name, levels in the order given.

    Args:
        conditions: Factor name -> sequence of levels
        event_order_function: Optional callable (rng, events) -> events used to
            reorder the trials, e.g. ``shuffle_events``
    """
    conditions: Dict[str, Sequence[Any]] = field(default_factory=dict)
    event_order_function: Optional[Callable[[np.random.Generator, pd.DataFrame], pd.DataFrame]] = None

    @property
    def factors(self) -> list:
        return sorted(self.conditions)

    def size(self) -> int:
        n = 1
        for levels in self.conditions.values():
            n *= len(levels)
        return n

    def generate_events(self, rng: np.random.Generator) -> pd.DataFrame:
        factors = self.factors
        if factors:
            rows = list(itertools.product(*(self.conditions[f] for f in factors)))
            events = pd.DataFrame(rows, columns=factors)
        else:
            # No factors: a single unconditioned event
            events = pd.DataFrame(index=range(1))

        if self.event_order_function is not None:
            events = self.event_order_function(rng, events).reset_index(drop=True)

        logging.debug(f"Design generated {len(events)} events over factors {factors}")
        return events


@dataclass(frozen=True)
class RepeatDesign(Design):
    """Repeat the events of another design ``repeat`` times"""
    design: Design
    repeat: int = 1

    @property
    def factors(self) -> list:
        return self.design.factors

    def size(self) -> int:
        return self.design.size() * self.repeat

    def generate_events(self, rng: np.random.Generator) -> pd.DataFrame:
        if self.repeat < 0:
            raise ValueError(f"Repeat count must be non-negative, got {self.repeat}")

        events = self.design.generate_events(rng)
        if self.repeat == 0:
            return events.iloc[0:0].reset_index(drop=True)
        return pd.concat([events] * self.repeat, ignore_index=True)


def shuffle_events(rng: np.random.Generator, events: pd.DataFrame) -> pd.DataFrame:
    """Event order function that randomly permutes the trials"""
    order = rng.permutation(len(events))
    return events.iloc[order]
