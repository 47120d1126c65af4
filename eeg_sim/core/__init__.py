"""
Core data types, configuration and errors for EEG simulation

This module contains the fundamental data classes used throughout the system.
"""

from .data_types import Event, Simulation, events_from_table
from .exceptions import (
    SimulationError, InvalidOnsetError, ComponentConfigError,
    InsufficientLengthError, ConfigMismatchError, ControlSignalError,
    ShapeMismatchError,
)

__all__ = [
    'Event', 'Simulation', 'events_from_table',
    'SimulationError', 'InvalidOnsetError', 'ComponentConfigError',
    'InsufficientLengthError', 'ConfigMismatchError', 'ControlSignalError',
    'ShapeMismatchError',
]
