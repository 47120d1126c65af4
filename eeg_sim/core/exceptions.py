"""
Exception types for EEG simulation

All errors are raised lazily, at the point where a configuration is actually
used, so one Simulation can be validated against many designs and random
streams. Every error subclasses ValueError as well, since each of them
reports an invalid parameter combination.
"""


class SimulationError(ValueError):
    """Base class for all simulation errors"""


class InvalidOnsetError(SimulationError):
    """An inter-onset distance was negative, or zero where coincident onsets would result"""


class ComponentConfigError(SimulationError):
    """Basis or coefficient configuration does not fit the design"""


class InsufficientLengthError(SimulationError):
    """A fixed-length user signal is shorter than the requested length"""


class ConfigMismatchError(SimulationError):
    """Paired configuration arrays disagree in length or layout"""


class ControlSignalError(ConfigMismatchError):
    """A control signal does not start at the first sample of the simulation"""


class ShapeMismatchError(SimulationError):
    """Channel counts of the simulated sources cannot be reconciled by broadcast"""
