"""
EEG Sim - Simulation of continuous EEG with overlapping event responses

Builds continuous multichannel signals from an experimental design, response
components, an inter-onset distance model, background noise and artifact
sources (eye movements, power line interference, drift), and returns the
composite signal, its per-source decomposition and the event table.
"""

__version__ = "1.0.0"

# Main package imports for easy access
from .core.data_types import Event, Simulation, events_from_table
from .core.exceptions import (
    SimulationError, InvalidOnsetError, ComponentConfigError,
    InsufficientLengthError, ConfigMismatchError, ControlSignalError,
    ShapeMismatchError,
)
from .design.designs import SingleSubjectDesign, RepeatDesign, shuffle_events
from .components.basis import hanning, p100, n170, p300, n400
from .components.components import LinearModelComponent, MixedModelComponent, MultichannelComponent
from .onset.onsets import UniformOnset, LogNormalOnset, DistributionOnset, FixedOnset, simulate_onsets
from .noise.noise import (
    NoNoise, WhiteNoise, PowerLawNoise, PinkNoise, RedNoise, AutoRegressiveNoise, UserDefinedNoise,
)
from .artifacts.control_signals import HREFCoordinates, GazeDirectionVectors
from .artifacts.artifacts import (
    EyeMovement, PowerLineNoise, ARDriftNoise, LinearDriftNoise, DCDriftNoise, DriftNoise,
    UserDefinedContinuousSignal,
)
from .headmodel.headmodel import LeadfieldHeadmodel
from .simulation.compositor import compose, simulate

__all__ = [
    'Event', 'Simulation', 'events_from_table',
    'SimulationError', 'InvalidOnsetError', 'ComponentConfigError',
    'InsufficientLengthError', 'ConfigMismatchError', 'ControlSignalError',
    'ShapeMismatchError',
    'SingleSubjectDesign', 'RepeatDesign', 'shuffle_events',
    'hanning', 'p100', 'n170', 'p300', 'n400',
    'LinearModelComponent', 'MixedModelComponent', 'MultichannelComponent',
    'UniformOnset', 'LogNormalOnset', 'DistributionOnset', 'FixedOnset', 'simulate_onsets',
    'NoNoise', 'WhiteNoise', 'PowerLawNoise', 'PinkNoise', 'RedNoise',
    'AutoRegressiveNoise', 'UserDefinedNoise',
    'HREFCoordinates', 'GazeDirectionVectors',
    'EyeMovement', 'PowerLineNoise', 'ARDriftNoise', 'LinearDriftNoise', 'DCDriftNoise',
    'DriftNoise', 'UserDefinedContinuousSignal',
    'LeadfieldHeadmodel',
    'compose', 'simulate',
]
