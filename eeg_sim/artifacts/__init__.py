"""
Artifact sources and their control signals
"""

from .control_signals import HREFCoordinates, GazeDirectionVectors
from .artifacts import (
    Artifact, EyeMovement, PowerLineNoise, ARDriftNoise, LinearDriftNoise,
    DCDriftNoise, DriftNoise, UserDefinedContinuousSignal,
)

__all__ = [
    'HREFCoordinates', 'GazeDirectionVectors',
    'Artifact', 'EyeMovement', 'PowerLineNoise', 'ARDriftNoise', 'LinearDriftNoise',
    'DCDriftNoise', 'DriftNoise', 'UserDefinedContinuousSignal',
]
