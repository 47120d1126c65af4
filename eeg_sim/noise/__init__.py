"""
Background noise models
"""

from .noise import (
    Noise, NoNoise, WhiteNoise, PowerLawNoise, PinkNoise, RedNoise,
    AutoRegressiveNoise, UserDefinedNoise,
)

__all__ = [
    'Noise', 'NoNoise', 'WhiteNoise', 'PowerLawNoise', 'PinkNoise', 'RedNoise',
    'AutoRegressiveNoise', 'UserDefinedNoise',
]
