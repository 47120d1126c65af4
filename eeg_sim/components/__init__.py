"""
Response components, basis functions and the formula model
"""

from .basis import hanning, p100, n170, p300, n400
from .formula import design_matrix, parse_formula
from .components import (
    Component, LinearModelComponent, MixedModelComponent, MultichannelComponent,
    simulate_responses, common_channel_count,
)

__all__ = [
    'hanning', 'p100', 'n170', 'p300', 'n400',
    'design_matrix', 'parse_formula',
    'Component', 'LinearModelComponent', 'MixedModelComponent', 'MultichannelComponent',
    'simulate_responses', 'common_channel_count',
]
