"""
Experimental designs for EEG simulation
"""

from .designs import Design, SingleSubjectDesign, RepeatDesign, shuffle_events

__all__ = ['Design', 'SingleSubjectDesign', 'RepeatDesign', 'shuffle_events']
