"""
Models package for wsconvert

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .controls import ControlRole, ControlSpec, CONTROL_SPECS, WRAPPERS
from .filters import Excludes, EmphasisStyle, Stage
from .spans import WrappedSpan, SuffixSplit, PaddedText

__all__ = [
    "ProgramState",
    "pipeline",
    "ControlRole",
    "ControlSpec",
    "CONTROL_SPECS",
    "WRAPPERS",
    "Excludes",
    "EmphasisStyle",
    "Stage",
    "WrappedSpan",
    "SuffixSplit",
    "PaddedText",
]
