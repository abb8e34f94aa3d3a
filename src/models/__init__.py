"""
Models package for linemark

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .lines import LineKind, LineState, LineMatch
from .rules import PrefixRule, FallbackRule, Rule

__all__ = [
    "ProgramState",
    "pipeline",
    "LineKind",
    "LineState",
    "LineMatch",
    "PrefixRule",
    "FallbackRule",
    "Rule",
]
