"""
Rule specification models

Defines the two rule variants a RuleChain is assembled from.
"""

from dataclasses import dataclass
from typing import Union

from .lines import LineKind


@dataclass(frozen=True)
class PrefixRule:
    """
    Rule that claims lines beginning with a literal prefix

    Attributes:
        prefix: Literal, case-sensitive prefix (e.g., "## ")
        kind: LineKind used to format the remainder after the prefix
    """
    prefix: str
    kind: LineKind


@dataclass(frozen=True)
class FallbackRule:
    """
    Rule that claims every line it sees, unmodified

    Must be the last rule of a chain so that no line goes unhandled.

    Attributes:
        kind: LineKind used to format the whole line
    """
    kind: LineKind = LineKind.PARAGRAPH


Rule = Union[PrefixRule, FallbackRule]
