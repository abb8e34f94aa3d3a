"""
Line classification models

Type-safe structures describing a single input line as it moves through
the rule chain.
"""

from enum import Enum
from dataclasses import dataclass


class LineKind(Enum):
    """
    Closed set of line classifications recognized by the converter

    Each kind maps to exactly one HTML tag in the TagCatalog.
    """
    PARAGRAPH = "paragraph"
    HEADER1 = "header1"
    HEADER2 = "header2"
    HEADER3 = "header3"
    HORIZONTAL_RULE = "horizontal_rule"


@dataclass(frozen=True)
class LineState:
    """
    Working value for one input line

    Created fresh for every line handed to the chain and discarded once a
    rule has handled it. Rules read it but never rewrite it; the stripped
    remainder travels separately in a LineMatch.

    Attributes:
        text: The line text exactly as supplied (no trailing newline)
    """
    text: str


@dataclass(frozen=True)
class LineMatch:
    """
    Result of testing a line against a literal prefix

    Returned by line_match().

    Attributes:
        matched: True if the line starts with the prefix
        remainder: Line with the prefix removed on a match, otherwise the
                   line unchanged ("" for an empty line)

    Example:
        line_match("## Intro", "## ") -> LineMatch(matched=True, remainder="Intro")
        line_match("Intro", "## ")    -> LineMatch(matched=False, remainder="Intro")
    """
    matched: bool
    remainder: str
