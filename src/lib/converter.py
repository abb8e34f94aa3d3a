"""
Converter from plain text lines to HTML

Drives the rule chain over a sequence of lines and returns the finished
document string.
"""

import re
from typing import Iterable, List, Optional

from ..models.lines import LineState
from .chain import chain_build
from .document import MarkdownDocument
from .tags import TagCatalog
from .log import LOG


class Converter:
    """
    Converts an ordered sequence of lines to an HTML fragment

    Every convert() call builds its own chain and document, so repeated or
    concurrent calls never see each other's output.

    Example:
        >>> Converter(seed="").convert(["# Title", "body"])
        '<h1>Title</h1><p>body</p>'
    """

    def __init__(self, seed: Optional[str] = None, legacy_tags: Optional[bool] = None) -> None:
        """
        Args:
            seed: Document seed; None uses appsettings.buffer_seed
            legacy_tags: Bracket-less tags; None uses appsettings.legacy_tags
        """
        self.seed = seed
        self.legacy_tags = legacy_tags
        self.line_count = 0

    def convert(self, lines: Iterable[str]) -> str:
        """
        Convert lines, in order, to one HTML string.

        Args:
            lines: Zero or more lines, without line terminators

        Returns:
            Document seed followed by one fragment per line
        """
        document = MarkdownDocument(seed=self.seed)
        chain = chain_build(catalog=TagCatalog(legacy=self.legacy_tags))

        line_count = 0
        for line in lines:
            chain.request_handle(LineState(text=line), document)
            line_count += 1

        html = document.get()
        LOG(f"Converted {line_count} lines to {len(html)} characters", level=2)
        self.line_count = line_count
        return html


def lines_convert(
    lines: Iterable[str], seed: Optional[str] = None, legacy_tags: Optional[bool] = None
) -> str:
    """Convert lines to HTML with a fresh Converter."""
    return Converter(seed=seed, legacy_tags=legacy_tags).convert(lines)


def text_convert(
    text: str, seed: Optional[str] = None, legacy_tags: Optional[bool] = None
) -> str:
    """
    Split raw text into lines and convert them.

    See text_split() for where lines end. Empty text converts to the bare
    seed.
    """
    return lines_convert(text_split(text), seed=seed, legacy_tags=legacy_tags)


LINE_TERMINATOR = re.compile(r'\r\n|\r|\n')


def text_split(text: str) -> List[str]:
    """
    Split text into lines at "\\r\\n", "\\r" and "\\n" only.

    Other characters str.splitlines() treats as breaks (form feed, vertical
    tab, U+2028 and friends) stay inside the line. A single trailing
    terminator does not produce an empty last line.

    Example:
        >>> text_split("# a\\r\\nb\\n")
        ['# a', 'b']
        >>> text_split("a\\x0c# b")
        ['a\\x0c# b']
        >>> text_split("")
        []
    """
    if not text:
        return []

    lines = LINE_TERMINATOR.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
