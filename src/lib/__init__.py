"""
linemark - Line-prefix text to HTML converter

Turns plain text into HTML one line at a time using a fixed chain of
prefix rules.
"""

__version__ = "1.0.0"

from .converter import Converter, lines_convert, text_convert, text_split
from .chain import RuleChain, ChainError, chain_build
from .document import MarkdownDocument
from .log import LOG, state_connectToLogger

__all__ = [
    "Converter",
    "lines_convert",
    "text_convert",
    "text_split",
    "RuleChain",
    "ChainError",
    "chain_build",
    "MarkdownDocument",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
