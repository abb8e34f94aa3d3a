"""
linemark - Line-prefix text to HTML converter

Turns plain text into HTML one line at a time using a fixed chain of
prefix rules.
"""

__version__ = "1.0.0"

from .lib import Converter, lines_convert, text_convert, chain_build, LOG, state_connectToLogger

__all__ = [
    "Converter",
    "lines_convert",
    "text_convert",
    "chain_build",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
