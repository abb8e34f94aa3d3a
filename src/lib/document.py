"""
Append-only output document
"""

from typing import List, Optional


class MarkdownDocument:
    """
    Accumulates markup fragments in the order they are added

    Fragments can only be appended; there is no removal or rewrite. The
    document starts out holding the seed value.

    Example:
        >>> doc = MarkdownDocument(seed="")
        >>> doc.add("<p>", "hi", "</p>")
        >>> doc.get()
        '<p>hi</p>'
    """

    def __init__(self, seed: Optional[str] = None) -> None:
        """
        Args:
            seed: Initial contents; None uses appsettings.buffer_seed
        """
        if seed is None:
            from ..config import appsettings
            seed = appsettings.buffer_seed
        self.seed = seed
        self.fragments: List[str] = [seed]

    def add(self, *fragments: str) -> None:
        """Append each fragment, in call order."""
        for fragment in fragments:
            self.fragments.append(fragment)

    def get(self) -> str:
        """Return the full document contents."""
        return ''.join(self.fragments)
