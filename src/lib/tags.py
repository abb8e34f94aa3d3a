"""
Tag catalog: LineKind to HTML tag lookup
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..models.lines import LineKind


TAG_NAMES: Mapping[LineKind, str] = MappingProxyType({
    LineKind.PARAGRAPH: "p",
    LineKind.HEADER1: "h1",
    LineKind.HEADER2: "h2",
    LineKind.HEADER3: "h3",
    LineKind.HORIZONTAL_RULE: "hr",
})


class TagCatalog:
    """
    Immutable lookup from LineKind to opening/closing tag strings

    Any kind missing from TAG_NAMES (or a value that is not a LineKind at
    all) resolves to the paragraph tag, so lookups never fail.

    Example:
        >>> catalog = TagCatalog()
        >>> catalog.tagOpening_get(LineKind.HEADER1)
        '<h1>'
        >>> TagCatalog(legacy=True).tagClosing_get(LineKind.HEADER1)
        '</h1'
    """

    def __init__(self, legacy: Optional[bool] = None) -> None:
        """
        Args:
            legacy: Omit the closing angle bracket; None uses appsettings.legacy_tags
        """
        from ..config import appsettings

        self.settings = appsettings
        self.legacy = appsettings.legacy_tags if legacy is None else legacy

    def tagName_get(self, kind: Any) -> str:
        """Tag name for kind, degrading to the paragraph tag."""
        try:
            return TAG_NAMES.get(kind, TAG_NAMES[LineKind.PARAGRAPH])
        except TypeError:
            # unhashable lookups
            return TAG_NAMES[LineKind.PARAGRAPH]

    def tagOpening_get(self, kind: Any) -> str:
        return self.settings.tag_make("<", self.tagName_get(kind), legacy=self.legacy)

    def tagClosing_get(self, kind: Any) -> str:
        return self.settings.tag_make("</", self.tagName_get(kind), legacy=self.legacy)
