"""
Line formatter: wraps content in the tags of a LineKind
"""

from typing import Optional

from ..models.lines import LineKind
from .document import MarkdownDocument
from .tags import TagCatalog


def line_format(
    kind: LineKind,
    content: str,
    document: MarkdownDocument,
    catalog: Optional[TagCatalog] = None,
) -> None:
    """
    Append opening tag, content and closing tag for kind to document.

    The three pieces go in as three separate appends. Content is written
    verbatim (no escaping).

    Args:
        kind: LineKind selecting the tag
        content: Line content with any prefix already stripped
        document: Document to append to
        catalog: Tag lookup; a default TagCatalog if omitted
    """
    if catalog is None:
        catalog = TagCatalog()

    opening = catalog.tagOpening_get(kind)
    closing = catalog.tagClosing_get(kind)

    document.add(opening)
    document.add(content)
    document.add(closing)
