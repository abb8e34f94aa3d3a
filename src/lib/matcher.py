"""
Literal prefix matching for single lines
"""

from ..models.lines import LineMatch


def line_match(line: str, prefix: str) -> LineMatch:
    """
    Test whether line starts with a literal prefix and strip it once.

    Comparison is exact and case-sensitive; nothing is trimmed. An empty
    line never matches, not even an empty prefix.

    Args:
        line: Line text to test
        prefix: Literal prefix (e.g., "# ")

    Returns:
        LineMatch with the remainder after exactly len(prefix) characters on
        a match, or the untouched line otherwise

    Example:
        >>> line_match("# Title", "# ")
        LineMatch(matched=True, remainder='Title')
        >>> line_match("#Title", "# ")
        LineMatch(matched=False, remainder='#Title')
        >>> line_match("", "")
        LineMatch(matched=False, remainder='')
    """
    if line == "":
        return LineMatch(matched=False, remainder="")

    if line.startswith(prefix):
        return LineMatch(matched=True, remainder=line[len(prefix):])

    return LineMatch(matched=False, remainder=line)
