"""
Rule chain for line classification

A RuleChain is an ordered list of rule variants evaluated top to bottom.
The first rule that claims a line formats it into the output document and
no later rule sees that line.

Standard order (see chain_build):
    1. PrefixRule("# ")    -> HEADER1
    2. PrefixRule("## ")   -> HEADER2
    3. PrefixRule("### ")  -> HEADER3
    4. PrefixRule("---")   -> HORIZONTAL_RULE
    5. FallbackRule()      -> PARAGRAPH

Example:
    >>> chain = chain_build()
    >>> chain.line_classify("## Intro")
    (<LineKind.HEADER2: 'header2'>, 'Intro')
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.lines import LineKind, LineState
from ..models.rules import PrefixRule, FallbackRule, Rule
from .document import MarkdownDocument
from .formatter import line_format
from .matcher import line_match
from .tags import TagCatalog
from .log import LOG, WARN


class ChainError(Exception):
    """Raised when a rule list cannot form a complete chain"""
    pass


STANDARD_RULES: Tuple[Rule, ...] = (
    PrefixRule(prefix="# ", kind=LineKind.HEADER1),
    PrefixRule(prefix="## ", kind=LineKind.HEADER2),
    PrefixRule(prefix="### ", kind=LineKind.HEADER3),
    PrefixRule(prefix="---", kind=LineKind.HORIZONTAL_RULE),
    FallbackRule(kind=LineKind.PARAGRAPH),
)


class RuleChain:
    """
    Ordered, first-match-wins sequence of rules

    The chain holds no per-document state: line state arrives with each
    request and output goes to the document passed in, so one chain may
    serve several documents.
    """

    def __init__(self, rules: Iterable[Rule] = (), catalog: Optional[TagCatalog] = None) -> None:
        """
        Args:
            rules: Initial rules, in evaluation order
            catalog: Tag lookup used by the formatter
        """
        self.rules: List[Rule] = list(rules)
        self.catalog = catalog if catalog is not None else TagCatalog()

    def next_set(self, rule: Rule) -> "RuleChain":
        """Link rule after the current last rule. Returns the chain."""
        self.rules.append(rule)
        return self

    @property
    def terminated(self) -> bool:
        """True if the last rule accepts every line."""
        return bool(self.rules) and isinstance(self.rules[-1], FallbackRule)

    def line_classify(self, text: str) -> Tuple[Optional[LineKind], str]:
        """
        Find the first rule claiming text, without formatting anything.

        Returns:
            (kind, content) where content is what the formatter would wrap,
            or (None, text) if every rule declines
        """
        for rule in self.rules:
            if isinstance(rule, FallbackRule):
                return rule.kind, text

            match = line_match(text, rule.prefix)
            if match.matched:
                return rule.kind, match.remainder

        return None, text

    def request_handle(self, state: LineState, document: MarkdownDocument) -> bool:
        """
        Dispatch one line to exactly one rule and format it into document.

        If no rule claims the line it contributes nothing to the document.

        Args:
            state: The line being handled
            document: Output document shared by all lines of one conversion

        Returns:
            True if a rule handled the line, False if it was dropped
        """
        kind, content = self.line_classify(state.text)

        if kind is None:
            WARN(f"No rule matched line {state.text!r}; line dropped")
            return False

        LOG(f"{kind.name:<15} ← {state.text!r}", level=3)
        line_format(kind, content, document, self.catalog)
        return True


def chain_build(
    rules: Optional[Sequence[Rule]] = None, catalog: Optional[TagCatalog] = None
) -> RuleChain:
    """
    Assemble a rule chain, by default the standard five-rule chain.

    Rules are linked in the given order and the first match wins, so when
    one prefix is itself a prefix of another (e.g. "-" and "---") the longer
    one must come first or it will never be reached. The standard headers do
    not overlap this way ("# " differs from "## " at its second character),
    but new rules must keep to this ordering.

    Args:
        rules: Ordered rules ending in exactly one FallbackRule; defaults to
               STANDARD_RULES
        catalog: Tag lookup handed to the chain

    Returns:
        RuleChain whose head is the first rule

    Raises:
        ChainError: If rules is empty, does not end with a FallbackRule, or
                    has a FallbackRule before the end
    """
    if rules is None:
        rules = STANDARD_RULES

    if not rules:
        raise ChainError("Cannot build a chain from an empty rule list")

    if not isinstance(rules[-1], FallbackRule):
        raise ChainError(
            f"Last rule must be a FallbackRule, got {type(rules[-1]).__name__}"
        )

    for position, rule in enumerate(rules[:-1]):
        if isinstance(rule, FallbackRule):
            raise ChainError(
                f"FallbackRule at position {position} would hide the rules after it"
            )

    chain = RuleChain(catalog=catalog)
    for rule in rules:
        chain.next_set(rule)

    return chain
