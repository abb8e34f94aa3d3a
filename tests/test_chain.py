"""
Rule chain tests

Tests classification order, single dispatch per line, the dropped-line
guard, and chain assembly validation.
"""

import pytest

from linemark.lib.chain import RuleChain, ChainError, chain_build, STANDARD_RULES
from linemark.lib.document import MarkdownDocument
from linemark.lib.tags import TagCatalog
from linemark.models.lines import LineKind, LineState
from linemark.models.rules import PrefixRule, FallbackRule


@pytest.fixture
def chain():
    return chain_build(catalog=TagCatalog(legacy=False))


class CountingDocument(MarkdownDocument):
    """Document that counts add() calls"""

    def __init__(self):
        super().__init__(seed="")
        self.add_count = 0

    def add(self, *fragments):
        self.add_count += 1
        super().add(*fragments)


class TestStandardChain:
    """Test the default rule order"""

    def test_rule_order(self, chain):
        """Five rules, headers first, paragraph fallback last"""
        assert chain.rules == list(STANDARD_RULES)
        assert [type(rule) for rule in chain.rules] == [
            PrefixRule, PrefixRule, PrefixRule, PrefixRule, FallbackRule
        ]
        assert [rule.prefix for rule in chain.rules[:4]] == ["# ", "## ", "### ", "---"]

    def test_terminated(self, chain):
        """Standard chain ends in a fallback"""
        assert chain.terminated is True

    @pytest.mark.parametrize("line,kind,content", [
        ("# Title", LineKind.HEADER1, "Title"),
        ("## Section", LineKind.HEADER2, "Section"),
        ("### Sub", LineKind.HEADER3, "Sub"),
        ("---", LineKind.HORIZONTAL_RULE, ""),
        ("plain text", LineKind.PARAGRAPH, "plain text"),
        ("", LineKind.PARAGRAPH, ""),
        ("#Title", LineKind.PARAGRAPH, "#Title"),
        ("#### Deep", LineKind.PARAGRAPH, "#### Deep"),
        ("--", LineKind.PARAGRAPH, "--"),
    ])
    def test_classification(self, chain, line, kind, content):
        """Each line lands on the expected rule"""
        assert chain.line_classify(line) == (kind, content)

    def test_header3_never_header1_or_header2(self, chain):
        """'### x' is only claimed by the third header rule"""
        kind, content = chain.line_classify("### x")
        assert kind is LineKind.HEADER3
        assert content == "x"

    def test_fallback_keeps_whole_line(self, chain):
        """Paragraph content is the untouched line"""
        assert chain.line_classify("  indented # ") == (LineKind.PARAGRAPH, "  indented # ")


class TestRequestHandle:
    """Test dispatching a line into a document"""

    def test_formats_into_document(self, chain):
        """Matched rule formats the stripped content"""
        doc = MarkdownDocument(seed="")
        assert chain.request_handle(LineState(text="# Title"), doc) is True
        assert doc.get() == "<h1>Title</h1>"

    def test_single_dispatch_per_line(self, chain):
        """Exactly one formatter runs: three appends per line"""
        doc = CountingDocument()
        chain.request_handle(LineState(text="### x"), doc)
        assert doc.add_count == 3

    def test_line_state_not_mutated(self, chain):
        """The state keeps the original text after handling"""
        state = LineState(text="## B")
        chain.request_handle(state, MarkdownDocument(seed=""))
        assert state.text == "## B"

    def test_chain_reusable_across_documents(self, chain):
        """The chain carries nothing from one document to the next"""
        first = MarkdownDocument(seed="")
        second = MarkdownDocument(seed="")
        chain.request_handle(LineState(text="# A"), first)
        chain.request_handle(LineState(text="x"), second)
        assert first.get() == "<h1>A</h1>"
        assert second.get() == "<p>x</p>"


class TestUnterminatedChain:
    """Regression guard for chains without a fallback"""

    def test_unmatched_line_is_dropped(self):
        """No rule claims the line: nothing is written, no exception"""
        chain = RuleChain([PrefixRule(prefix="# ", kind=LineKind.HEADER1)])
        doc = MarkdownDocument(seed="")
        assert chain.terminated is False
        assert chain.request_handle(LineState(text="plain"), doc) is False
        assert doc.get() == ""

    def test_empty_chain_drops_everything(self):
        """A chain with no rules drops every line"""
        chain = RuleChain()
        assert chain.line_classify("anything") == (None, "anything")
        assert chain.request_handle(LineState(text=""), MarkdownDocument(seed="")) is False

    def test_matching_line_still_handled(self):
        """Lines the rules do claim are formatted as usual"""
        chain = RuleChain([PrefixRule(prefix="# ", kind=LineKind.HEADER1)], TagCatalog(legacy=False))
        doc = MarkdownDocument(seed="")
        assert chain.request_handle(LineState(text="# T"), doc) is True
        assert doc.get() == "<h1>T</h1>"


class TestChainBuild:
    """Test assembling custom chains"""

    def test_next_set_links_in_order(self):
        """next_set appends to the tail and returns the chain"""
        chain = RuleChain()
        result = chain.next_set(PrefixRule("# ", LineKind.HEADER1)).next_set(FallbackRule())
        assert result is chain
        assert chain.rules == [PrefixRule("# ", LineKind.HEADER1), FallbackRule()]

    def test_custom_rules(self):
        """Custom ordered rules are linked as given"""
        rules = [PrefixRule("!! ", LineKind.HEADER1), FallbackRule()]
        chain = chain_build(rules)
        assert chain.line_classify("!! Loud") == (LineKind.HEADER1, "Loud")

    def test_empty_rules_rejected(self):
        """An empty rule list cannot form a chain"""
        with pytest.raises(ChainError, match="empty"):
            chain_build([])

    def test_missing_fallback_rejected(self):
        """The last rule must accept every line"""
        with pytest.raises(ChainError, match="FallbackRule"):
            chain_build([PrefixRule("# ", LineKind.HEADER1)])

    def test_early_fallback_rejected(self):
        """A fallback before the end would hide later rules"""
        with pytest.raises(ChainError, match="position 0"):
            chain_build([FallbackRule(), PrefixRule("# ", LineKind.HEADER1), FallbackRule()])

    def test_overlapping_prefix_order_matters(self):
        """A shorter overlapping prefix placed first shadows the longer one"""
        shadowed = chain_build([
            PrefixRule("-", LineKind.HEADER1),
            PrefixRule("---", LineKind.HORIZONTAL_RULE),
            FallbackRule(),
        ])
        ordered = chain_build([
            PrefixRule("---", LineKind.HORIZONTAL_RULE),
            PrefixRule("-", LineKind.HEADER1),
            FallbackRule(),
        ])
        assert shadowed.line_classify("---")[0] is LineKind.HEADER1
        assert ordered.line_classify("---")[0] is LineKind.HORIZONTAL_RULE
