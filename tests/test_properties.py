"""Property-based tests for mention splitting using Hypothesis.

These tests verify invariants that hold for any text:
1. Splitting never loses or reorders text
2. Nothing inside an open link is converted
3. Unresolved or rejected handles leave no trace in env["mentions"]
"""

from types import SimpleNamespace

from hypothesis import given, settings
from hypothesis import strategies as st
from markdown_it.token import Token

from mdit_mention import MentionOptions, extract_mentions, parse_mentions, split_tokens

# Alphabet dense in mention syntax so most examples contain candidates
mention_text = st.text(alphabet=st.sampled_from("ab@.-_ 홍1\n"), max_size=60)
any_text = st.one_of(mention_text, st.text(max_size=200))

REJECT_ALL = MentionOptions(
    local_domain=lambda bare, env: "x.com",
    link=lambda handle, env: None,
)


def _text(content: str) -> Token:
    token = Token("text", "", 0)
    token.content = content
    return token


class TestSplittingProperties:
    @given(any_text)
    @settings(max_examples=200)
    def test_rejected_mentions_reproduce_content(self, content: str) -> None:
        tokens = split_tokens(_text(content), REJECT_ALL)
        assert all(t.type == "text" for t in tokens)
        assert "".join(t.content for t in tokens) == content

    @given(any_text)
    @settings(max_examples=200)
    def test_default_split_reproduces_content(self, content: str) -> None:
        """Without a local domain, a mention's handle is exactly its source text."""
        tokens = split_tokens(_text(content))
        assert "".join(t.info if t.type == "mention" else t.content for t in tokens) == content

    @given(any_text, st.integers(min_value=0, max_value=5))
    @settings(max_examples=100)
    def test_replacements_inherit_level(self, content: str, level: int) -> None:
        token = _text(content)
        token.level = level
        assert all(t.level == level for t in split_tokens(token))

    @given(any_text)
    @settings(max_examples=100)
    def test_no_empty_text_tokens_emitted(self, content: str) -> None:
        token = _text(content)
        tokens = split_tokens(token)
        if tokens[0] is not token:
            assert all(t.content for t in tokens if t.type == "text")


class TestLinkNestingProperties:
    @given(mention_text, st.integers(min_value=1, max_value=5), st.booleans())
    @settings(max_examples=100)
    def test_nothing_converted_inside_links(self, content: str, depth: int, raw: bool) -> None:
        if raw:
            opens = [Token("html_inline", "", 0) for _ in range(depth)]
            for token in opens:
                token.content = '<a href="https://example.com/" rel="me">'
        else:
            opens = [Token("link_open", "a", 1) for _ in range(depth)]
        block = Token("inline", "", 0)
        block.children = [*opens, _text(content)]
        state = SimpleNamespace(tokens=[block], env={})
        parse_mentions(state, MentionOptions(local_domain=lambda bare, env: "x.com"))  # type: ignore[arg-type]
        assert all(t.type != "mention" for t in block.children)
        assert block.children[-1].content == content


class TestEnvironmentProperties:
    @given(mention_text)
    @settings(max_examples=100)
    def test_rejected_handles_not_recorded(self, content: str) -> None:
        assert extract_mentions(content, options=REJECT_ALL) == []

    @given(st.lists(st.sampled_from(["@a@b.com", "@c@d.org", "@a@b.com"]), max_size=8))
    @settings(max_examples=50)
    def test_recorded_in_order_with_duplicates(self, handles: list[str]) -> None:
        assert extract_mentions(" ".join(handles)) == handles
