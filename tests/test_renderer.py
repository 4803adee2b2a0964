"""Tests for the mention render rule."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token

from mdit_mention import create_markdown, record_mention


def _mention(handle: str, href: str, label: str = "LABEL") -> Token:
    token = Token("mention", "", 0)
    token.content = label
    token.info = handle
    token.attrs = {"class": "u-url", "href": href}
    return token


@pytest.fixture
def md() -> MarkdownIt:
    return create_markdown()


def _render(md: MarkdownIt, tokens: list[Token], idx: int, env: object) -> str:
    return md.renderer.rules["mention"](tokens, idx, md.options, env)


class TestRenderMention:
    def test_anchor_with_attributes_and_label(self, md: MarkdownIt) -> None:
        tokens = [_mention("@a@b.com", "https://b.com/@a", "<b>a</b>")]
        assert _render(md, tokens, 0, {}) == '<a class="u-url" href="https://b.com/@a"><b>a</b></a>'

    def test_records_handle_once(self, md: MarkdownIt) -> None:
        env: dict = {}
        _render(md, [_mention("@a@b.com", "acct:@a@b.com")], 0, env)
        assert env == {"mentions": ["@a@b.com"]}

    def test_appends_to_existing_list(self, md: MarkdownIt) -> None:
        env = {"mentions": ["@x@y.com"]}
        tokens = [_mention("@a@b.com", "acct:@a@b.com"), _mention("@c@d.com", "acct:@c@d.com")]
        _render(md, tokens, 0, env)
        _render(md, tokens, 1, env)
        assert env["mentions"] == ["@x@y.com", "@a@b.com", "@c@d.com"]

    def test_out_of_range_index_renders_nothing(self, md: MarkdownIt) -> None:
        env: dict = {}
        assert _render(md, [], 0, env) == ""
        assert _render(md, [_mention("@a@b.com", "acct:@a@b.com")], 3, env) == ""
        assert env == {}

    def test_other_tokens_use_default_renderer(self, md: MarkdownIt) -> None:
        env: dict = {}
        assert _render(md, [Token("em_open", "em", 1)], 0, env) == "<em>"
        assert env == {}

    def test_env_that_is_not_a_mapping(self, md: MarkdownIt) -> None:
        env = ["not", "a", "mapping"]
        html = _render(md, [_mention("@a@b.com", "acct:@a@b.com")], 0, env)
        assert html.startswith("<a ")
        assert env == ["not", "a", "mapping"]

    def test_mentions_in_document_order(self, md: MarkdownIt) -> None:
        env: dict = {}
        md.render(
            "# @a@one.com\n\n- @b@two.com\n- *@c@three.com* and @a@one.com\n\n> @d@four.com",
            env,
        )
        assert env["mentions"] == [
            "@a@one.com",
            "@b@two.com",
            "@c@three.com",
            "@a@one.com",
            "@d@four.com",
        ]


class TestRecordMention:
    def test_creates_list(self) -> None:
        env: dict = {}
        assert record_mention(env, "@a@b.com") is True
        assert env["mentions"] == ["@a@b.com"]

    @pytest.mark.parametrize("env", [None, "text", 42, ("a",)])
    def test_skips_non_mapping_env(self, env: object) -> None:
        assert record_mention(env, "@a@b.com") is False
