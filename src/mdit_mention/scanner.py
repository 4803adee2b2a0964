"""Mention scanning and token splitting.

Runs as a markdown-it core rule after ``inline``: every ``inline`` block
token has its children rewritten so that ``@user`` and ``@user@domain``
mentions in plain text become ``mention`` tokens.

Pipeline per block:
1. Children are visited in order; ``LinkDepth`` tracks open markdown links
   (``link_open``/``link_close``) and open raw ``<a>`` tags
   (``html_inline``) independently.
2. A ``text`` child visited while both depths are zero is split by
   ``split_tokens``; every other child is kept as the same object.
3. Each match is resolved (local domain, then link target). Failures keep
   the source text, so joining the text of the replacement tokens always
   gives back the original content.

Example:
    >>> [m.text for m in iter_mentions("cc @john and @jane@example.com")]
    ['@john', '@jane@example.com']

Thread Safety:
    Stateless. All per-document state lives in local variables and the
    markdown-it ``state``.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from markdown_it.token import Token

from mdit_mention.config import DEFAULT_OPTIONS, MentionOptions
from mdit_mention.html import is_link_close, is_link_open
from mdit_mention.label import to_full_handle
from mdit_mention.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.rules_core import StateCore

logger = get_logger(__name__)

# [^\W_] is a Unicode letter or number.
MENTION_PATTERN = re.compile(
    r"@[\w.-]+(@(?:[^\W_][\w-]*\.)+[^\W_]{2,})?",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class MentionMatch:
    """A mention candidate inside one text token's content.

    Attributes:
        start: Offset of the leading ``@`` in the content
        length: Length of the matched text
        text: The matched source text, e.g. ``"@john@example.com"``
        domain: Explicit domain, or None for a bare handle

    """

    start: int
    length: int
    text: str
    domain: str | None = None

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def has_domain(self) -> bool:
        return self.domain is not None

    @property
    def bare_handle(self) -> str:
        """The ``@user`` part of the match."""
        if self.domain is None:
            return self.text
        return self.text[: -len(self.domain) - 1]


def iter_mentions(content: str) -> Iterator[MentionMatch]:
    """Yield non-overlapping mention candidates, left to right.

    Args:
        content: Text to scan

    Yields:
        MentionMatch for each candidate, full and bare handles alike.

    """
    for m in MENTION_PATTERN.finditer(content):
        domain_part = m.group(1)
        yield MentionMatch(
            start=m.start(),
            length=m.end() - m.start(),
            text=m.group(0),
            domain=domain_part[1:] if domain_part is not None else None,
        )


class LinkDepth:
    """Link nesting counters for one inline block.

    Markdown links and raw HTML anchors are counted separately because
    they close independently. Unbalanced closes may drive a counter below
    zero; that is tolerated, not corrected.

    """

    __slots__ = ("html", "markdown")

    def __init__(self) -> None:
        self.markdown = 0
        self.html = 0

    def visit(self, token: Token) -> None:
        """Update the counters for a child token."""
        if token.type == "link_open":
            self.markdown += 1
        elif token.type == "link_close":
            self.markdown -= 1
        elif token.type == "html_inline":
            if is_link_open(token.content):
                self.html += 1
            elif is_link_close(token.content):
                self.html -= 1

    @property
    def inside_link(self) -> bool:
        return self.markdown > 0 or self.html > 0


def _text_token(content: str, level: int) -> Token:
    token = Token("text", "", 0)
    token.content = content
    token.level = level
    return token


def _mention_token(
    handle: str, href: str, level: int, options: MentionOptions, env: Any
) -> Token:
    content = options.label(handle, env) if options.label is not None else None
    if content is None:
        content = to_full_handle(handle, env)
    extra = (
        options.link_attributes(handle, env)
        if options.link_attributes is not None
        else None
    )
    token = Token("mention", "", 0)
    token.content = content
    token.level = level
    attrs: dict[str, Any] = dict(extra or {})
    attrs["href"] = href
    token.attrs = attrs
    token.info = handle
    return token


def split_tokens(
    token: Token,
    options: MentionOptions = DEFAULT_OPTIONS,
    env: Any = None,
) -> list[Token]:
    """Split a text token into text and mention tokens.

    Args:
        token: A ``text`` token
        options: Mention resolvers
        env: markdown-it environment, passed to every resolver

    Returns:
        Replacement tokens in order. ``[token]`` itself when nothing was
        converted.

    """
    content = token.content
    level = token.level
    tokens: list[Token] = []
    pos = 0
    for match in iter_mentions(content):
        handle = match.text
        if not match.has_domain:
            local_domain = (
                options.local_domain(handle, env)
                if options.local_domain is not None
                else None
            )
            if local_domain is None:
                logger.debug("No local domain for %s; leaving as text", handle)
                continue
            handle = f"{handle}@{local_domain}"

        if match.start > pos:
            tokens.append(_text_token(content[pos : match.start], level))
        pos = match.end

        if options.link is None:
            href = f"acct:{handle}"
        else:
            href = options.link(handle, env)
            if href is None:
                logger.debug("Link resolver rejected %s; leaving as text", handle)
                tokens.append(_text_token(match.text, level))
                continue

        tokens.append(_mention_token(handle, href, level, options, env))

    if not tokens:
        return [token]
    if pos < len(content):
        tokens.append(_text_token(content[pos:], level))
    return tokens


def parse_mentions(state: StateCore, options: MentionOptions = DEFAULT_OPTIONS) -> None:
    """Core rule: rewrite mentions in every inline block of the document.

    Args:
        state: markdown-it core state; its tokens are mutated in place
        options: Mention resolvers

    """
    for block_token in state.tokens:
        if block_token.type != "inline" or block_token.children is None:
            continue
        depth = LinkDepth()
        children: list[Token] = []
        for child in block_token.children:
            depth.visit(child)
            if depth.inside_link or child.type != "text":
                children.append(child)
            else:
                children.extend(split_tokens(child, options, state.env))
        block_token.children = children


__all__ = [
    "MENTION_PATTERN",
    "LinkDepth",
    "MentionMatch",
    "iter_mentions",
    "parse_mentions",
    "split_tokens",
]
