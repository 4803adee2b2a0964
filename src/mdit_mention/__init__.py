"""
mdit-mention — Mastodon-style mentions for markdown-it-py

Turns ``@user`` and ``@user@domain`` in Markdown text into links and
collects the mentioned handles into the render environment. Mentions inside
existing links, markdown or raw ``<a>``, are left alone.

Quick Start:
    >>> from mdit_mention import render
    >>> env = {}
    >>> html = render("Hello @john@example.com!", env)
    >>> env["mentions"]
    ['@john@example.com']

    >>> # Or plug into your own MarkdownIt instance
    >>> from markdown_it import MarkdownIt
    >>> from mdit_mention import mention_plugin
    >>> md = MarkdownIt().use(
    ...     mention_plugin,
    ...     local_domain=lambda bare, env: "example.com",
    ... )
    >>> html = md.render("Hello @john!")

Installation:
    pip install mdit-mention
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from mdit_mention.config import DEFAULT_OPTIONS, MentionOptions
from mdit_mention.errors import MentionError, PluginError
from mdit_mention.html import is_link_close, is_link_open
from mdit_mention.label import split_handle, to_bare_handle, to_full_handle
from mdit_mention.plugin import PLUGIN_NAME, create_markdown, mention_plugin
from mdit_mention.renderer import MENTIONS_KEY, record_mention, render_mention
from mdit_mention.scanner import (
    MENTION_PATTERN,
    LinkDepth,
    MentionMatch,
    iter_mentions,
    parse_mentions,
    split_tokens,
)

__version__ = "0.3.0"

# Module-level default instance (reused when no options are given)
_DEFAULT_MARKDOWN = create_markdown()


def render(
    source: str,
    env: MutableMapping[str, Any] | None = None,
    *,
    options: MentionOptions | Mapping[str, Any] | None = None,
) -> str:
    """Render Markdown to HTML with mentions linked.

    Args:
        source: Markdown source text
        env: markdown-it environment; receives ``env["mentions"]``
        options: Mention resolvers

    Returns:
        HTML string

    """
    env = {} if env is None else env
    md = _DEFAULT_MARKDOWN if options is None else create_markdown(options)
    return md.render(source, env)


def extract_mentions(
    source: str,
    env: MutableMapping[str, Any] | None = None,
    *,
    options: MentionOptions | Mapping[str, Any] | None = None,
) -> list[str]:
    """Render ``source`` and return the handles it mentions.

    Handles are listed in document order with duplicates kept. Handles
    already present in ``env["mentions"]`` are not included.

    Args:
        source: Markdown source text
        env: markdown-it environment passed to the resolvers
        options: Mention resolvers

    Returns:
        List of fully-qualified handles, e.g. ``["@john@example.com"]``

    """
    env = {} if env is None else env
    before = len(env.get(MENTIONS_KEY, ()))
    render(source, env, options=options)
    return list(env.get(MENTIONS_KEY, ())[before:])


__all__ = [
    # High-level API
    "render",
    "extract_mentions",
    "create_markdown",
    "mention_plugin",
    "PLUGIN_NAME",
    # Configuration
    "MentionOptions",
    "DEFAULT_OPTIONS",
    # Scanning
    "MENTION_PATTERN",
    "MentionMatch",
    "LinkDepth",
    "iter_mentions",
    "split_tokens",
    "parse_mentions",
    # Rendering
    "MENTIONS_KEY",
    "render_mention",
    "record_mention",
    # Labels
    "split_handle",
    "to_bare_handle",
    "to_full_handle",
    # Raw HTML anchors
    "is_link_open",
    "is_link_close",
    # Errors
    "MentionError",
    "PluginError",
    "__version__",
]
