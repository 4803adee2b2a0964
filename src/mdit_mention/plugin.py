"""markdown-it plugin entry point.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from mdit_mention import mention_plugin
    >>>
    >>> md = MarkdownIt().use(mention_plugin)
    >>> env = {}
    >>> html = md.render("Hi @john@example.com", env)
    >>> env["mentions"]
    ['@john@example.com']

    >>> # Resolvers as keyword arguments, a mapping, or MentionOptions
    >>> md = MarkdownIt().use(
    ...     mention_plugin,
    ...     local_domain=lambda bare, env: "example.com",
    ...     link=lambda handle, env: f"https://example.com/{handle}",
    ... )

Registration:
- core rule ``"mention"``, right after ``"inline"``, so it sees the
  complete inline token stream before linkify and typographic replacements
- render rule ``"mention"`` on the HTML renderer

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markdown_it import MarkdownIt

from mdit_mention.config import PLUGIN_NAME, MentionOptions, coerce_options
from mdit_mention.renderer import render_mention
from mdit_mention.scanner import parse_mentions
from mdit_mention.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.rules_core import StateCore

logger = get_logger(__name__)


def mention_plugin(
    md: MarkdownIt,
    options: MentionOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """Parse and render Mastodon-style mentions.

    Args:
        md: markdown-it instance to extend
        options: MentionOptions or a mapping of resolvers
        **kwargs: Individual resolvers, merged over ``options``

    Raises:
        PluginError: If an option is not callable

    """
    resolved = coerce_options(options, **kwargs)

    def rule(state: StateCore) -> None:
        parse_mentions(state, resolved)

    md.core.ruler.after("inline", PLUGIN_NAME, rule)
    md.add_render_rule(PLUGIN_NAME, render_mention)
    logger.debug("Registered %s plugin with %r", PLUGIN_NAME, resolved)


def create_markdown(
    options: MentionOptions | Mapping[str, Any] | None = None,
    *,
    config: str = "commonmark",
    **kwargs: Any,
) -> MarkdownIt:
    """Create a MarkdownIt instance with the mention plugin applied.

    Args:
        options: MentionOptions or a mapping of resolvers
        config: markdown-it preset name
        **kwargs: Individual resolvers, merged over ``options``

    Returns:
        Configured MarkdownIt instance

    """
    return MarkdownIt(config).use(mention_plugin, options, **kwargs)


__all__ = ["PLUGIN_NAME", "create_markdown", "mention_plugin"]
