"""Render rule for ``mention`` tokens.

Registered on the markdown-it HTML renderer with ``add_render_rule``, so it
is bound to the renderer and called once per token in document order.

Output:
    <a class="..." href="acct:@john@example.com">LABEL</a>

Attributes come from the token (link attributes, then ``href``) and are
escaped by the host's ``renderAttrs``. The label is inserted as-is; it is
HTML produced by the label resolver.

Side effect:
    Each rendered mention appends its handle to ``env["mentions"]``, creating
    the list on first use. Only appends are performed, so callers may
    pre-populate the list. An ``env`` that is not a mutable mapping is left
    alone.

"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from markdown_it.renderer import RendererHTML
    from markdown_it.token import Token

MENTIONS_KEY = "mentions"


def record_mention(env: Any, handle: str) -> bool:
    """Append ``handle`` to ``env["mentions"]``.

    Returns:
        True if recorded, False if ``env`` is not a mutable mapping.

    """
    if not isinstance(env, MutableMapping):
        return False
    env.setdefault(MENTIONS_KEY, []).append(handle)
    return True


def render_mention(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: Any,
    env: Any,
) -> str:
    """Render a mention token as an anchor.

    Args:
        self: The bound markdown-it renderer
        tokens: Sibling tokens
        idx: Index of the token to render
        options: markdown-it options
        env: markdown-it environment

    Returns:
        Anchor HTML; ``""`` for an out-of-range index. Tokens of any other
        type are rendered by the default ``renderToken``.

    """
    if idx >= len(tokens):
        return ""
    token = tokens[idx]
    if token.type != "mention":
        return self.renderToken(tokens, idx, options, env)
    record_mention(env, token.info)
    return f"<a{self.renderAttrs(token)}>{token.content}</a>"


__all__ = ["MENTIONS_KEY", "record_mention", "render_mention"]
