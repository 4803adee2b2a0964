"""Mention label rendering.

Labels are the HTML body of a mention link. Each part of the handle is
wrapped in its own ``<span>`` so stylesheets can hide or restyle it:

    <span class="at">@</span><span class="user">john</span>
    <span class="at">@</span><span class="domain">example.com</span>

Both functions share the label resolver signature ``(handle, env) -> str``
and can be passed as the ``label`` option directly.

Example:
    >>> to_bare_handle("@john@example.com")
    '<span class="at">@</span><span class="user">john</span>'
"""

from __future__ import annotations

from typing import Any

from markdown_it.common.utils import escapeHtml


def split_handle(handle: str) -> tuple[str, str | None]:
    """Split a handle into its local part and domain.

    Args:
        handle: ``"@user"`` or ``"@user@domain"``; the leading ``@`` is optional.

    Returns:
        Tuple of (user, domain); domain is None for a bare handle.

    Example:
        >>> split_handle("@john@example.com")
        ('john', 'example.com')
    """
    user, sep, domain = handle.removeprefix("@").partition("@")
    return user, domain if sep else None


def to_bare_handle(handle: str, env: Any = None) -> str:
    """Render the ``@user`` part of a handle, dropping the domain."""
    user, _ = split_handle(handle)
    return f'<span class="at">@</span><span class="user">{escapeHtml(user)}</span>'


def to_full_handle(handle: str, env: Any = None) -> str:
    """Render a handle with its domain, if it has one.

    This is the default mention label.
    """
    _, domain = split_handle(handle)
    label = to_bare_handle(handle, env)
    if domain is None:
        return label
    return f'{label}<span class="at">@</span><span class="domain">{escapeHtml(domain)}</span>'


__all__ = ["split_handle", "to_bare_handle", "to_full_handle"]
