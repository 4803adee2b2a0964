"""Raw inline HTML anchor detection.

markdown-it emits raw inline markup such as ``<a href="...">`` as
``html_inline`` tokens. The scanner treats text between an anchor start tag
and its end tag as already linked.

Only whole tags are recognised. Attributes are not parsed.
"""

from __future__ import annotations

import re

_LINK_OPEN_PATTERN = re.compile(r"^<a(?:\s[^>]*)?>$", re.IGNORECASE)
_LINK_CLOSE_PATTERN = re.compile(r"^</a\s*>$", re.IGNORECASE)


def is_link_open(html: str) -> bool:
    """Check if raw HTML is an anchor start tag.

    Example:
        >>> is_link_open('<A HREF="https://example.com/">')
        True
        >>> is_link_open("<abbr>")
        False
    """
    return _LINK_OPEN_PATTERN.match(html.strip()) is not None


def is_link_close(html: str) -> bool:
    """Check if raw HTML is an anchor end tag."""
    return _LINK_CLOSE_PATTERN.match(html.strip()) is not None


__all__ = ["is_link_close", "is_link_open"]
