"""Mention plugin configuration.

Options are bound once, when the plugin is applied to a ``MarkdownIt``
instance, and read by both the scanning core rule and the render rule.

Each resolver receives the handle and the markdown-it ``env`` of the
current render call:

    local_domain(bare_handle, env) -> str | None
        Domain for a handle written without one (``"@john"``). ``None``
        leaves the text alone. Absent by default, so bare handles stay text.

    link(handle, env) -> str | None
        ``href`` of the mention link. ``None`` renders the matched text
        as-is. Absent by default, which links to ``acct:<handle>``.

    link_attributes(handle, env) -> Mapping[str, str] | None
        Extra attributes of the ``<a>`` tag, placed before ``href``. ``None``
        adds none.

    label(handle, env) -> str | None
        HTML body of the ``<a>`` tag. Absent, or ``None`` returned, falls back
        to :func:`mdit_mention.label.to_full_handle`.

Usage:
    >>> from mdit_mention.config import MentionOptions
    >>> options = MentionOptions(local_domain=lambda bare, env: "example.com")
    >>> options.link is None
    True

Thread Safety:
    MentionOptions is frozen. Resolvers are called with the per-call ``env``
    and should not keep state of their own.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from mdit_mention.errors import PluginError

PLUGIN_NAME = "mention"

LocalDomainResolver = Callable[[str, Any], str | None]
LinkResolver = Callable[[str, Any], str | None]
LinkAttributesResolver = Callable[[str, Any], Mapping[str, str] | None]
LabelResolver = Callable[[str, Any], str | None]

# camelCase spellings accepted by from_dict
_ALIASES: dict[str, str] = {
    "localDomain": "local_domain",
    "linkAttributes": "link_attributes",
}


@dataclass(frozen=True, slots=True)
class MentionOptions:
    """Immutable mention plugin options.

    A resolver left as ``None`` is *absent*, which is different from a
    resolver that is present and returns ``None``: an absent ``link`` falls
    back to ``acct:<handle>`` while a declining one keeps the text.

    Attributes:
        local_domain: Resolves the domain of bare handles
        link: Resolves the ``href`` of a mention
        link_attributes: Extra ``<a>`` attributes for a mention
        label: HTML label of a mention

    """

    local_domain: LocalDomainResolver | None = None
    link: LinkResolver | None = None
    link_attributes: LinkAttributesResolver | None = None
    label: LabelResolver | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not callable(value):
                raise PluginError(
                    PLUGIN_NAME,
                    f"option {f.name!r} must be callable, got {type(value).__name__}",
                )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> MentionOptions:
        """Create MentionOptions from a mapping.

        Accepts both snake_case field names and the camelCase spellings
        ``localDomain`` and ``linkAttributes``. Unknown keys are silently
        ignored.

        Args:
            config_dict: Mapping of option names to resolvers.

        Returns:
            New MentionOptions instance.

        Example:
            >>> options = MentionOptions.from_dict({
            ...     "localDomain": lambda bare, env: "example.com",
            ...     "unknown_key": "ignored",
            ... })
            >>> options.local_domain("@john", {})
            'example.com'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _ALIASES.get(key, key)
            if name in valid_fields:
                filtered[name] = value
        return cls(**filtered)


# Module-level default options (reused, never recreated)
DEFAULT_OPTIONS: MentionOptions = MentionOptions()


def coerce_options(
    options: MentionOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> MentionOptions:
    """Normalize the accepted option spellings into a MentionOptions.

    Args:
        options: A MentionOptions, a mapping for :meth:`MentionOptions.from_dict`,
            or None.
        **kwargs: Individual options, merged over ``options``.

    Returns:
        MentionOptions instance (DEFAULT_OPTIONS when nothing is given).

    Raises:
        PluginError: If ``options`` has an unsupported type or an option is
            not callable.

    """
    if options is None:
        base: dict[str, Any] = {}
    elif isinstance(options, MentionOptions):
        if not kwargs:
            return options
        base = {f.name: getattr(options, f.name) for f in fields(options)}
    elif isinstance(options, Mapping):
        base = dict(options)
    else:
        raise PluginError(
            PLUGIN_NAME,
            f"options must be MentionOptions or a mapping, got {type(options).__name__}",
        )
    if not base and not kwargs:
        return DEFAULT_OPTIONS
    return MentionOptions.from_dict({**base, **kwargs})


__all__ = [
    "DEFAULT_OPTIONS",
    "LabelResolver",
    "LinkAttributesResolver",
    "LinkResolver",
    "LocalDomainResolver",
    "MentionOptions",
    "PLUGIN_NAME",
    "coerce_options",
]
