"""Resolve bare @handles to your own instance and link to profile pages."""

from markdown_it import MarkdownIt

from mdit_mention import mention_plugin, to_bare_handle

LOCAL_USERS = {"@alice", "@bob"}

md = MarkdownIt().use(
    mention_plugin,
    local_domain=lambda bare, env: env["domain"] if bare in LOCAL_USERS else None,
    link=lambda handle, env: f"https://{handle.split('@')[2]}/{handle.rsplit('@', 1)[0]}",
    link_attributes=lambda handle, env: {"class": "u-url mention", "translate": "no"},
    label=to_bare_handle,
)

source = """
Hi @alice and @bob, please loop in @carol@other.example.

@mallory is not a local user, so that handle stays plain text.
"""

env = {"domain": "social.example"}
print(md.render(source, env))
print(env["mentions"])
