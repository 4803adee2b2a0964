"""Link fediverse mentions in 3 lines and collect who was mentioned."""

from mdit_mention import render

env = {}
html = render("Thanks @alice@example.social for the review!", env)
print(html)
print(env["mentions"])
