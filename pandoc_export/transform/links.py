"""Rewrites [[wikilinks]] to plain Markdown links."""

import re

from .pipeline import Transform

# [[target]] or [[target|display]]; must run after EmbedRewriter
_LINK_RE = re.compile(r"\[\[([^\[\]|]+)(?:\|([^\[\]]*))?\]\]")


class WikiLinkRewriter(Transform):
    def apply(self, content: str) -> str:
        return _LINK_RE.sub(_rewrite_match, content)


def _rewrite_match(m: re.Match) -> str:
    target = m.group(1)
    display = m.group(2) or target
    return f"[{display}]({target})"
