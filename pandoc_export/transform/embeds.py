"""Rewrites ![[embed]] syntax to plain Markdown images."""

import posixpath
import re

from .pipeline import Transform

# ![[folder/name.png]] or ![[folder/name.png|alt text]]
_EMBED_RE = re.compile(r"!\[\[([^\[\]|]+?)(?:\|([^\[\]]*))?\]\]")


class EmbedRewriter(Transform):
    def apply(self, content: str) -> str:
        return _EMBED_RE.sub(_rewrite_match, content)


def _rewrite_match(m: re.Match) -> str:
    target = m.group(1).strip()
    alt = m.group(2)
    if not alt:
        # Default alt text is the file name without its folder
        alt = posixpath.basename(target.replace("\\", "/"))
    return f"![{alt}]({target})"
