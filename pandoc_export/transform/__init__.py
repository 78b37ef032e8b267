"""Text transforms applied to raw notes before they reach the converter.

Embeds are rewritten before links: ``![[x]]`` contains ``[[x]]``, so running
the link rewriter first would leave a stray ``!`` in front of a plain link.
"""

from .pipeline import Transform, TransformPipeline
from .embeds import EmbedRewriter
from .links import WikiLinkRewriter


def default_pipeline() -> TransformPipeline:
    return TransformPipeline([EmbedRewriter(), WikiLinkRewriter()])


def transform_embeds_and_links(text: str) -> str:
    return default_pipeline().apply(text)


__all__ = [
    "Transform",
    "TransformPipeline",
    "EmbedRewriter",
    "WikiLinkRewriter",
    "default_pipeline",
    "transform_embeds_and_links",
]
