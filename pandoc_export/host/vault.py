"""Filesystem-backed host: treats a directory of notes as the editor's vault."""

from __future__ import annotations

import asyncio
import html
import logging
from pathlib import Path

import markdown
import yaml

from pandoc_export.formats import OutputFormat
from pandoc_export.interfaces.host import RenderedDocument
from pandoc_export.transform import transform_embeds_and_links

logger = logging.getLogger(__name__)

_MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "toc"]

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


class VaultHost:
    """HostEditor over plain files, used by the CLI outside any editor."""

    def __init__(self, vault_root: str | Path, active: str | Path | None = None) -> None:
        self.vault_root = Path(vault_root).resolve()
        self._active = self._inside_vault(active) if active is not None else None

    def _inside_vault(self, path: str | Path) -> Path:
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.vault_root / candidate
        candidate = candidate.resolve()
        if not candidate.is_relative_to(self.vault_root):
            raise ValueError(f"Path traversal detected: {path}")
        return candidate

    def open(self, path: str | Path) -> None:
        self._active = self._inside_vault(path)

    def active_document(self) -> str | None:
        return str(self._active) if self._active is not None else None

    def project_root(self) -> str:
        return str(self.vault_root)

    async def read_source(self, path: str) -> str:
        return await asyncio.to_thread(self._inside_vault(path).read_text, encoding="utf-8")

    async def render_to_html(self, path: str, fmt: OutputFormat) -> RenderedDocument:
        source = await self.read_source(path)
        metadata, body = parse_frontmatter(source)
        metadata.setdefault("title", Path(path).stem)
        rendered = markdown.markdown(transform_embeds_and_links(body), extensions=_MARKDOWN_EXTENSIONS)
        logger.debug("Rendered %s for %s (%d chars)", path, fmt.value, len(rendered))
        document = _HTML_TEMPLATE.format(title=html.escape(str(metadata["title"])), body=rendered)
        return RenderedDocument(html=document, metadata=metadata)


def parse_frontmatter(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from markdown content."""
    if not content.startswith("---"):
        return {}, content
    end = content.find("\n---", 3)
    if end == -1:
        return {}, content
    fm_text = content[3:end].strip()
    body = content[end + 4:].lstrip("\n")
    metadata = yaml.safe_load(fm_text) or {}
    if not isinstance(metadata, dict):
        raise ValueError("Frontmatter must be a YAML mapping")
    return metadata, body
