"""Host editor interface: the capabilities the export flow borrows from the editor."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from pandoc_export.formats import OutputFormat


class RenderedDocument(BaseModel):
    """A note rendered by the host, with the metadata it extracted."""

    html: str
    metadata: dict = Field(default_factory=dict)


@runtime_checkable
class HostEditor(Protocol):
    """Document access provided by the editor hosting the exporter."""

    def active_document(self) -> str | None: ...

    def project_root(self) -> str: ...

    async def render_to_html(self, path: str, fmt: OutputFormat) -> RenderedDocument: ...

    async def read_source(self, path: str) -> str: ...
