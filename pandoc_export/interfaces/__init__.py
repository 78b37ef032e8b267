"""Interfaces for the collaborators the exporter does not implement itself."""

from pandoc_export.interfaces.host import HostEditor, RenderedDocument
from pandoc_export.interfaces.notifier import Notice, NoticeKind, Notifier

__all__ = [
    "HostEditor",
    "Notice",
    "NoticeKind",
    "Notifier",
    "RenderedDocument",
]
