"""Notifier implementations: rich console output and an in-memory recorder."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from pandoc_export.interfaces.notifier import Notice, NoticeKind

logger = logging.getLogger(__name__)

_STYLES: dict[NoticeKind, str] = {
    NoticeKind.info: "cyan",
    NoticeKind.success: "green",
    NoticeKind.warning: "yellow",
    NoticeKind.error: "bold red",
    NoticeKind.command: "dim",
}

class ConsoleNotifier:
    """Prints notices to the terminal.

    The log copy is kept at debug: the console already shows the notice, and
    the export flow logs failures itself.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def notify(self, notice: Notice) -> None:
        style = _STYLES[notice.kind]
        self.console.print(f"[{style}]{escape(notice.message)}[/{style}]")
        logger.debug("%s: %s", notice.kind.value, notice.message)


class RecordingNotifier:
    """Keeps every notice in order; handy for tests and batch callers."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)

    def kinds(self) -> list[NoticeKind]:
        return [n.kind for n in self.notices]

    def of_kind(self, kind: NoticeKind) -> list[Notice]:
        return [n for n in self.notices if n.kind == kind]
