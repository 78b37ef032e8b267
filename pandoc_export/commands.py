"""Command registration: one "Export as ..." command per output format."""

from __future__ import annotations

import logging
from collections.abc import Coroutine, Iterator
from dataclasses import dataclass, field
from typing import Any

from pandoc_export.export import ExportContext, ExportRequest, ExportResult, run_export
from pandoc_export.features import can_export
from pandoc_export.formats import OUTPUT_FORMATS, FormatSpec

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "pandoc-export-"


@dataclass
class ExportCommand:
    """A palette entry bound to one format and the context it was registered with."""

    spec: FormatSpec
    ctx: ExportContext

    @property
    def id(self) -> str:
        return COMMAND_PREFIX + self.spec.format.value

    @property
    def name(self) -> str:
        return "Export as " + self.spec.pretty_name

    def enabled(self) -> bool:
        return can_export(self.ctx.host.active_document(), self.spec, self.ctx.features)

    def check(self, checking: bool) -> bool | Coroutine[Any, Any, ExportResult]:
        """Host check-callback.

        With ``checking`` set, only reports whether the command is enabled.
        Otherwise returns the export coroutine for the caller to await, or
        False when the command is disabled.
        """
        if not self.enabled():
            return False
        if checking:
            return True
        return self.start()

    def start(self) -> Coroutine[Any, Any, ExportResult]:
        document = self.ctx.host.active_document()
        request = ExportRequest.for_format(document, self.spec)
        return run_export(self.ctx, request)


@dataclass
class CommandRegistry:
    commands: dict[str, ExportCommand] = field(default_factory=dict)

    def register(self, command: ExportCommand) -> None:
        if command.id in self.commands:
            raise ValueError(f"Command already registered: {command.id}")
        self.commands[command.id] = command

    def register_export_commands(self, ctx: ExportContext) -> None:
        for spec in OUTPUT_FORMATS:
            self.register(ExportCommand(spec=spec, ctx=ctx))
        logger.debug("Registered %d export commands", len(self.commands))

    def rebind(self, ctx: ExportContext) -> None:
        """Point every command at a reloaded context."""
        for command in self.commands.values():
            command.ctx = ctx

    def get(self, command_id: str) -> ExportCommand:
        return self.commands[command_id]

    def available(self) -> list[ExportCommand]:
        return [c for c in self if c.enabled()]

    def __iter__(self) -> Iterator[ExportCommand]:
        return iter(self.commands.values())

    def __len__(self) -> int:
        return len(self.commands)


def register_commands(ctx: ExportContext) -> CommandRegistry:
    registry = CommandRegistry()
    registry.register_export_commands(ctx)
    return registry
