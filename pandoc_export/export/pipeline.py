"""Export flow: prepare content, run the converter, report the outcome."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path

import yaml

from pandoc_export.args import resolve_args, split_arg_lines
from pandoc_export.converter import invoke
from pandoc_export.converter.models import ConversionOutcome, ConverterError, InputSpec, OutputSpec
from pandoc_export.export.models import ExportContext, ExportRequest, ExportResult, ExportState
from pandoc_export.formats import OutputFormat, replace_file_extension
from pandoc_export.interfaces.notifier import Notice, NoticeKind
from pandoc_export.transform import transform_embeds_and_links

logger = logging.getLogger(__name__)

WARNING_TIMEOUT_MS = 10_000
FAILURE_TIMEOUT_MS = 15_000


def output_path(input_file: str, extension: str, output_folder: str = "") -> str:
    """Destination for an export: next to the note, or inside ``output_folder``."""
    output_file = replace_file_extension(input_file, extension)
    if output_folder:
        output_file = os.path.join(output_folder, os.path.basename(output_file))
    return output_file


class ExportFlow:
    """Runs one ExportRequest through the state machine.

    idle -> preparing -> converting -> succeeded | succeeded_with_warnings | failed
    (an HTML export goes from preparing straight to succeeded)
    """

    def __init__(self, ctx: ExportContext, request: ExportRequest) -> None:
        self.ctx = ctx
        self.request = request
        self.state = ExportState.idle
        self.output_file = output_path(request.input_file, request.extension, ctx.settings.output_folder)
        self.command: str | None = None

    def _notify(self, kind: NoticeKind, message: str, timeout_ms: int | None = None) -> None:
        self.ctx.notifier.notify(Notice(kind=kind, message=message, timeout_ms=timeout_ms))

    def _transition(self, state: ExportState) -> None:
        logger.debug("%s: %s -> %s", self.request.input_file, self.state.value, state.value)
        self.state = state

    async def run(self) -> ExportResult:
        self._notify(NoticeKind.info, f"Exporting {self.request.input_file} to {self.request.short_name}")
        self._transition(ExportState.preparing)
        try:
            with tempfile.TemporaryDirectory(prefix="pandoc-export-") as workdir:
                outcome = await self._prepare_and_convert(Path(workdir))
        except Exception as exc:
            return self._fail(exc)

        if outcome is None or outcome.ok:
            self._transition(ExportState.succeeded)
            self._notify(NoticeKind.success, f"Successfully exported via Pandoc to {self.output_file}")
        else:
            self._transition(ExportState.succeeded_with_warnings)
            self._notify(NoticeKind.success, f"Exported via Pandoc to {self.output_file} with warnings")
            self._notify(NoticeKind.warning, f"Pandoc warnings: {outcome.error}", WARNING_TIMEOUT_MS)
        self._echo_command()
        return ExportResult(
            state=self.state, output_file=self.output_file, outcome=outcome, command=self.command
        )

    def _fail(self, exc: Exception) -> ExportResult:
        self._transition(ExportState.failed)
        logger.exception("Export of %s failed", self.request.input_file)
        if isinstance(exc, ConverterError) and exc.command:
            self.command = exc.command
        self._notify(NoticeKind.error, f"Pandoc export failed: {exc}", FAILURE_TIMEOUT_MS)
        self._echo_command()
        return ExportResult(
            state=self.state, output_file=self.output_file, error=str(exc), command=self.command
        )

    def _echo_command(self) -> None:
        if self.ctx.settings.show_cli_commands and self.command:
            self._notify(NoticeKind.command, f"Pandoc command: {self.command}", WARNING_TIMEOUT_MS)
            logger.debug("Pandoc command: %s", self.command)

    async def _prepare_and_convert(self, workdir: Path) -> ConversionOutcome | None:
        if self.ctx.settings.export_from == "html":
            source = await self._prepare_from_html(workdir)
        else:
            source = await self._prepare_from_markdown(workdir)
        if source is None:
            return None

        self._transition(ExportState.converting)
        extra_args = resolve_args(split_arg_lines(self.ctx.settings.extra_arguments), self.ctx.host.project_root())
        features = self.ctx.features
        try:
            outcome = await invoke(
                source,
                OutputSpec(file=self.output_file, format=self.request.format),
                extra_args,
                binary=features.converter or "pandoc",
                pdf_engine=features.pdf_engine,
                timeout=self.ctx.settings.timeout,
            )
        except ConverterError as exc:
            self.command = exc.command or None
            raise
        self.command = outcome.command
        return outcome

    async def _prepare_from_html(self, workdir: Path) -> InputSpec | None:
        """Render through the host; returns None when the HTML was written directly."""
        rendered = await self.ctx.host.render_to_html(self.request.input_file, self.request.format)
        if self.request.format == OutputFormat.html:
            await asyncio.to_thread(_write_text, Path(self.output_file), rendered.html)
            return None

        metadata_file = workdir / "metadata.yaml"
        dumped = yaml.safe_dump(rendered.metadata, default_flow_style=False, allow_unicode=True)
        await asyncio.to_thread(_write_text, metadata_file, dumped)
        return InputSpec(
            format="html",
            contents=rendered.html,
            metadata_file=str(metadata_file),
            directory=os.path.dirname(self.request.input_file) or None,
        )

    async def _prepare_from_markdown(self, workdir: Path) -> InputSpec:
        contents = await self.ctx.host.read_source(self.request.input_file)
        content_file = workdir / "content.md"
        await asyncio.to_thread(_write_text, content_file, transform_embeds_and_links(contents))
        return InputSpec(
            format="markdown",
            file=str(content_file),
            directory=os.path.dirname(self.request.input_file) or None,
        )


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


async def run_export(ctx: ExportContext, request: ExportRequest) -> ExportResult:
    """Run one export end to end. Never raises; failures come back as ExportResult."""
    return await ExportFlow(ctx, request).run()
