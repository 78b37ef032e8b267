"""Builds converter command lines and runs the converter as a subprocess."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import shlex
from typing import Sequence

from pandoc_export.converter.models import ConversionOutcome, ConverterError, InputSpec, OutputSpec
from pandoc_export.formats import OutputFormat, needs_pdf_engine, needs_standalone

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 120.0


def _writer_name(fmt: OutputFormat) -> str:
    # PDF goes through the LaTeX writer; the engine turns it into a PDF
    return "latex" if fmt == OutputFormat.pdf else fmt.value


def build_command(
    binary: str,
    source: InputSpec,
    output: OutputSpec,
    extra_args: Sequence[str] = (),
    pdf_engine: str | None = None,
) -> list[str]:
    """Assemble the full argv for one conversion."""
    argv = [binary, *extra_args, "-f", source.format, "-t", _writer_name(output.format)]
    if needs_standalone(output.format):
        argv.append("-s")
    argv += ["-o", output.file]
    if source.metadata_file:
        argv += ["--metadata-file", source.metadata_file]
    if pdf_engine and needs_pdf_engine(output.format):
        argv += ["--pdf-engine", pdf_engine]
    if source.file is not None:
        argv.append(source.file)
    return argv


def format_command(argv: Sequence[str]) -> str:
    """One-line, copy-pasteable rendition of ``argv``."""
    return shlex.join(argv)


async def invoke(
    source: InputSpec,
    output: OutputSpec,
    extra_args: Sequence[str] = (),
    *,
    binary: str = "pandoc",
    pdf_engine: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> ConversionOutcome:
    """Run the converter once and classify the result.

    Any stderr from a zero exit is returned as warning text. Spawn failures,
    timeouts and non-zero exits raise ConverterError.
    """
    argv = build_command(binary, source, output, extra_args, pdf_engine)
    command = format_command(argv)
    logger.debug("Running converter: %s", command)

    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE if source.contents is not None else asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=source.directory,
        )
    except OSError as exc:
        raise ConverterError(f"could not start {binary}: {exc}", command=command) from exc

    stdin_bytes = source.contents.encode("utf-8") if source.contents is not None else None
    try:
        _stdout, stderr_bytes = await asyncio.wait_for(proc.communicate(stdin_bytes), timeout=timeout)
    except asyncio.TimeoutError:
        # The process may have exited between the timeout and the kill
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        raise ConverterError(f"{binary} timed out after {timeout:g}s", command=command) from None

    stderr = stderr_bytes.decode("utf-8", errors="replace").strip()
    if proc.returncode != 0:
        logger.warning("Converter exited %d: %s", proc.returncode, stderr[:200])
        raise ConverterError(
            stderr or f"{binary} exited with status {proc.returncode}",
            command=command,
            returncode=proc.returncode,
            stderr=stderr,
        )

    return ConversionOutcome(error=stderr, command=command, returncode=proc.returncode)
