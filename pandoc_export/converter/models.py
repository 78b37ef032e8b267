"""Pydantic models and errors for converter invocations."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from pandoc_export.formats import OutputFormat


class InputSpec(BaseModel):
    """What the converter reads: a file on disk, or literal text fed on stdin."""

    format: str  # converter reader name: html, markdown, ...
    file: str | None = None
    contents: str | None = None
    metadata_file: str | None = None
    directory: str | None = None  # working directory for the converter process

    @model_validator(mode="after")
    def _one_source(self) -> "InputSpec":
        if (self.file is None) == (self.contents is None):
            raise ValueError("InputSpec needs exactly one of file or contents")
        return self


class OutputSpec(BaseModel):
    file: str
    format: OutputFormat


class ConversionOutcome(BaseModel):
    """Result of a converter run that exited cleanly."""

    error: str = ""  # stderr text; non-empty means "succeeded with warnings"
    command: str = ""
    returncode: int = 0

    @property
    def ok(self) -> bool:
        return not self.error


class ConverterError(Exception):
    """The converter could not be started, timed out, or exited non-zero."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
