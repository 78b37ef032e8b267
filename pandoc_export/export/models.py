"""Models for a single export flow and the context it runs in."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from pydantic import BaseModel, ConfigDict

from pandoc_export.config.models import ExportSettings
from pandoc_export.converter.models import ConversionOutcome
from pandoc_export.features import FeatureMap, detect_features, is_supported_input
from pandoc_export.formats import FormatSpec, OutputFormat
from pandoc_export.interfaces.host import HostEditor
from pandoc_export.interfaces.notifier import Notifier


class ExportState(str, Enum):
    idle = "idle"
    preparing = "preparing"
    converting = "converting"
    succeeded = "succeeded"
    succeeded_with_warnings = "succeeded_with_warnings"
    failed = "failed"

    @property
    def terminal(self) -> bool:
        return self in (
            ExportState.succeeded,
            ExportState.succeeded_with_warnings,
            ExportState.failed,
        )


class ExportRequest(BaseModel):
    """One user-triggered export. Built per invocation, never stored."""

    model_config = ConfigDict(frozen=True)

    input_file: str
    format: OutputFormat
    extension: str
    short_name: str

    @classmethod
    def for_format(cls, input_file: str, spec: FormatSpec) -> "ExportRequest":
        if not is_supported_input(input_file):
            raise ValueError(f"Unsupported input file: {input_file}")
        return cls(
            input_file=input_file,
            format=spec.format,
            extension=spec.extension,
            short_name=spec.short_name,
        )


class ExportResult(BaseModel):
    state: ExportState
    output_file: str
    outcome: ConversionOutcome | None = None
    error: str | None = None
    command: str | None = None


@dataclass(frozen=True)
class ExportContext:
    """Settings, detected features and host hooks shared by every export.

    Treated as a snapshot: a settings change builds a new context instead of
    mutating this one.
    """

    settings: ExportSettings
    features: FeatureMap
    host: HostEditor
    notifier: Notifier

    @classmethod
    def create(cls, settings: ExportSettings, host: HostEditor, notifier: Notifier) -> "ExportContext":
        return cls(settings=settings, features=detect_features(settings), host=host, notifier=notifier)

    def reload(self, settings: ExportSettings) -> "ExportContext":
        """New context for changed settings; binaries are probed again."""
        return replace(self, settings=settings, features=detect_features(settings))
