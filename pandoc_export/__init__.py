"""Export vault notes to other formats through Pandoc."""

from pandoc_export.commands import CommandRegistry, ExportCommand, register_commands
from pandoc_export.config import AppConfig, ExportSettings, load_config
from pandoc_export.export import ExportContext, ExportRequest, ExportResult, ExportState, run_export
from pandoc_export.features import FeatureMap, can_export, detect_features
from pandoc_export.formats import OUTPUT_FORMATS, FormatSpec, OutputFormat, get_format

__all__ = [
    "AppConfig",
    "CommandRegistry",
    "ExportCommand",
    "ExportContext",
    "ExportRequest",
    "ExportResult",
    "ExportSettings",
    "ExportState",
    "FeatureMap",
    "FormatSpec",
    "OUTPUT_FORMATS",
    "OutputFormat",
    "can_export",
    "detect_features",
    "get_format",
    "load_config",
    "register_commands",
    "run_export",
]
