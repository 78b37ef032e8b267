"""Converter subsystem: runs the external document converter."""

from pandoc_export.converter.invoker import build_command, format_command, invoke
from pandoc_export.converter.models import ConversionOutcome, ConverterError, InputSpec, OutputSpec

__all__ = [
    "ConversionOutcome",
    "ConverterError",
    "InputSpec",
    "OutputSpec",
    "build_command",
    "format_command",
    "invoke",
]
