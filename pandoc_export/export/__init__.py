"""Export orchestration: request models, context, and the export flow."""

from pandoc_export.export.models import ExportContext, ExportRequest, ExportResult, ExportState
from pandoc_export.export.pipeline import ExportFlow, output_path, run_export

__all__ = [
    "ExportContext",
    "ExportFlow",
    "ExportRequest",
    "ExportResult",
    "ExportState",
    "output_path",
    "run_export",
]
