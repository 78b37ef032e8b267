"""Capability detection: which external binaries can we use this session."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict

from pandoc_export.config.models import ExportSettings
from pandoc_export.formats import INPUT_EXTENSIONS, FormatSpec

logger = logging.getLogger(__name__)

DEFAULT_BINARIES: dict[str, str] = {
    "converter": "pandoc",
    "pdf-engine": "pdflatex",
}

_FIELDS = {"converter": "converter", "pdf-engine": "pdf_engine"}


class FeatureMap(BaseModel):
    """Capability name -> absolute binary path, or None when unavailable."""

    model_config = ConfigDict(frozen=True)

    converter: str | None = None
    pdf_engine: str | None = None

    def __getitem__(self, name: str) -> str | None:
        try:
            return getattr(self, _FIELDS[name])
        except KeyError:
            raise KeyError(f"Unknown capability: {name}") from None

    def available(self, name: str) -> bool:
        return bool(self[name])


def detect_features(
    settings: ExportSettings,
    which: Callable[[str], str | None] = shutil.which,
) -> FeatureMap:
    """Resolve each capability: configured override first, then a PATH lookup."""
    overrides = {"converter": settings.pandoc, "pdf-engine": settings.pdflatex}
    resolved: dict[str, str | None] = {}
    for name, default in DEFAULT_BINARIES.items():
        path = overrides[name].strip() or which(default)
        if not path:
            logger.debug("%s not found (looked for %r on PATH)", name, default)
        resolved[_FIELDS[name]] = path or None
    return FeatureMap(**resolved)


def can_export(document_path: str | None, spec: FormatSpec, features: FeatureMap) -> bool:
    """True when ``document_path`` may be exported to ``spec`` right now."""
    if spec.needs_converter and not features.available("converter"):
        return False
    if spec.needs_pdf_engine and not features.available("pdf-engine"):
        return False
    if not document_path:
        return False
    return is_supported_input(document_path)


def is_supported_input(document_path: str | Path) -> bool:
    return str(document_path).lower().endswith(INPUT_EXTENSIONS)
