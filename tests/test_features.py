"""Tests for capability detection and export eligibility."""

import pytest

from pandoc_export.config.models import ExportSettings
from pandoc_export.features import FeatureMap, can_export, detect_features
from pandoc_export.formats import OUTPUT_FORMATS, get_format


def _which(found: dict[str, str]):
    return lambda name: found.get(name)


# ---------------------------------------------------------------------------
# detect_features
# ---------------------------------------------------------------------------


class TestDetectFeatures:
    def test_path_lookup(self):
        features = detect_features(
            ExportSettings(), which=_which({"pandoc": "/usr/bin/pandoc", "pdflatex": "/usr/bin/pdflatex"})
        )
        assert features.converter == "/usr/bin/pandoc"
        assert features.pdf_engine == "/usr/bin/pdflatex"

    def test_override_wins_over_path(self):
        features = detect_features(
            ExportSettings(pandoc="/opt/pandoc/bin/pandoc"),
            which=_which({"pandoc": "/usr/bin/pandoc"}),
        )
        assert features.converter == "/opt/pandoc/bin/pandoc"

    def test_override_not_probed(self):
        calls = []

        def which(name):
            calls.append(name)
            return None

        detect_features(ExportSettings(pandoc="/x/pandoc", pdflatex="/x/xelatex"), which=which)
        assert calls == []

    def test_missing_binaries_are_unavailable_not_errors(self):
        features = detect_features(ExportSettings(), which=_which({}))
        assert features.converter is None
        assert features.pdf_engine is None
        assert not features.available("converter")
        assert not features.available("pdf-engine")

    def test_blank_override_falls_back_to_path(self):
        features = detect_features(ExportSettings(pandoc="   "), which=_which({"pandoc": "/usr/bin/pandoc"}))
        assert features.converter == "/usr/bin/pandoc"


class TestFeatureMap:
    def test_lookup_by_capability_name(self, all_features):
        assert all_features["converter"] == "/usr/bin/pandoc"
        assert all_features["pdf-engine"] == "/usr/bin/pdflatex"

    def test_unknown_capability(self, all_features):
        with pytest.raises(KeyError):
            all_features["latex"]


# ---------------------------------------------------------------------------
# can_export
# ---------------------------------------------------------------------------


class TestCanExport:
    @pytest.mark.parametrize("spec", OUTPUT_FORMATS, ids=lambda s: s.format.value)
    def test_no_document_never_exportable(self, spec, all_features):
        assert can_export(None, spec, all_features) is False
        assert can_export("", spec, all_features) is False

    @pytest.mark.parametrize("spec", [s for s in OUTPUT_FORMATS if s.needs_converter], ids=lambda s: s.format.value)
    def test_converter_formats_need_converter(self, spec):
        features = FeatureMap(pdf_engine="/usr/bin/pdflatex")
        assert can_export("/v/n.md", spec, features) is False

    def test_pdf_needs_pdf_engine(self):
        features = FeatureMap(converter="/usr/bin/pandoc")
        assert can_export("/v/n.md", get_format("pdf"), features) is False
        assert can_export("/v/n.md", get_format("docx"), features) is True

    def test_html_available_without_binaries(self, no_features):
        assert can_export("/v/n.md", get_format("html"), no_features) is True

    @pytest.mark.parametrize("path", ["/v/n.md", "/v/n.markdown", "/v/N.MD"])
    def test_supported_inputs(self, path, all_features):
        assert can_export(path, get_format("docx"), all_features) is True

    @pytest.mark.parametrize("path", ["/v/n.txt", "/v/canvas.canvas", "/v/md", "/v/n.md.bak"])
    def test_unsupported_inputs(self, path, all_features):
        assert can_export(path, get_format("html"), all_features) is False
