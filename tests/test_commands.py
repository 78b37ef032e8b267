"""Tests for export command registration and enablement."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from pandoc_export.commands import CommandRegistry, ExportCommand, register_commands
from pandoc_export.converter.models import ConversionOutcome
from pandoc_export.export import ExportState
from pandoc_export.features import FeatureMap
from pandoc_export.formats import OUTPUT_FORMATS, get_format


class TestRegistration:
    def test_one_command_per_format_in_order(self, make_ctx):
        registry = register_commands(make_ctx())
        assert len(registry) == len(OUTPUT_FORMATS)
        assert [c.spec for c in registry] == list(OUTPUT_FORMATS)

    def test_ids_and_names(self, make_ctx):
        registry = register_commands(make_ctx())
        cmd = registry.get("pandoc-export-docx")
        assert cmd.name == "Export as Word Document (docx)"
        assert registry.get("pandoc-export-html").name == "Export as HTML (without Pandoc)"

    def test_duplicate_registration_rejected(self, make_ctx):
        ctx = make_ctx()
        registry = CommandRegistry()
        registry.register(ExportCommand(spec=get_format("pdf"), ctx=ctx))
        with pytest.raises(ValueError, match="already registered"):
            registry.register(ExportCommand(spec=get_format("pdf"), ctx=ctx))


class TestEnablement:
    def test_all_available_with_all_features(self, make_ctx):
        registry = register_commands(make_ctx())
        assert len(registry.available()) == len(OUTPUT_FORMATS)

    def test_only_html_without_binaries(self, make_ctx):
        registry = register_commands(make_ctx(features=FeatureMap()))
        assert [c.id for c in registry.available()] == ["pandoc-export-html"]

    def test_pdf_hidden_without_engine(self, make_ctx):
        registry = register_commands(make_ctx(features=FeatureMap(converter="/usr/bin/pandoc")))
        ids = {c.id for c in registry.available()}
        assert "pandoc-export-pdf" not in ids
        assert "pandoc-export-docx" in ids

    def test_nothing_without_active_document(self, make_ctx, stub_host):
        stub_host.active = None
        registry = register_commands(make_ctx())
        assert registry.available() == []
        assert registry.get("pandoc-export-html").check(checking=True) is False

    def test_unsupported_document(self, make_ctx, stub_host, vault):
        stub_host.active = str(vault / "board.canvas")
        registry = register_commands(make_ctx())
        assert registry.available() == []

    def test_rebind_picks_up_new_features(self, make_ctx):
        registry = register_commands(make_ctx(features=FeatureMap()))
        registry.rebind(make_ctx())
        assert len(registry.available()) == len(OUTPUT_FORMATS)


class TestCheckCallback:
    def test_checking_does_not_export(self, make_ctx):
        cmd = register_commands(make_ctx()).get("pandoc-export-docx")
        with patch("pandoc_export.export.pipeline.invoke", new_callable=AsyncMock) as spy:
            assert cmd.check(checking=True) is True
        spy.assert_not_called()

    def test_disabled_command_returns_false(self, make_ctx):
        cmd = register_commands(make_ctx(features=FeatureMap())).get("pandoc-export-docx")
        assert cmd.check(checking=False) is False

    def test_running_returns_export_coroutine(self, make_ctx):
        cmd = register_commands(make_ctx()).get("pandoc-export-docx")
        with patch(
            "pandoc_export.export.pipeline.invoke",
            new_callable=AsyncMock,
            return_value=ConversionOutcome(),
        ) as spy:
            result = asyncio.run(cmd.check(checking=False))
        spy.assert_awaited_once()
        assert result.state == ExportState.succeeded
