"""Shared test fixtures for pandoc-export."""

import pytest

from pandoc_export.config.models import ExportSettings
from pandoc_export.export import ExportContext
from pandoc_export.features import FeatureMap
from pandoc_export.formats import OutputFormat
from pandoc_export.interfaces.host import RenderedDocument
from pandoc_export.notify import RecordingNotifier


class StubHost:
    """HostEditor double: fixed document, canned HTML, call log."""

    def __init__(self, root, active=None, source="", html="<p>hi</p>", metadata=None):
        self.root = str(root)
        self.active = active
        self.source = source
        self.html = html
        self.metadata = metadata if metadata is not None else {"title": "Note"}
        self.rendered: list[tuple[str, OutputFormat]] = []
        self.read: list[str] = []

    def active_document(self):
        return self.active

    def project_root(self):
        return self.root

    async def render_to_html(self, path, fmt):
        self.rendered.append((path, fmt))
        return RenderedDocument(html=self.html, metadata=self.metadata)

    async def read_source(self, path):
        self.read.append(path)
        return self.source


@pytest.fixture
def all_features():
    return FeatureMap(converter="/usr/bin/pandoc", pdf_engine="/usr/bin/pdflatex")


@pytest.fixture
def no_features():
    return FeatureMap()


@pytest.fixture
def settings():
    return ExportSettings()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    (root / "notes").mkdir(parents=True)
    return root


@pytest.fixture
def note_path(vault):
    path = vault / "notes" / "Note.md"
    path.write_text("# Note\n\nSee [[Other]] and ![[imgs/a.png|Pic]].\n")
    return path


@pytest.fixture
def stub_host(vault, note_path):
    return StubHost(vault, active=str(note_path), source=note_path.read_text())


@pytest.fixture
def make_ctx(stub_host, notifier, all_features):
    """Build an ExportContext with overridable settings."""

    def _make(features=None, host=None, **settings_kwargs):
        return ExportContext(
            settings=ExportSettings(**settings_kwargs),
            features=features if features is not None else all_features,
            host=host or stub_host,
            notifier=notifier,
        )

    return _make
