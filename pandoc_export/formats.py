"""Output formats offered for export, in command-palette order."""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, ConfigDict


class OutputFormat(str, Enum):
    """Converter writer names for each exportable format."""

    asciidoc = "asciidoc"
    docx = "docx"
    markdown = "markdown"
    html = "html"
    latex = "latex"
    odt = "odt"
    pptx = "pptx"
    epub = "epub"
    pdf = "pdf"
    revealjs = "revealjs"
    beamer = "beamer"
    rst = "rst"
    dokuwiki = "dokuwiki"
    mediawiki = "mediawiki"


class FormatSpec(BaseModel):
    """Static metadata for one OutputFormat."""

    model_config = ConfigDict(frozen=True)

    pretty_name: str
    format: OutputFormat
    extension: str
    short_name: str

    @property
    def needs_converter(self) -> bool:
        return needs_converter(self.format)

    @property
    def needs_pdf_engine(self) -> bool:
        return needs_pdf_engine(self.format)

    @property
    def standalone(self) -> bool:
        return needs_standalone(self.format)


OUTPUT_FORMATS: tuple[FormatSpec, ...] = tuple(
    FormatSpec(pretty_name=p, format=OutputFormat(f), extension=e, short_name=s)
    for p, f, e, s in [
        ("AsciiDoc (adoc)", "asciidoc", "adoc", "AsciiDoc"),
        ("Word Document (docx)", "docx", "docx", "Word"),
        ("Pandoc Markdown", "markdown", "pandoc.md", "markdown"),
        ("HTML (without Pandoc)", "html", "html", "HTML"),
        ("LaTeX", "latex", "tex", "LaTeX"),
        ("OpenDocument (odt)", "odt", "odt", "OpenDocument"),
        ("PowerPoint (pptx)", "pptx", "pptx", "PowerPoint"),
        ("ePub", "epub", "epub", "ePub"),
        ("PDF (via LaTeX)", "pdf", "pdf", "PDF"),
        ("Reveal.js Slides", "revealjs", "reveal.html", "Reveal.js"),
        ("Beamer Slides", "beamer", "beamer.tex", "Beamer"),
        ("reStructured Text (RST)", "rst", "rst", "RST"),
        ("DokuWiki", "dokuwiki", "txt", "DokuWiki"),
        ("MediaWiki", "mediawiki", "mediawiki", "MediaWiki"),
    ]
)

_BY_FORMAT: dict[str, FormatSpec] = {spec.format.value: spec for spec in OUTPUT_FORMATS}
if len(_BY_FORMAT) != len(OUTPUT_FORMATS):
    raise RuntimeError("duplicate format identifier in OUTPUT_FORMATS")

INPUT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")

_STANDALONE = {OutputFormat.html, OutputFormat.revealjs, OutputFormat.latex, OutputFormat.beamer, OutputFormat.pdf}


def get_format(name: str | OutputFormat) -> FormatSpec:
    """Look up a FormatSpec by identifier. Raises KeyError for unknown names."""
    key = name.value if isinstance(name, OutputFormat) else str(name).lower()
    return _BY_FORMAT[key]


def needs_converter(fmt: OutputFormat) -> bool:
    # HTML is written straight from the rendered note
    return fmt != OutputFormat.html


def needs_pdf_engine(fmt: OutputFormat) -> bool:
    return fmt == OutputFormat.pdf


def needs_standalone(fmt: OutputFormat) -> bool:
    return fmt in _STANDALONE


def replace_file_extension(path: str, extension: str) -> str:
    """Swap the last suffix of the basename for ``extension``.

    A name without a suffix (or a dotfile such as ``.notes``) gets the
    extension appended instead.
    """
    directory, name = os.path.split(path)
    dot = name.rfind(".")
    stem = name[:dot] if dot > 0 else name
    return os.path.join(directory, f"{stem}.{extension}")
