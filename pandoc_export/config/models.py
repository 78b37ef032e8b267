from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ExportSettings(BaseModel):
    export_from: Literal["html", "md"] = "html"
    output_folder: str = ""
    extra_arguments: str = ""
    show_cli_commands: bool = False
    pandoc: str = ""
    pdflatex: str = ""
    timeout: float = Field(default=120.0, gt=0)

    @field_validator("export_from", mode="before")
    @classmethod
    def _normalize_mode(cls, value: object) -> object:
        # "markdown-preserve" is the long name used in docs and older configs
        if isinstance(value, str) and value.lower() in ("markdown", "markdown-preserve"):
            return "md"
        return value


class AppConfig(BaseModel):
    export: ExportSettings = Field(default_factory=ExportSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
