"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import AppConfig

CONFIG_FILENAME = "pandoc-export.yaml"

# Only these variables may be interpolated into a config file
_ALLOWED_ENV_VARS = frozenset({"HOME", "USER", "PANDOC", "PDFLATEX", "VAULT"})


def config_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".pandoc-export" / "config.yaml",
    ]
    return [p for p in paths if p is not None]


def load_config(cli_path: str | None = None) -> AppConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    for path in config_paths(cli_path):
        if path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return AppConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return AppConfig()


def save_config(config: AppConfig, path: str | Path) -> Path:
    """Write config to disk so settings survive across sessions."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False))
    return target


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings (allow-listed names only)."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", _env_lookup, obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


def _env_lookup(m: re.Match) -> str:
    name = m.group(1)
    if name not in _ALLOWED_ENV_VARS:
        return m.group(0)
    return os.environ.get(name, "")


# Default YAML template for `pandoc-export config init`
DEFAULT_CONFIG_TEMPLATE = """\
# pandoc-export.yaml

export:
  export_from: "html"          # html | md (markdown-preserve)
  output_folder: ""            # empty = next to the note
  # One converter argument per line. Relative paths are anchored to the vault.
  extra_arguments: ""
  #  --lua-filter=filters/zotero.lua
  #  --reference-doc=templates/reference.docx
  show_cli_commands: false
  pandoc: ""                   # empty = look up `pandoc` on PATH
  pdflatex: ""                 # empty = look up `pdflatex` on PATH
  timeout: 120                 # seconds before the converter is killed

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
