"""Anchor relative paths in user-supplied converter arguments to the vault root.

The converter runs with the note's directory as its working directory, so a
``--lua-filter=filters/cite.lua`` written relative to the vault would not be
found. Each argument token is rewritten independently:

- ``opt=value``: only the value is considered, and only when it contains a
  path separator and is not already absolute.
- a bare token containing a separator is anchored unless it is absolute or
  starts with ``-`` (a flag).
- anything else passes through untouched.
"""

from __future__ import annotations

import os
import re
from typing import Iterable

_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def split_arg_lines(text: str) -> list[str]:
    """Split the settings' extra-arguments block into tokens, one per line."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def has_separator(value: str) -> bool:
    return "/" in value or "\\" in value


def is_absolute_arg(value: str) -> bool:
    return value.startswith(("/", "\\")) or bool(_DRIVE_RE.match(value))


def resolve_arg(arg: str, project_root: str) -> str:
    if "=" in arg:
        prefix, value = arg.split("=", 1)
        if has_separator(value) and not is_absolute_arg(value):
            return f"{prefix}={os.path.join(project_root, value)}"
        return arg
    if has_separator(arg):
        if is_absolute_arg(arg) or arg.startswith("-"):
            return arg
        return os.path.join(project_root, arg)
    return arg


def resolve_args(lines: Iterable[str], project_root: str) -> list[str]:
    return [resolve_arg(arg, project_root) for arg in lines]
