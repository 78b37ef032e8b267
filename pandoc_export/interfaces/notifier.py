"""User-facing notification interface and models."""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel


class NoticeKind(str, Enum):
    info = "info"
    success = "success"
    warning = "warning"
    error = "error"
    command = "command"


class Notice(BaseModel):
    kind: NoticeKind
    message: str
    timeout_ms: int | None = None


@runtime_checkable
class Notifier(Protocol):
    """Sink for toasts, status lines, or whatever the host shows the user."""

    def notify(self, notice: Notice) -> None: ...
