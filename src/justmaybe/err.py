from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class MaybeError(Exception): ...


@dataclass
class AbsentValueError(MaybeError):
    reason: str | None = None

    def __str__(self):
        return self.reason or "Expected a present value, got nothing"


@dataclass
class SettingsError(MaybeError):
    source: Path | str
    detail: str

    def __str__(self):
        return f"Invalid settings in {self.source}: {self.detail}"
