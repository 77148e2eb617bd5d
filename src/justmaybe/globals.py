from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Settings


LOGGER_NAME = "justmaybe"

SETTINGS_CONTEXT: ContextVar[Settings] = ContextVar("SETTINGS_CONTEXT")
