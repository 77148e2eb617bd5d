from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from .err import SettingsError
from .globals import LOGGER_NAME, SETTINGS_CONTEXT


@dataclass(frozen=True)
class Settings:
    # None leaves the loguru switch for the package untouched
    logging: Optional[bool] = None  # noqa: UP007
    trace_skips: bool = False


_DEFAULT_SETTINGS = Settings()


def current_settings() -> Settings:
    return SETTINGS_CONTEXT.get(_DEFAULT_SETTINGS)


def apply_logging(enabled: bool):
    if enabled:
        logger.enable(LOGGER_NAME)
    else:
        logger.disable(LOGGER_NAME)


@contextmanager
def use_settings(settings: Settings):
    previous = current_settings()
    token = SETTINGS_CONTEXT.set(settings)
    if settings.logging is not None:
        apply_logging(settings.logging)

    try:
        yield settings
    finally:
        SETTINGS_CONTEXT.reset(token)
        # an unset outer value leaves whatever the host application chose
        if settings.logging is not None and previous.logging is not None:
            apply_logging(previous.logging)


def load_settings(settings_file: Path | str) -> Settings:
    """Read settings from a TOML file.

    A ``pyproject.toml`` is read from its ``[tool.justmaybe]`` table, any other
    file from its top level. Unknown keys and mistyped values are rejected.
    """

    import tomlkit
    from dacite.config import Config
    from dacite.core import from_dict
    from dacite.exceptions import DaciteError
    from tomlkit.exceptions import ParseError

    settings_file = Path(settings_file)

    try:
        with open(settings_file, "r", encoding="utf-8") as fp:
            doc = tomlkit.load(fp)
    except (OSError, UnicodeDecodeError, ParseError) as e:
        raise SettingsError(settings_file, str(e)) from e

    data = doc.unwrap()
    if settings_file.name == "pyproject.toml":
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise SettingsError(settings_file, "`tool` must be a table")
        data = tool.get(LOGGER_NAME, {})
        if not isinstance(data, dict):
            raise SettingsError(settings_file, f"`tool.{LOGGER_NAME}` must be a table")

    try:
        return from_dict(Settings, data, Config(strict=True))
    except DaciteError as e:
        raise SettingsError(settings_file, str(e)) from e
