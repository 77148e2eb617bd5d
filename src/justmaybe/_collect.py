from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, TypeVar

from loguru import logger

from .config import current_settings
from .err import AbsentValueError

if TYPE_CHECKING:
    from ._maybe import Maybe

T = TypeVar("T")
U = TypeVar("U")


def collect_present(maybes: Iterable[Maybe[T]]) -> list[T]:
    """Values of the present entries, in input order."""

    trace = current_settings().trace_skips
    result: list[T] = []
    total = 0

    for index, maybe in enumerate(maybes):
        total += 1
        maybe.on_present(result.append)

        if trace and maybe.is_absent():
            logger.trace(f"collect_present: skipped absent entry #{index}")

    logger.debug(f"collect_present: kept {len(result)} of {total}")
    return result


def collect_mapped(mapper: Callable[[T], Maybe[U]], maybes: Iterable[Maybe[T]]) -> list[U]:
    """Present values passed through ``mapper``, keeping the present results.

    An absent input is skipped without calling ``mapper``. An absent result
    from ``mapper`` is skipped as well. Exceptions raised inside ``mapper``
    reach the caller.
    """

    trace = current_settings().trace_skips
    result: list[U] = []
    total = 0

    for index, maybe in enumerate(maybes):
        total += 1

        if maybe.is_absent():
            if trace:
                logger.trace(f"collect_mapped: skipped absent entry #{index}")
            continue

        mapped = mapper(maybe.unwrap())
        try:
            result.append(mapped.unwrap())
        except AbsentValueError:
            if trace:
                logger.trace(f"collect_mapped: mapper returned absent for entry #{index}")

    logger.debug(f"collect_mapped: kept {len(result)} of {total}")
    return result


cat_maybes = collect_present
map_maybes = collect_mapped
