from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from loguru import logger

from ._some import Option, Some
from .err import AbsentValueError

T = TypeVar("T")


class Maybe(Generic[T]):
    """A value that may be absent.

    Presence is decided once, at construction, and never changes afterwards.
    ``None`` is the absent sentinel: it can be passed to :meth:`of` but never
    held as a value.
    """

    __slots__ = ("_slot",)

    _slot: Option[T]

    def __init__(self, slot: Option[T] = None):
        if slot is not None:
            if not isinstance(slot, Some):
                raise TypeError(f"Expected Some or None, got {type(slot).__name__}")
            if slot.value is None:
                raise ValueError("Some(None) cannot be held, use Maybe.absent()")

        object.__setattr__(self, "_slot", slot)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __repr__(self):
        if self._slot is None:
            return "Maybe.absent()"
        return f"Maybe.of({self._slot.value!r})"

    @classmethod
    def of(cls, value: T | None) -> Maybe[T]:
        return cls(None if value is None else Some(value))

    @classmethod
    def of_required(cls, value: T | None) -> Maybe[T]:
        if value is None:
            logger.debug("Maybe.of_required received None")
            raise AbsentValueError("Required a present value, got None")
        return cls(Some(value))

    @classmethod
    def absent(cls) -> Maybe[T]:
        return cls()

    @classmethod
    def from_option(cls, option: Option[T]) -> Maybe[T]:
        # Some(None) would smuggle the sentinel in as a value
        if option is None or option.value is None:
            return cls()
        return cls(option)

    def is_present(self) -> bool:
        return self._slot is not None

    def is_absent(self) -> bool:
        return not self.is_present()

    def unwrap(self) -> T:
        if self._slot is None:
            raise AbsentValueError
        return self._slot.value

    def unwrap_or(self, default: T) -> T:
        if self._slot is None:
            return default
        return self._slot.value

    def to_option(self) -> Option[T]:
        return self._slot

    def on_present(self, callback: Callable[[T], Any]) -> Maybe[T]:
        if self._slot is not None:
            callback(self._slot.value)
        return self

    def on_absent(self, callback: Callable[[], Any]) -> Maybe[T]:
        if self._slot is None:
            callback()
        return self
