"""A pair of values with one marked as current and the other as back buffer."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class DoubleBuf(Generic[T]):
    """Holds two values; switch() swaps which one is current."""

    def __init__(self, first: T, second: T) -> None:
        self.first = first
        self.second = second
        self._second_is_current = False

    def switch(self) -> None:
        self._second_is_current = not self._second_is_current

    def current(self) -> T:
        return self.second if self._second_is_current else self.first

    def back(self) -> T:
        return self.first if self._second_is_current else self.second