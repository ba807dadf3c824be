"""A cons list and a copy-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; the empty list is None."""

    value: int
    rest: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.rest


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, Cons(2, None))


class Cow:
    """A sequence that is borrowed until it must be changed, then copied once."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data = data
        self._owned = owned

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """A list that may be changed, copying the borrowed data the first time."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow