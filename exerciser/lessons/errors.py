"""Reporting failures as exceptions: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32 = 32
_I64 = 64

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, rejecting anything else."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if _INTEGER.fullmatch(text) is None:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """The text of a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity, _I32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> int:
    """Buy the items if the tokens cover the cost; return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value that cannot become a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    def __init__(self, kind: str) -> None:
        if kind not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error: {kind!r}")
        super().__init__(f"number is {kind}")
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and self.kind == other.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))

    def __repr__(self) -> str:
        return f"CreationError({self.kind!r})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text that could not be parsed, or parsed to a number that is not positive."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise ValueError("exactly one cause must be given")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, error: CreationError) -> ParsePosNonzeroError:
        return cls(creation=error)

    @classmethod
    def from_parse_int(cls, error: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=error)

    def _key(self) -> tuple:
        parse_message = None if self.parse_int is None else str(self.parse_int)
        return (self.creation, parse_message)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ParsePosNonzeroError) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((ParsePosNonzeroError, self._key()))


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as error:
        raise ParsePosNonzeroError.from_parse_int(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError.from_creation(error) from error