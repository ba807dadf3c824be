"""Small functions on numbers, strings, lists and optional values."""

from __future__ import annotations

COLOR_WORDS = frozenset({"green", "blue", "red"})


def calculate_price_of_apples(num: int) -> int:
    """An apple costs 2, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


def bigger(a: int, b: int) -> int:
    """The larger of the two numbers."""
    return a if a >= b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in COLOR_WORDS


def trim_me(text: str) -> str:
    """The text without whitespace at either end."""
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None for hours past 24."""
    if time_of_day > 24:
        return None
    if time_of_day < 22:
        return 5
    return 0