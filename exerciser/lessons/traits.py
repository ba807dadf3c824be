"""Shared behaviour through base classes and mixins."""

from __future__ import annotations

from dataclasses import dataclass


def append_bar(text: str) -> str:
    return text + "Bar"


def append_bar_to_list(items: list[str]) -> list[str]:
    """Append "Bar" to the list in place and return the same list."""
    items.append("Bar")
    return items


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int


@dataclass
class OtherSoftware(Licensed):
    version_number: str


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item: SomeTrait) -> bool:
    """True if the item provides both behaviours; the item must have both."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError(f"{type(item).__name__} must provide both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()