"""Trait drills: appending "Bar", shared licensing info and combined behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """A struct with both behaviours."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Another struct with both behaviours."""


def some_func(item: object) -> bool:
    """True when both behaviours of the item report success."""
    return item.some_function() and item.other_function()