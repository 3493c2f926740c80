"""Tags, tag values and validation of their names."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

_LOGICAL_OPERATORS = {"and", "AND", "or", "OR", "not", "NOT"}
_COMPARISON_OPERATORS = {
    "eq", "EQ", "ne", "NE", "lt", "LT", "gt", "GT", "le", "LE", "ge", "GE",
}

_WHITE_SPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass
class Tag:
    """A named tag."""

    id: int
    name: str


@dataclass
class Value:
    """A named tag value."""

    id: int
    name: str


@dataclass
class TagFileCount:
    """A tag together with the number of files carrying it."""

    id: int
    name: str
    file_count: int


def _contains_cased(names: Iterable[str], name: str, ignore_case: bool) -> bool:
    if ignore_case:
        name = name.lower()
        return any(candidate.lower() == name for candidate in names)
    return any(candidate == name for candidate in names)


class Tags(list):
    """A list of tags."""

    def contains(self, tag: Tag) -> bool:
        """Whether a tag with the same id is present."""
        return any(item.id == tag.id for item in self)

    def contains_cased_name(self, name: str, ignore_case: bool) -> bool:
        """Whether a tag of this name is present."""
        return _contains_cased((item.name for item in self), name, ignore_case)


class Values(list):
    """A list of tag values."""

    def contains(self, value: Value) -> bool:
        """Whether a value with the same id is present."""
        return any(item.id == value.id for item in self)

    def contains_cased_name(self, name: str, ignore_case: bool) -> bool:
        """Whether a value of this name is present."""
        return _contains_cased((item.name for item in self), name, ignore_case)


def uniq_ids(ids: Iterable[int]) -> list[int]:
    """The distinct ids in ascending order."""
    return sorted(set(ids))


def _is_valid_char(char: str) -> bool:
    return unicodedata.category(char)[0] in "LNPS" or char in _WHITE_SPACE


def _is_print(char: str) -> bool:
    return unicodedata.category(char)[0] in "LMNPS" or char == " "


def _validate(name: str, subject: str, contain: str, comparisons: str) -> None:
    if name == "":
        raise ValueError(f"{subject} cannot be empty")
    if name in (".", ".."):
        raise ValueError(f"{subject} cannot be '.' or '..'")
    if name in _LOGICAL_OPERATORS:
        raise ValueError(f"{subject} cannot be a logical operator: 'and', 'or' or 'not'")
    if name in _COMPARISON_OPERATORS:
        raise ValueError(f"{subject} cannot be a comparison operator: {comparisons}")

    for char in name:
        if _is_valid_char(char):
            continue
        if _is_print(char):
            raise ValueError(f"{contain} cannot contain '{char}'")
        raise ValueError(f"{contain} cannot contain U+{ord(char):04X}")


def validate_tag_name(name: str) -> None:
    """Raise ValueError if ``name`` cannot be used as a tag name."""
    _validate(
        name,
        "tag name",
        "tag names",
        "'eq', 'ne', 'gt', 'lt', 'ge' or 'le'",
    )


def validate_value_name(name: str) -> None:
    """Raise ValueError if ``name`` cannot be used as a tag value."""
    _validate(
        name,
        "tag value",
        "tag value",
        "'eq', 'ne', 'lt', 'gt', 'le' or 'ge'",
    )