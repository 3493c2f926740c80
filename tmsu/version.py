"""Semantic version numbers of the form major.minor.patch."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Version:
    """A three-part version number."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def less_than(self, other: Version) -> bool:
        """Whether this version precedes ``other``."""
        return (self.major, self.minor, self.patch) < (other.major, other.minor, other.patch)

    def greater_than(self, other: Version) -> bool:
        """Whether this version follows ``other``."""
        return (self.major, self.minor, self.patch) > (other.major, other.minor, other.patch)


def _component(parts: list[str], index: int, label: str) -> int:
    try:
        value = int(parts[index])
    except (IndexError, ValueError):
        raise ValueError(f"invalid {label} version") from None
    if value < 0:
        raise ValueError(f"invalid {label} version")
    return value


def parse_version(text: str) -> Version:
    """Parse a dotted version string such as ``"0.7.1"``."""
    parts = text.split(".")
    return Version(
        _component(parts, 0, "major"),
        _component(parts, 1, "minor"),
        _component(parts, 2, "patch"),
    )