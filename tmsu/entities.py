"""Files, file tags, implications, queries and settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

from tmsu.fingerprint import EMPTY, Fingerprint
from tmsu.tags import Tag, Value, uniq_ids

_TRUE_WORDS = {"yes", "Yes", "YES", "true", "True", "TRUE"}
_FALSE_WORDS = {"no", "No", "false", "False", "FALSE"}


@dataclass(frozen=True)
class TagIdValueIdPair:
    """A tag id together with a value id."""

    tag_id: int
    value_id: int

    def __str__(self) -> str:
        return f"#{self.tag_id}=#{self.value_id}"


@dataclass
class File:
    """A file known to the database."""

    id: int
    directory: str
    name: str
    fingerprint: Fingerprint = EMPTY
    mod_time: datetime | None = None
    size: int = 0
    is_dir: bool = False

    def path(self) -> str:
        """The full path of the file."""
        parts = [part for part in (self.directory, self.name) if part]
        if not parts:
            return ""
        joined = os.path.normpath(os.path.join(*parts))
        if joined.startswith(os.sep * 2):
            joined = joined[1:]
        return joined


@dataclass
class FileTagCount:
    """A file together with the number of tags applied to it."""

    file_id: int
    directory: str
    name: str
    tag_count: int


@dataclass
class FileTag:
    """The application of a tag, with an optional value, to a file."""

    file_id: int
    tag_id: int
    value_id: int
    explicit: bool = True
    implicit: bool = False

    def to_pair(self) -> TagIdValueIdPair:
        """The tag and value ids of this file tag."""
        return TagIdValueIdPair(self.tag_id, self.value_id)


class FileTags(list):
    """A list of file tags."""

    def to_pairs(self) -> list[TagIdValueIdPair]:
        """The tag and value id pairs, in order."""
        return [file_tag.to_pair() for file_tag in self]

    def single(self) -> FileTag | None:
        """The only file tag, or None unless there is exactly one."""
        return self[0] if len(self) == 1 else None

    def file_ids(self) -> list[int]:
        """The distinct file ids in ascending order."""
        return uniq_ids(file_tag.file_id for file_tag in self)

    def tag_ids(self) -> list[int]:
        """The distinct tag ids in ascending order."""
        return uniq_ids(file_tag.tag_id for file_tag in self)

    def value_ids(self) -> list[int]:
        """The distinct value ids in ascending order."""
        return uniq_ids(file_tag.value_id for file_tag in self)


@dataclass
class Implication:
    """A rule that one tag/value pair implies another."""

    implying_tag: Tag
    implying_value: Value
    implied_tag: Tag
    implied_value: Value

    def implying_pair(self) -> TagIdValueIdPair:
        """The ids of the implying tag and value."""
        return TagIdValueIdPair(self.implying_tag.id, self.implying_value.id)

    def implied_pair(self) -> TagIdValueIdPair:
        """The ids of the implied tag and value."""
        return TagIdValueIdPair(self.implied_tag.id, self.implied_value.id)


class Implications(list):
    """A list of implications."""

    def contains(self, implication: Implication) -> bool:
        """Whether an implication with the same ids is present."""
        return any(
            item.implying_pair() == implication.implying_pair()
            and item.implied_pair() == implication.implied_pair()
            for item in self
        )

    def implies(self, pair: TagIdValueIdPair) -> bool:
        """Whether any implication implies the given tag/value pair."""
        return any(item.implied_pair() == pair for item in self)


@dataclass
class Query:
    """A saved query."""

    text: str


@dataclass
class Setting:
    """A named database setting."""

    name: str
    value: str


class Settings(list):
    """A list of settings."""

    def auto_create_tags(self) -> bool:
        return self.bool_value("autoCreateTags")

    def auto_create_values(self) -> bool:
        return self.bool_value("autoCreateValues")

    def file_fingerprint_algorithm(self) -> str:
        return self.value("fileFingerprintAlgorithm")

    def directory_fingerprint_algorithm(self) -> str:
        return self.value("directoryFingerprintAlgorithm")

    def symlink_fingerprint_algorithm(self) -> str:
        return self.value("symlinkFingerprintAlgorithm")

    def report_duplicates(self) -> bool:
        return self.bool_value("reportDuplicates")

    def contains_name(self, name: str) -> bool:
        """Whether a setting of this name is present."""
        return any(setting.name == name for setting in self)

    def value(self, name: str) -> str:
        """The value of the first setting of this name, or an empty string."""
        return next((setting.value for setting in self if setting.name == name), "")

    def bool_value(self, name: str) -> bool:
        """The boolean value of a setting; False if it is absent."""
        for setting in self:
            if setting.name == name:
                if setting.value in _TRUE_WORDS:
                    return True
                if setting.value in _FALSE_WORDS:
                    return False
                raise ValueError("invalid boolean value")
        return False