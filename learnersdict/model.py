"""Records stored in the dictionary: folders, words and export documents."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping, Optional

from .errors import SerializationError

_U32_MAX = 2**32 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class SortDirection(Enum):
    """Sort order of a listing, keyed by the arrow shown to the user."""

    ASCENDING = "\u2191"
    DESCENDING = "\u2193"

    @classmethod
    def from_symbol(cls, symbol: str) -> "SortDirection":
        """Return the direction for an arrow; anything unknown sorts descending."""
        for direction in cls:
            if direction.value == symbol:
                return direction
        return cls.DESCENDING


DEFAULT_SORT_DIRECTION = SortDirection.ASCENDING


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def _require(data: Mapping[str, Any], key: str) -> Any:
    if not isinstance(data, Mapping):
        raise SerializationError(f"expected an object, got {type(data).__name__}")
    try:
        return data[key]
    except KeyError:
        raise SerializationError(f"missing field `{key}`") from None


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise SerializationError(f"invalid type for `{key}`: expected a string")
    return value


def _integer(value: Any, key: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SerializationError(f"invalid type for `{key}`: expected an integer")
    if not low <= value <= high:
        raise SerializationError(f"invalid value for `{key}`: {value} out of range")
    return value


def _optional_id(data: Mapping[str, Any]) -> Optional[int]:
    value = data.get("id")
    if value is None:
        return None
    return _integer(value, "id", 0, _U32_MAX)


@dataclass(frozen=True)
class Folder:
    """A named folder that groups words."""

    folder: str
    folder_note: str
    datetime: int
    id: Optional[int] = None

    @classmethod
    def create(cls, folder: str, folder_note: str) -> "Folder":
        """Make a new, not yet stored folder stamped with the current time."""
        return cls(folder=folder, folder_note=folder_note, datetime=_now_millis())

    def with_id(self, id: Optional[int]) -> "Folder":
        """Return a copy carrying the given id."""
        return replace(self, id=id)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of the record; the id is left out when unset."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        result["folder"] = self.folder
        result["folder_note"] = self.folder_note
        result["datetime"] = self.datetime
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Folder":
        """Build a folder from a mapping, raising SerializationError if invalid."""
        return cls(
            folder=_string(data, "folder"),
            folder_note=_string(data, "folder_note"),
            datetime=_integer(_require(data, "datetime"), "datetime", _I64_MIN, _I64_MAX),
            id=_optional_id(data),
        )


@dataclass(frozen=True)
class Word:
    """A word or link saved into a folder."""

    folder: str
    word: str
    word_class: str
    url: str
    note: str
    datetime: int
    id: Optional[int] = None

    @classmethod
    def create(
        cls, folder: str, word: str, word_class: str, url: str, note: str
    ) -> "Word":
        """Make a new, not yet stored word stamped with the current time."""
        return cls(
            folder=folder,
            word=word,
            word_class=word_class,
            url=url,
            note=note,
            datetime=_now_millis(),
        )

    def with_id(self, id: Optional[int]) -> "Word":
        """Return a copy carrying the given id."""
        return replace(self, id=id)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping of the record; the id is left out when unset."""
        result: dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        result["folder"] = self.folder
        result["word"] = self.word
        result["word_class"] = self.word_class
        result["url"] = self.url
        result["note"] = self.note
        result["datetime"] = self.datetime
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Word":
        """Build a word from a mapping, raising SerializationError if invalid."""
        return cls(
            folder=_string(data, "folder"),
            word=_string(data, "word"),
            word_class=_string(data, "word_class"),
            url=_string(data, "url"),
            note=_string(data, "note"),
            datetime=_integer(_require(data, "datetime"), "datetime", _I64_MIN, _I64_MAX),
            id=_optional_id(data),
        )


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _require(data, key)
    if not isinstance(value, list):
        raise SerializationError(f"invalid type for `{key}`: expected a sequence")
    return value


@dataclass
class Data:
    """The export/import document holding every folder and word."""

    version: int
    folders: list[Folder] = field(default_factory=list)
    words: list[Word] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise to compact JSON."""
        document = {
            "version": self.version,
            "folders": [folder.to_dict() for folder in self.folders],
            "words": [word.to_dict() for word in self.words],
        }
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> "Data":
        """Parse a JSON document, raising SerializationError if it is invalid."""
        try:
            document = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            raise SerializationError(str(exc)) from None
        return cls(
            version=_integer(_require(document, "version"), "version", 0, _U32_MAX),
            folders=[Folder.from_dict(item) for item in _list(document, "folders")],
            words=[Word.from_dict(item) for item in _list(document, "words")],
        )


@dataclass
class FoldersAndCount:
    """One page of folders plus the total number stored."""

    folders: list[Folder]
    count: int


@dataclass
class WordsAndCount:
    """One page of words plus the total number in the folder."""

    words: list[Word]
    count: int


@dataclass(frozen=True)
class WordKey:
    """Identifies a stored word."""

    id: int


@dataclass(frozen=True)
class FolderKey:
    """Identifies a stored folder."""

    id: int