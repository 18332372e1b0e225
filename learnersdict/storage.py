"""Persistent store of folders and words, backed by SQLite."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .errors import DatabaseError, DataImportError, SerializationError
from .model import (
    Data,
    Folder,
    FoldersAndCount,
    SortDirection,
    Word,
    WordsAndCount,
)

DATABASE_NAME = "dictionary"
DATABASE_VERSION = 1

OBJ_STORE_FOLDERS = "folders"
OBJ_STORE_WORDS = "words"

INDEX_FOLDER = "folder"

IMPORT_EXPORT_DATA_VERSION = 1

INVALID_VERSION_ERROR = "Invalid version"

DEFAULT_PATH = f"{DATABASE_NAME}.sqlite3"

_SCHEMA = """
CREATE TABLE folders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    folder TEXT NOT NULL,
    folder_note TEXT NOT NULL,
    datetime INTEGER NOT NULL
);
CREATE UNIQUE INDEX folders__folder ON folders (folder);
CREATE TABLE words (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    folder TEXT NOT NULL,
    word TEXT NOT NULL,
    word_class TEXT NOT NULL,
    url TEXT NOT NULL,
    note TEXT NOT NULL,
    datetime INTEGER NOT NULL
);
CREATE INDEX words__folder ON words (folder);
CREATE UNIQUE INDEX words__words ON words (folder, word);
"""

_STORE_OF = {Folder: OBJ_STORE_FOLDERS, Word: OBJ_STORE_WORDS}

_FOLDER_COLUMNS = "id, folder, folder_note, datetime"
_WORD_COLUMNS = "id, folder, word, word_class, url, note, datetime"

Item = Union[Folder, Word]


@contextmanager
def _database_errors() -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as exc:
        raise DatabaseError(str(exc)) from exc


def _store_name(kind: type) -> str:
    try:
        return _STORE_OF[kind]
    except KeyError:
        raise TypeError(f"no object store holds {kind.__name__} records") from None


def _folder_from_row(row: tuple) -> Folder:
    id_, folder, folder_note, datetime = row
    return Folder(folder=folder, folder_note=folder_note, datetime=datetime, id=id_)


def _word_from_row(row: tuple) -> Word:
    id_, folder, word, word_class, url, note, datetime = row
    return Word(
        folder=folder,
        word=word,
        word_class=word_class,
        url=url,
        note=note,
        datetime=datetime,
        id=id_,
    )


def _paging(limit: Optional[int], offset: Optional[int]) -> tuple[int, int]:
    # A limit of zero, like no limit at all, returns every record.
    return (limit if limit else -1, offset or 0)


def _order(direction: Union[str, SortDirection]) -> str:
    if not isinstance(direction, SortDirection):
        direction = SortDirection.from_symbol(direction)
    return "ASC" if direction is SortDirection.ASCENDING else "DESC"


class Storage:
    """Folders and words kept in a database file."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    @classmethod
    def open(cls, path: Union[str, Path, None] = None) -> "Storage":
        """Open the database at ``path``, creating its schema when new."""
        target = str(path if path is not None else DEFAULT_PATH)
        with _database_errors():
            connection = sqlite3.connect(target)
            try:
                (version,) = connection.execute("PRAGMA user_version").fetchone()
                if version > DATABASE_VERSION:
                    raise DatabaseError(
                        f"The requested version ({DATABASE_VERSION}) is less than "
                        f"the existing version ({version})"
                    )
                if version < DATABASE_VERSION:
                    connection.executescript(_SCHEMA)
                    connection.execute(f"PRAGMA user_version = {DATABASE_VERSION}")
                    connection.commit()
            except BaseException:
                connection.close()
                raise
        return cls(connection)

    def close(self) -> None:
        """Close the connection; later operations raise DatabaseError."""
        self._conn.close()

    def __enter__(self) -> "Storage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def delete_db(path: Union[str, Path, None] = None) -> None:
        """Remove the database file; a missing file is not an error."""
        target = Path(path if path is not None else DEFAULT_PATH)
        with _database_errors():
            try:
                target.unlink(missing_ok=True)
            except OSError as exc:
                raise DatabaseError(str(exc)) from exc

    @property
    def name(self) -> str:
        return DATABASE_NAME

    @property
    def version(self) -> int:
        with _database_errors():
            (version,) = self._conn.execute("PRAGMA user_version").fetchone()
        return version

    def store_names(self) -> list[str]:
        """Names of the object stores, sorted."""
        with _database_errors():
            rows = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' "
                "AND name NOT LIKE 'sqlite_%' ORDER BY name"
            ).fetchall()
        return [name for (name,) in rows]

    def index_names(self, store_name: str) -> list[str]:
        """Names of the indexes on one object store, sorted."""
        if store_name not in self.store_names():
            raise DatabaseError(f"No object store named {store_name!r}")
        prefix = f"{store_name}__"
        with _database_errors():
            rows = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = ?",
                (store_name,),
            ).fetchall()
        return sorted(name[len(prefix):] for (name,) in rows if name.startswith(prefix))

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        with _database_errors(), self._conn:
            yield self._conn

    @staticmethod
    def _insert(connection: sqlite3.Connection, item: Item) -> int:
        if isinstance(item, Folder):
            cursor = connection.execute(
                "INSERT INTO folders (folder, folder_note, datetime) VALUES (?, ?, ?)",
                (item.folder, item.folder_note, item.datetime),
            )
        elif isinstance(item, Word):
            cursor = connection.execute(
                "INSERT INTO words (folder, word, word_class, url, note, datetime) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (item.folder, item.word, item.word_class, item.url, item.note, item.datetime),
            )
        else:
            raise TypeError(f"cannot store {type(item).__name__}")
        return cursor.lastrowid

    def add(self, item: Item) -> int:
        """Store a folder or word and return the id it was given."""
        with self._transaction() as connection:
            return self._insert(connection, item)

    def import_items(self, items: Iterable[Item]) -> None:
        """Store many records in one transaction; any failure stores none."""
        with self._transaction() as connection:
            for item in items:
                self._insert(connection, item)

    def delete_by_id(self, kind: type, id: int) -> None:
        """Delete the record of the given kind; a missing id is ignored."""
        store = _store_name(kind)
        with self._transaction() as connection:
            connection.execute(f"DELETE FROM {store} WHERE id = ?", (id,))

    def get_word_by_id(self, id: int) -> Word:
        """Fetch one word, raising SerializationError when there is none."""
        with _database_errors():
            row = self._conn.execute(
                f"SELECT {_WORD_COLUMNS} FROM words WHERE id = ?", (id,)
            ).fetchone()
        if row is None:
            raise SerializationError(f"no word with id {id}")
        return _word_from_row(row)

    def get_words(
        self,
        folder: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        direction: Union[str, SortDirection] = "",
    ) -> WordsAndCount:
        """One page of the words in a folder and the folder's word count."""
        page_limit, page_offset = _paging(limit, offset)
        with _database_errors():
            rows = self._conn.execute(
                f"SELECT {_WORD_COLUMNS} FROM words WHERE folder = ? "
                f"ORDER BY id {_order(direction)} LIMIT ? OFFSET ?",
                (folder, page_limit, page_offset),
            ).fetchall()
            (count,) = self._conn.execute(
                "SELECT COUNT(*) FROM words WHERE folder = ?", (folder,)
            ).fetchone()
        return WordsAndCount(words=[_word_from_row(row) for row in rows], count=count)

    def get_folders(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        direction: Union[str, SortDirection] = "",
    ) -> FoldersAndCount:
        """One page of folders and the total number of folders."""
        page_limit, page_offset = _paging(limit, offset)
        with _database_errors():
            rows = self._conn.execute(
                f"SELECT {_FOLDER_COLUMNS} FROM folders "
                f"ORDER BY id {_order(direction)} LIMIT ? OFFSET ?",
                (page_limit, page_offset),
            ).fetchall()
            (count,) = self._conn.execute("SELECT COUNT(*) FROM folders").fetchone()
        return FoldersAndCount(folders=[_folder_from_row(row) for row in rows], count=count)

    def export_data(self) -> str:
        """Every folder and word as a JSON document, ids left out."""
        with _database_errors():
            folder_rows = self._conn.execute(
                f"SELECT {_FOLDER_COLUMNS} FROM folders ORDER BY id"
            ).fetchall()
            word_rows = self._conn.execute(
                f"SELECT {_WORD_COLUMNS} FROM words ORDER BY id"
            ).fetchall()
        data = Data(
            version=IMPORT_EXPORT_DATA_VERSION,
            folders=[_folder_from_row(row).with_id(None) for row in folder_rows],
            words=[_word_from_row(row).with_id(None) for row in word_rows],
        )
        return data.to_json()

    def import_data(self, text: str) -> Data:
        """Load an exported document: folders first, then words."""
        data = Data.from_json(text)
        if data.version != IMPORT_EXPORT_DATA_VERSION:
            raise DataImportError(INVALID_VERSION_ERROR)
        self.import_items(data.folders)
        self.import_items(data.words)
        return data