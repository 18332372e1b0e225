"""Application session: navigation, deletion guard, settings and the command line."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from .errors import StorageError
from .forms import FormError, submit_folder, submit_word
from .model import Folder, SortDirection, Word
from .page_length import format_page_length, parse_page_length
from .pager import Pager, PagerMode
from .storage import Storage
from .tabdata import (
    MSG_DATA_PROTECTION_IS_SET,
    MSG_DATA_SUCCESSFULLY_IMPORTED,
    MSG_FOLDER_WAS_DELETED,
    MSG_SELECT_FOLDER_FIRST,
    MSG_WORD_WAS_DELETED,
)

NOTICE_ERROR = "text-red-500"
NOTICE_NOTIFICATION = "text-green-500"

MSG_UNPROTECTED = "You can delete folders and words"
MSG_PROTECTED = "Uncheck to be able to delete folders and words"
MSG_AUTOPLAY_ENABLED = "Autoplay is enabled"
MSG_AUTOPLAY_DISABLED = "Autoplay is disabled"


class NavigationState(Enum):
    """The screen currently shown."""

    FOLDERS = "folders"
    WORDS = "words"
    SETTINGS = "settings"
    EXPORT_DATA = "export"
    IMPORT_DATA = "import"


class DataProtection(Enum):
    """Whether folders and words may be deleted."""

    PROTECTED = "protected"
    UNPROTECTED = "unprotected"


@dataclass(frozen=True)
class Notice:
    """A one-line message shown under the navigation bar."""

    message: str = ""
    color: str = ""


@dataclass
class Session:
    """State of one user session over a storage."""

    storage: Storage
    state: NavigationState = NavigationState.FOLDERS
    notice: Notice = field(default_factory=Notice)
    data_protection: DataProtection = DataProtection.PROTECTED
    selected_folder: str = ""
    autoplay: bool = True
    folders_pager: Pager = field(default_factory=lambda: Pager(PagerMode.FOLDERS))
    words_pager: Pager = field(default_factory=lambda: Pager(PagerMode.WORDS))

    def navigate(self, state: NavigationState) -> bool:
        """Switch screens; the word list needs a selected folder first."""
        if state is NavigationState.WORDS and not self.selected_folder:
            self.notice = Notice(MSG_SELECT_FOLDER_FIRST, NOTICE_ERROR)
            return False
        self.state = state
        self.notice = Notice()
        return True

    def _deletion_allowed(self) -> bool:
        if self.data_protection is DataProtection.PROTECTED:
            self.notice = Notice(MSG_DATA_PROTECTION_IS_SET, NOTICE_ERROR)
            return False
        return True

    def _delete(self, kind: type, id: int, message: str) -> bool:
        if not self._deletion_allowed():
            return False
        try:
            self.storage.delete_by_id(kind, id)
        except StorageError:
            pass
        self.notice = Notice(message, NOTICE_ERROR)
        return True

    def delete_word(self, id: int) -> bool:
        """Delete a word unless data protection is set; report whether it ran."""
        return self._delete(Word, id, MSG_WORD_WAS_DELETED)

    def delete_folder(self, id: int) -> bool:
        """Delete a folder unless data protection is set; report whether it ran."""
        return self._delete(Folder, id, MSG_FOLDER_WAS_DELETED)

    def select_folder(self, folder: str) -> None:
        """Open a folder's word list, resetting paging when the folder changes."""
        if folder != self.selected_folder:
            self.words_pager.offset = None
            self.words_pager.selection.index = None
        self.selected_folder = folder
        self.navigate(NavigationState.WORDS)

    def set_protection(self, protected: bool) -> None:
        """Turn data protection on or off."""
        self.data_protection = (
            DataProtection.PROTECTED if protected else DataProtection.UNPROTECTED
        )

    def protection_message(self) -> str:
        """The hint shown next to the data-protection checkbox."""
        if self.data_protection is DataProtection.PROTECTED:
            return MSG_PROTECTED
        return MSG_UNPROTECTED

    @property
    def autoplay_message(self) -> str:
        return MSG_AUTOPLAY_ENABLED if self.autoplay else MSG_AUTOPLAY_DISABLED


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="learnersdict", description="Keep words from a learner's dictionary in folders."
    )
    parser.add_argument("--db", type=Path, default=None, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    def paging(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--page-length", default="", help="rows per page")
        sub.add_argument("--offset", type=int, default=None)
        sub.add_argument(
            "--descending", action="store_true", help="newest first"
        )

    paging(commands.add_parser("folders", help="list folders"))
    words = commands.add_parser("words", help="list the words in a folder")
    words.add_argument("folder")
    paging(words)

    add_folder = commands.add_parser("add-folder", help="add a folder")
    add_folder.add_argument("name")
    add_folder.add_argument("--note", default="")

    add_word = commands.add_parser("add-word", help="add a word to a folder")
    add_word.add_argument("folder")
    add_word.add_argument("word")
    add_word.add_argument("--word-class", default="")
    add_word.add_argument("--url", default="")
    add_word.add_argument("--note", default="")

    for name in ("delete-word", "delete-folder"):
        delete = commands.add_parser(name, help=f"{name.replace('-', ' ')} by id")
        delete.add_argument("id", type=int)
        delete.add_argument(
            "--unprotected", action="store_true", help="switch data protection off"
        )

    export = commands.add_parser("export", help="write all data as JSON")
    export.add_argument("file", nargs="?", type=Path, default=None)
    imported = commands.add_parser("import", help="load data from a JSON export")
    imported.add_argument("file", type=Path)
    return parser


def _configure(pager: Pager, args: argparse.Namespace) -> None:
    pager.page_length = parse_page_length(args.page_length)
    pager.offset = args.offset
    pager.set_direction(
        SortDirection.DESCENDING if args.descending else SortDirection.ASCENDING
    )


def _run(session: Session, args: argparse.Namespace) -> int:
    storage = session.storage
    command = args.command
    if command == "folders":
        pager = session.folders_pager
        _configure(pager, args)
        result = storage.get_folders(pager.page_length, pager.offset, pager.direction)
        for folder in result.folders:
            print(f"{folder.id}\t{folder.folder}\t{folder.folder_note}")
        print(f"count: {result.count}, page length: {format_page_length(pager.page_length)}")
        return 0
    if command == "words":
        session.select_folder(args.folder)
        pager = session.words_pager
        _configure(pager, args)
        result = storage.get_words(
            session.selected_folder, pager.page_length, pager.offset, pager.direction
        )
        for word in result.words:
            print(f"{word.id}\t{word.word}\t{word.word_class}\t{word.note}\t{word.url}")
        print(f"count: {result.count}, page length: {format_page_length(pager.page_length)}")
        return 0
    if command == "add-folder":
        new_id = submit_folder(storage, args.name, args.note)
        if new_id is None:
            print(f"folder {args.name!r} was not added", file=sys.stderr)
            return 1
        print(new_id)
        return 0
    if command == "add-word":
        new_id = submit_word(
            storage, args.folder, args.word, args.word_class, args.url, args.note
        )
        if new_id is None:
            print(f"word {args.word!r} was not added", file=sys.stderr)
            return 1
        print(new_id)
        return 0
    if command in ("delete-word", "delete-folder"):
        session.set_protection(not args.unprotected)
        delete = session.delete_word if command == "delete-word" else session.delete_folder
        done = delete(args.id)
        print(session.notice.message, file=sys.stdout if done else sys.stderr)
        return 0 if done else 1
    if command == "export":
        text = storage.export_data()
        if args.file is None:
            print(text)
        else:
            args.file.write_text(text, encoding="utf-8")
        return 0
    if command == "import":
        storage.import_data(args.file.read_text(encoding="utf-8"))
        print(MSG_DATA_SUCCESSFULLY_IMPORTED)
        return 0
    raise AssertionError(f"unhandled command {command!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return its exit status."""
    args = _parser().parse_args(argv)
    try:
        with Storage.open(args.db) as storage:
            return _run(Session(storage), args)
    except FormError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    except (StorageError, OSError) as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())