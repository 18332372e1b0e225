"""Validation and submission of the add-folder and add-word forms."""

from __future__ import annotations

from typing import Optional

from .errors import StorageError
from .model import Folder, Word
from .storage import Storage
from .tabdata import MSG_FOLDER_NAME_IS_EMPTY, MSG_WORD_IS_EMPTY


class FormError(ValueError):
    """A form field holds a value that cannot be submitted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return self.message


def _is_blank(text: str) -> bool:
    return not text.strip()


def submit_folder(storage: Storage, folder: str, folder_note: str) -> Optional[int]:
    """Store a new folder from the form.

    Raises FormError when the folder name is blank. Returns the new id, or
    None when the storage refused the folder (for example, a duplicate name).
    """
    if _is_blank(folder):
        raise FormError("folder", MSG_FOLDER_NAME_IS_EMPTY)
    try:
        return storage.add(Folder.create(folder, folder_note))
    except StorageError:
        return None


def submit_word(
    storage: Storage, folder: str, word: str, word_class: str, url: str, note: str
) -> Optional[int]:
    """Store a new word from the form into the selected folder.

    The folder is checked before the word; a blank one raises FormError.
    Returns the new id, or None when the storage refused the word.
    """
    if _is_blank(folder):
        raise FormError("folder", MSG_FOLDER_NAME_IS_EMPTY)
    if _is_blank(word):
        raise FormError("word", MSG_WORD_IS_EMPTY)
    try:
        return storage.add(Word.create(folder, word, word_class, url, note))
    except StorageError:
        return None