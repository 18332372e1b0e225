"""Data picked up from the dictionary page open in the browser tab."""

from __future__ import annotations

from dataclasses import dataclass

BASE_URL = "https://www.oxfordlearnersdictionaries.com"

EXPORT_FILE_NAME = "export.json"
EXPORT_FILE_TYPE = "application/json"

MSG_FOLDER_NAME_IS_EMPTY = "Folder name is empty"
MSG_WORD_IS_EMPTY = "Word is empty"
MSG_SELECT_FOLDER_FIRST = "Please select a folder first"
MSG_DATA_SUCCESSFULLY_IMPORTED = "Data successfully imported"
MSG_DATA_PROTECTION_IS_SET = "Data protection is set. Check the settings to disable it"
MSG_WORD_WAS_DELETED = "Word was deleted"
MSG_FOLDER_WAS_DELETED = "Folder was deleted"
MSG_USE_ARROW_KEYS_TO_NAVIGATE = "Use the up and down arrow keys to navigate the list"

_TITLE_SEPARATORS = (" - ", " | ")


@dataclass(frozen=True)
class TabData:
    """What the current tab shows: its address, word, word class and phonetics."""

    url: str = ""
    word: str = ""
    word_class: str = ""
    phonetics: str = ""

    @classmethod
    def from_tab(
        cls, url: str, word: str, word_class: str, title: str, phonetics: str
    ) -> "TabData":
        """Build tab data, taking the word from the page title when none was found."""
        if not word:
            for separator in _TITLE_SEPARATORS:
                head, found, _ = title.partition(separator)
                if found:
                    word = head
                    break
        return cls(url=url, word=word, word_class=word_class, phonetics=phonetics)


def display_url(url: str) -> str:
    """The URL as shown to the user, without the dictionary's base address."""
    return url[len(BASE_URL):] if url.startswith(BASE_URL) else url