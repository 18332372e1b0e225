import json
import time

import pytest

from learnersdict.errors import SerializationError
from learnersdict.model import (
    DEFAULT_SORT_DIRECTION,
    Data,
    Folder,
    FolderKey,
    FoldersAndCount,
    SortDirection,
    Word,
    WordKey,
    WordsAndCount,
)


def test_sort_direction_symbols():
    assert SortDirection.from_symbol("\u2191") is SortDirection.ASCENDING
    assert SortDirection.from_symbol("\u2193") is SortDirection.DESCENDING


@pytest.mark.parametrize("symbol", ["", "ascending", "x"])
def test_unknown_symbol_sorts_descending(symbol):
    assert SortDirection.from_symbol(symbol) is SortDirection.DESCENDING


def test_default_direction_is_first_arrow():
    assert SortDirection.from_symbol("\u2191") is DEFAULT_SORT_DIRECTION
    assert SortDirection.from_symbol(DEFAULT_SORT_DIRECTION.value) is SortDirection.ASCENDING


def test_folder_create_stamps_time():
    before = time.time() * 1000 - 1
    folder = Folder.create("folder-1", "folder-note-1")
    after = time.time() * 1000 + 1
    assert folder.id is None
    assert folder.folder == "folder-1"
    assert folder.folder_note == "folder-note-1"
    assert before <= folder.datetime <= after


def test_folder_with_id_copies():
    folder = Folder.create("folder-1", "note")
    stored = folder.with_id(7)
    assert stored.id == 7
    assert folder.id is None
    assert stored.with_id(None) == folder


def test_folder_to_dict_omits_missing_id():
    folder = Folder("f", "n", 5)
    assert folder.to_dict() == {"folder": "f", "folder_note": "n", "datetime": 5}
    assert folder.with_id(3).to_dict()["id"] == 3


def test_folder_dict_round_trip():
    folder = Folder.create("folder-2", "note-2").with_id(12)
    assert Folder.from_dict(folder.to_dict()) == folder


def test_word_create_and_round_trip():
    word = Word.create("folder-1", "word-1", "noun", "url-1", "note-1")
    assert word.id is None
    assert word.word_class == "noun"
    assert Word.from_dict(word.to_dict()) == word
    stored = word.with_id(4)
    assert Word.from_dict(stored.to_dict()) == stored


def test_word_to_dict_keys():
    word = Word("f", "w", "c", "u", "n", 1)
    assert list(word.to_dict()) == ["folder", "word", "word_class", "url", "note", "datetime"]


def test_word_from_dict_missing_field():
    data = Word("f", "w", "c", "u", "n", 1).to_dict()
    del data["url"]
    with pytest.raises(SerializationError):
        Word.from_dict(data)


def test_folder_from_dict_wrong_type():
    with pytest.raises(SerializationError):
        Folder.from_dict({"folder": 1, "folder_note": "n", "datetime": 1})
    with pytest.raises(SerializationError):
        Folder.from_dict({"folder": "f", "folder_note": "n", "datetime": "now"})


def test_from_dict_rejects_negative_id():
    with pytest.raises(SerializationError):
        Folder.from_dict({"id": -1, "folder": "f", "folder_note": "n", "datetime": 1})


def test_empty_data_json_is_compact():
    assert Data(1).to_json() == '{"version":1,"folders":[],"words":[]}'


def test_data_json_round_trip():
    folders = [Folder.create(f"folder-{i}-3", f"note-{i}") for i in range(3)]
    words = [
        Word.create(f.folder, f"word-{j}-6", f"word-class-{j}", f"url-{j}", f"note-{j}")
        for f in folders
        for j in range(2)
    ]
    data = Data(1, folders, words)
    parsed = Data.from_json(data.to_json())
    assert parsed == data
    assert json.loads(data.to_json())["version"] == 1


def test_data_json_keeps_non_ascii():
    data = Data(1, [Folder("\u00e9t\u00e9", "", 0)], [])
    assert "\u00e9t\u00e9" in data.to_json()
    assert Data.from_json(data.to_json()).folders[0].folder == "\u00e9t\u00e9"


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '{"folders":[],"words":[]}', '{"version":1,"folders":{},"words":[]}'],
)
def test_data_from_json_invalid(text):
    with pytest.raises(SerializationError):
        Data.from_json(text)


def test_page_results_and_keys():
    folders = [Folder("a", "", 0)]
    page = FoldersAndCount(folders, 5)
    assert page.folders == folders and page.count == 5
    words = WordsAndCount([], 0)
    assert words.words == [] and words.count == 0
    assert WordKey(3) == WordKey(3)
    assert FolderKey(3).id == 3
    assert len({WordKey(1), WordKey(1), WordKey(2)}) == 2