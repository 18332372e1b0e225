# learnersdict

A small vocabulary notebook for language learners. Words are kept in named
folders, each word with its word class, the page it came from and a note (a
translation, a pronunciation, anything). Lists can be paged and sorted, and
the whole collection can be exported to JSON and imported again. Everything is
stored in a local SQLite file.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `learnersdict` command takes a subcommand. `--db FILE` chooses the
database file. Without it, `dictionary.sqlite3` in the current directory is
used and is created if it does not exist.

```
learnersdict add-folder animals --note "words from the zoo trip"
learnersdict add-word animals otter --word-class noun --url https://dictionary.example.com/otter --note "ˈɒtə"
learnersdict folders
learnersdict words animals --page-length 10 --offset 0 --descending
learnersdict delete-word 3 --unprotected
learnersdict delete-folder 1 --unprotected
learnersdict export backup.json
learnersdict import backup.json
```

- `folders` and `words FOLDER` list records, one tab-separated line each,
  followed by the total count. `--page-length` limits the rows shown. `0` or
  text that is not a number means unlimited. `--offset` skips rows.
  `--descending` shows the newest first. Otherwise the list is ascending.
- `add-folder` and `add-word` print the new id. A blank folder name or word is
  rejected. A duplicate folder name, or a duplicate word within its folder,
  is reported as "was not added". In all these cases the exit status is 1.
- `delete-word` and `delete-folder` are refused while data protection is on.
  Protection is on unless `--unprotected` is given. A refused delete exits
  with status 1.
- `export` writes the JSON document to the file, or to standard output when no
  file is named. `import` loads such a document.

## Using it from Python

```python
from learnersdict.model import Folder, Word, SortDirection
from learnersdict.storage import Storage

with Storage.open("dictionary.db") as storage:
    storage.add(Folder.create("animals", "words from the zoo trip"))
    word_id = storage.add(
        Word.create("animals", "otter", "noun", "https://dictionary.example.com/otter", "ˈɒtə")
    )

    print(storage.get_word_by_id(word_id).word)            # otter

    page = storage.get_words("animals", 10, 0, SortDirection.ASCENDING)
    print(page.count, [w.word for w in page.words])

    folders = storage.get_folders(None, None, "\u2193")     # descending, no limit
    print(folders.count)
```

### Sorting and limits

Sorting can be given as a `SortDirection` or as an arrow symbol: `↑` means
ascending and `↓` means descending. Any other string sorts in descending
order. A `limit` of `None` or `0` means no limit. An `offset` of `None` starts
from the first record.

### Storage details

- Folder names are unique, and so is each word within its folder. Adding a
  duplicate raises `DatabaseError`.
- `get_word_by_id` raises `SerializationError` when the id is unknown.
- `delete_by_id(Word, id)` and `delete_by_id(Folder, id)` ignore missing ids.
  Deleting a folder does not delete its words.
- `store_names()` and `index_names(store)` describe the schema.
- `Storage.delete_db(path)` removes the database file.

All storage errors derive from `learnersdict.errors.StorageError`.

### Export and import

```python
text = storage.export_data()      # {"version":1,"folders":[...],"words":[...]}
with Storage.open("copy.db") as other:
    data = other.import_data(text)  # returns the imported Data
```

Exported records carry no ids. They are given new ones when imported. Folders
are imported first, then words. Each list is imported in a single transaction.

A document whose version is not 1 is rejected with `DataImportError`.
Malformed JSON, or a record with missing or mistyped fields, is rejected with
`SerializationError`.

### Other helpers

- `learnersdict.forms`: `submit_folder` and `submit_word` validate form input
  and store it. A blank folder name or word raises `FormError`. They return the
  new id, or `None` when storage refused the record.
- `learnersdict.pager`: `Pager`, `Selection` and `page_info` handle paging and
  the keyboard selection of a list.
- `learnersdict.page_length`: `parse_page_length("25")` gives `25`. Zero or
  anything that is not a number gives `None` (unlimited).
  `format_page_length` shows a page length as text.
- `learnersdict.tabdata`: `TabData.from_tab` takes the word from a page title
  when none is given. It uses the part before `" - "` or `" | "`.
  `display_url` strips the dictionary's base address from a URL.
- `learnersdict.app`: `Session` tracks the current screen, the selected
  folder, data protection and the notice shown to the user.

## What it does not do

There is no graphical or browser interface. The package does not fetch
dictionary pages, look words up, open links or play pronunciations. `TabData`
only holds what the caller passes in. The autoplay setting in `Session` is a
flag and nothing more.