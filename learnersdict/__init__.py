"""A vocabulary notebook: folders of words kept in SQLite, with paging, sorting, JSON export/import and a command line."""

__version__ = "0.1.0"