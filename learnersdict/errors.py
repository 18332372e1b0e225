"""Exceptions raised by the dictionary storage layer."""


class StorageError(Exception):
    """Base class for every storage failure."""

    prefix = "StorageError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix} {self.message}"


class DatabaseError(StorageError):
    """The underlying database refused or failed an operation."""

    prefix = "DatabaseError"


class SerializationError(StorageError):
    """A record or document could not be encoded or decoded."""

    prefix = "SerializationError"


class DataImportError(StorageError):
    """An import document was well formed but cannot be accepted."""

    prefix = "ImportError"