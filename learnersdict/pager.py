"""Paging through folder and word listings, and the keyboard word selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .model import DEFAULT_SORT_DIRECTION, SortDirection


class PagerMode(Enum):
    """Which listing a pager drives."""

    FOLDERS = "folders"
    WORDS = "words"


@dataclass
class Selection:
    """The highlighted row of the word listing and the number of rows shown."""

    index: Optional[int] = None
    max_index: int = 0

    def previous(self) -> int:
        """Move the highlight up; with nothing selected, select the first row."""
        self.index = 0 if self.index is None else self.index - 1
        return self.index

    def next(self) -> int:
        """Move the highlight down; with nothing selected, select the first row."""
        self.index = 0 if self.index is None else self.index + 1
        return self.index


@dataclass(frozen=True)
class PageInfo:
    """Where the current page sits among all pages."""

    page_number: int
    total_pages: int
    last_page_offset: int


def page_info(
    page_length: Optional[int], offset: Optional[int], count: int
) -> Optional[PageInfo]:
    """Page position for a listing; None when the page length is unlimited."""
    if page_length is None:
        return None
    if page_length <= 0:
        raise ValueError(f"page length must be positive, got {page_length}")
    page_number = (offset or 0) // page_length + 1
    total_pages = -(-count // page_length)
    last_page_offset = max(total_pages - 1, 0) * page_length
    return PageInfo(page_number, total_pages, last_page_offset)


@dataclass
class Pager:
    """Offset, page length and sort order of one listing."""

    mode: PagerMode = PagerMode.FOLDERS
    page_length: Optional[int] = None
    offset: Optional[int] = None
    direction: SortDirection = DEFAULT_SORT_DIRECTION
    selection: Selection = field(default_factory=Selection)

    @property
    def _is_words(self) -> bool:
        return self.mode is PagerMode.WORDS

    def _set_index_to_zero(self) -> None:
        if self._is_words and self.selection.index is not None:
            self.selection.index = 0

    def _set_index_to_max(self) -> None:
        if self._is_words and self.selection.index is not None:
            self.selection.index = self.selection.max_index - 1

    def _set_index_to_one_step_back(self) -> None:
        if self._is_words and self.selection.index is not None:
            self.selection.index -= 1

    def set_direction(self, direction: Union[str, SortDirection]) -> None:
        """Change the sort order; a word listing drops its selection."""
        if not isinstance(direction, SortDirection):
            direction = SortDirection.from_symbol(direction)
        self.direction = direction
        if self._is_words:
            self.selection.index = None

    def first_page(self) -> None:
        """Go to the first page."""
        self.offset = None
        self._set_index_to_zero()

    def last_page(self, count: int) -> None:
        """Go to the last page of a listing holding ``count`` records."""
        info = page_info(self.page_length, self.offset, count)
        self.offset = info.last_page_offset if info is not None else None
        self._set_index_to_zero()

    def page_left(self) -> None:
        """Go one page back, selecting the last row of that page."""
        if self.page_length is None:
            self._set_index_to_zero()
            return
        new_offset = (self.offset or 0) - self.page_length
        if new_offset >= 0:
            self.offset = new_offset
            self.selection.max_index = self.page_length
            self._set_index_to_max()
        else:
            self._set_index_to_zero()

    def page_right(self, count: int, is_key_pressed: bool = False) -> None:
        """Go one page forward when there is one.

        At the end of the listing a key press keeps the selection on the last row.
        """
        if self.page_length is None:
            self._set_index_to_one_step_back()
            return
        new_offset = (self.offset or 0) + self.page_length
        if new_offset < count:
            self.offset = new_offset
            self._set_index_to_zero()
        elif is_key_pressed:
            self._set_index_to_one_step_back()

    def follow_selection(self, count: int) -> None:
        """Turn the page when the keyboard selection has moved off the page."""
        if not self._is_words:
            return
        index = self.selection.index
        if index is None:
            return
        if index < 0:
            self.page_left()
        elif index >= self.selection.max_index:
            self.page_right(count, True)