import pytest

from learnersdict.model import SortDirection
from learnersdict.pager import Pager, PagerMode, Selection, page_info


def test_selection_starts_at_first_row():
    assert Selection().next() == 0
    assert Selection().previous() == 0


def test_selection_next_then_previous_round_trip():
    selection = Selection(index=4)
    selection.next()
    assert selection.previous() == 4
    assert selection.index == 4


def test_page_info_unlimited_is_none():
    assert page_info(None, None, 100) is None


def test_page_info_rejects_non_positive_length():
    with pytest.raises(ValueError):
        page_info(0, None, 10)


@pytest.mark.parametrize("length,count", [(10, 25), (10, 30), (7, 1), (3, 100)])
def test_page_info_last_page_invariants(length, count):
    info = page_info(length, None, count)
    assert info.page_number == 1
    assert info.last_page_offset % length == 0
    assert info.last_page_offset < count
    assert info.last_page_offset + length >= count
    assert page_info(length, info.last_page_offset, count).page_number == info.total_pages


def test_page_info_empty_listing():
    info = page_info(10, None, 0)
    assert info.total_pages == 0
    assert info.last_page_offset == 0


def test_page_right_and_left_round_trip():
    pager = Pager(page_length=10)
    pager.page_right(25)
    assert pager.offset == 10
    pager.page_right(25)
    pager.page_left()
    assert pager.offset == 10


def test_page_right_stops_at_end():
    pager = Pager(page_length=10)
    pager.last_page(25)
    last = pager.offset
    pager.page_right(25)
    assert pager.offset == last


def test_page_left_at_start_keeps_offset():
    pager = Pager(page_length=10)
    pager.page_left()
    assert pager.offset is None


def test_first_page_resets_offset():
    pager = Pager(page_length=5, offset=15)
    pager.first_page()
    assert pager.offset is None


def test_last_page_unlimited_clears_offset():
    pager = Pager(offset=15)
    pager.last_page(40)
    assert pager.offset is None


def test_words_page_right_selects_first_row():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, selection=Selection(index=9, max_index=10))
    pager.page_right(25)
    assert pager.selection.index == 0


def test_words_page_left_selects_last_row():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, offset=10, selection=Selection(index=0))
    pager.page_left()
    assert pager.offset == 0
    assert pager.selection.max_index == 10
    assert pager.selection.index == 9


def test_folders_mode_leaves_selection_alone():
    pager = Pager(mode=PagerMode.FOLDERS, page_length=10, selection=Selection(index=3))
    pager.page_right(25)
    assert pager.selection.index == 3
    pager.set_direction(SortDirection.DESCENDING)
    assert pager.selection.index == 3


def test_set_direction_from_symbol_clears_word_selection():
    pager = Pager(mode=PagerMode.WORDS, selection=Selection(index=2))
    pager.set_direction("\u2193")
    assert pager.direction is SortDirection.DESCENDING
    assert pager.selection.index is None


def test_follow_selection_moves_to_next_page():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, selection=Selection(index=10, max_index=10))
    pager.follow_selection(25)
    assert pager.offset == 10
    assert pager.selection.index == 0


def test_follow_selection_moves_to_previous_page():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, offset=10, selection=Selection(index=-1, max_index=5))
    pager.follow_selection(25)
    assert pager.offset == 0
    assert pager.selection.index == 9


def test_follow_selection_at_end_steps_back():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, offset=20, selection=Selection(index=5, max_index=5))
    pager.follow_selection(25)
    assert pager.offset == 20
    assert pager.selection.index == 4


def test_follow_selection_unlimited_steps_back():
    pager = Pager(mode=PagerMode.WORDS, selection=Selection(index=3, max_index=3))
    pager.follow_selection(3)
    assert pager.offset is None
    assert pager.selection.index == 2


def test_follow_selection_inside_page_does_nothing():
    pager = Pager(mode=PagerMode.WORDS, page_length=10, offset=10, selection=Selection(index=4, max_index=10))
    pager.follow_selection(25)
    assert pager.offset == 10
    assert pager.selection.index == 4