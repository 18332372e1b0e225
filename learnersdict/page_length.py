"""Parsing and showing the page-length setting."""

from __future__ import annotations

import re
from typing import Optional

UNLIMITED_PAGE_LENGTH = "unlimited"
MSG_PAGE_LENGTH_UPDATED_TO_UNLIMITED = "page length updated to unlimited"
MSG_PAGE_LENGTH_UPDATED_TO_NUMBER = "page length updated to {}"

_U32_MAX = 2**32 - 1
_NUMBER = re.compile(r"\+?[0-9]+", re.ASCII)


def parse_page_length(text: str) -> Optional[int]:
    """Page length typed by the user; None (unlimited) for zero or anything invalid."""
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        return None
    value = int(stripped)
    if value == 0 or value > _U32_MAX:
        return None
    return value


def format_page_length(value: Optional[int]) -> str:
    """Text shown for a page length."""
    return UNLIMITED_PAGE_LENGTH if value is None else str(value)