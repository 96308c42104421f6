"""Title records in the tab-like, pipe-separated title data format.

A data row looks like::

    id       |type |Title1   |Title2   |IsAdult|Year|?|?|Genres
    tt0003609|movie|Alexandra|Alexandra|0      |1915|-|-|-

Fields are separated by ``|`` and genres by ``,``; a dash (``-``) marks an
empty value.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

FIELD_DELIMITER = "|"
GENRE_DELIMITER = ","
EMPTY_MARKER = "-"
NUM_GENRES = 10

_NUM_FIELDS = 9
_MIN_FIELDS = 3

_ID, _TYPE, _TITLE, _ORIGINAL_TITLE, _IS_ADULT, _YEAR, _END_YEAR, _RUNTIME, _GENRES = range(
    _NUM_FIELDS
)


@dataclass
class Record:
    """One title from a data file; unset text is None and unset numbers -1."""

    record_id: str | None = None
    title_type: str | None = None
    title: str | None = None
    is_adult: int = -1
    year: int = -1
    runtime: int = -1
    genres: tuple[str, ...] = ()


def _text(token: str) -> str | None:
    return None if token == EMPTY_MARKER else token


def _integer(token: str) -> int:
    if token == EMPTY_MARKER:
        return -1
    try:
        return int(token.strip())
    except ValueError:
        return -1


def parse_record(row: str) -> Record:
    """Create a Record from one data row.

    Raises ValueError if the row lacks an id, a type and a title. Missing
    trailing fields count as empty. At most NUM_GENRES genres are kept.
    """
    fields = row.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(fields) < _MIN_FIELDS:
        raise ValueError(
            f"expected at least {_MIN_FIELDS} fields in record row, "
            f"got {len(fields)}: {row!r}"
        )
    fields += [EMPTY_MARKER] * (_NUM_FIELDS - len(fields))
    genres = [
        genre
        for genre in fields[_GENRES].split(GENRE_DELIMITER)
        if genre and genre != EMPTY_MARKER
    ]
    return Record(
        record_id=_text(fields[_ID]),
        title_type=_text(fields[_TYPE]),
        title=_text(fields[_TITLE]),
        is_adult=_integer(fields[_IS_ADULT]),
        year=_integer(fields[_YEAR]),
        runtime=_integer(fields[_RUNTIME]),
        genres=tuple(genres[:NUM_GENRES]),
    )


def clean_string(text: str) -> str:
    """Remove all whitespace and ASCII punctuation from ``text``."""
    return "".join(
        char for char in text if not (char.isspace() or char in string.punctuation)
    )