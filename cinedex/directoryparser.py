"""Reading data files and adding the titles in them to a title index."""

from __future__ import annotations

import sys

from cinedex.docidmap import DocIdMap
from cinedex.record import parse_record
from cinedex.titleindex import MovieTitleIndex


def index_the_file(filename: str, doc_id: int, index: MovieTitleIndex) -> int:
    """Index the titles of every row in ``filename`` under ``doc_id``.

    Returns the number of rows read, or 0 if the file cannot be opened.
    """
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        print(f"{filename} could not be opened")
        return 0
    rows = 0
    with handle:
        for row_id, line in enumerate(handle):
            rows = row_id + 1
            try:
                record = parse_record(line)
            except ValueError:
                print("Didn't add MovieToIndex.", file=sys.stderr)
                continue
            if record.title is None:
                print("Didn't add MovieToIndex.", file=sys.stderr)
                continue
            index.add_movie_title(record.title, doc_id, row_id)
    return rows


def parse_the_files(docs: DocIdMap, index: MovieTitleIndex) -> int:
    """Index every file in ``docs``; return the total number of rows read."""
    return sum(index_the_file(filename, doc_id, index) for doc_id, filename in docs)