"""Turning a search term into the document rows that match it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from cinedex.docset import DocumentSet
from cinedex.titleindex import MovieTitleIndex


@dataclass(frozen=True)
class SearchResult:
    """One matching row in one document."""

    doc_id: int
    row_id: int


def search_results(document_set: DocumentSet) -> Iterator[SearchResult]:
    """Yield a result for every row of every document in the set."""
    for doc_id in document_set:
        for row_id in document_set.rows(doc_id):
            yield SearchResult(doc_id, row_id)


def find_movies(index: MovieTitleIndex, term: str) -> Iterator[SearchResult] | None:
    """Return the results for ``term``, or None if nothing matches it."""
    document_set = index.get_document_set(term)
    if document_set is None:
        return None
    print(f'Getting docs for movieset term: "{document_set.desc}"')
    return search_results(document_set)