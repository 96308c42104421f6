"""Walking a directory tree and registering every file in a DocIdMap."""

from __future__ import annotations

import os

from cinedex.docidmap import DocIdMap


def crawl_files_to_map(directory: str, doc_map: DocIdMap) -> int:
    """Add every file under ``directory`` to ``doc_map``, recursing into folders.

    Entries are visited in name order, so ids follow that order. Returns the
    number of files added. Raises OSError if ``directory`` cannot be read.
    """
    with os.scandir(directory) as entries:
        names = sorted(entry.name for entry in entries)
    added = 0
    for name in names:
        path = os.path.join(directory, name)
        if os.path.isdir(path):
            subdirectory = path + "/"
            print(f"crawling dir: {subdirectory}")
            added += crawl_files_to_map(subdirectory, doc_map)
        else:
            print(f"adding file to map: {path}")
            doc_map.put_file(path)
            added += 1
    return added