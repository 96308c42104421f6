# cinedex

A small library for indexing the words of movie titles across a directory of
data files and looking up which rows of which files contain a given word.

## Installing

```
pip install .
```

## The data format

Each data file holds one title per line, with fields separated by `|`:

```
id|type|title|original_title|is_adult|year|end_year|runtime|genres
tt0003609|movie|Alexandra|Alexandra|0|1915|-|-|-
```

A dash (`-`) marks an empty value, and genres are separated by `,`.
`cinedex.record.parse_record(row)` turns one line into a `Record` with the
fields `record_id`, `title_type`, `title`, `is_adult`, `year`, `runtime` and
`genres`. Empty text fields are `None` and empty or unreadable numbers are
`-1`. Missing trailing fields count as empty. At most ten genres are kept. A
row with fewer than three fields raises `ValueError`.

## Building and searching a title index

```python
from cinedex.docidmap import DocIdMap
from cinedex.filecrawler import crawl_files_to_map
from cinedex.titleindex import MovieTitleIndex
from cinedex.directoryparser import parse_the_files
from cinedex.queryprocessor import find_movies

docs = DocIdMap()
crawl_files_to_map("data/", docs)

index = MovieTitleIndex()
rows_read = parse_the_files(docs, index)

results = find_movies(index, "coffee")
if results is None:
    print("No results for this term.")
else:
    for result in results:
        print(docs.get_file(result.doc_id), result.row_id)
```

The pieces:

- `DocIdMap` gives each file added with `put_file(filename)` a unique id,
  counting up from 1, and returns that id. `get_file(doc_id)` returns the
  filename and raises `KeyError` for an unknown id. Iterating over the map
  yields `(doc_id, filename)` pairs.
- `crawl_files_to_map(directory, doc_map)` walks `directory` recursively in
  name order and adds every file it finds. It prints each file and folder as
  it goes, and returns the number of files added.
- `MovieTitleIndex.add_movie_title(title, doc_id, row_id)` splits a title on
  spaces. It lower-cases each word and strips whitespace and punctuation from
  it with `cinedex.record.clean_string`. Each word that is left is recorded
  against the document and row. `get_document_set(term)` lower-cases the term
  and returns its `DocumentSet`, or `None`. The term is not cleaned, so
  `"foo."` finds nothing while `"Foo"` finds `"foo"`.
- `index_the_file(filename, doc_id, index)` indexes the titles of every row
  of one file and returns the number of rows read. It returns 0 if the file
  cannot be opened. `parse_the_files(docs, index)` does this for every file
  in a `DocIdMap` and returns the total.
- `find_movies(index, term)` returns `None` when no title contains the term.
  Otherwise it returns an iterator of `SearchResult(doc_id, row_id)`.
  `search_results(document_set)` gives the same iterator for a
  `DocumentSet` you already hold.

A `DocumentSet` has a `desc` (the word it stands for). It maps document ids
to lists of row ids:

- `add_doc_info(doc_id, row_id)` returns `False` if that row is already
  recorded.
- `rows(doc_id)` returns the row ids and raises `KeyError` if none are
  recorded.
- `doc_id in document_set` tests whether a document is recorded.
- `len()` counts the documents, and iterating yields the document ids.

`format_offset_list(rows)` renders a row list as debugging text.

## The hash table

`cinedex.hashtable.Hashtable(num_buckets)` is a chained hash table keyed by
unsigned 64-bit integers. Everything above is stored in it.

- `put(key, value)` returns the replaced `KeyValue`, or `None` for a new key.
- `lookup(key)` and `remove(key)` raise `KeyError` for a missing key.
- `bucket_index(key)` and `bucket_sizes()` show how keys are spread over the
  buckets.
- It supports `len()`, `in` and iteration over `KeyValue` pairs.
- The table grows ninefold once it holds three entries per bucket.

`fnv_hash64(data)` is 64-bit FNV-1a over bytes, or over a string encoded as
UTF-8. `fnv_hash_int64(value)` hashes an integer through its eight
little-endian bytes.

## What this package does not do

- It installs no command-line programs. There is no interactive search
  prompt; drive the index from Python as shown above.
- It does not read a matching row back into a `Record` for you. Open the
  file named by `docs.get_file(result.doc_id)` and pass line `result.row_id`
  to `parse_record`.
- It does not group movies by genre, actor, star rating or content rating,
  and it prints no grouped reports.
- The index lives in memory only; nothing is saved to disk.

## Running the tests

```
pip install .[test]
pytest
```