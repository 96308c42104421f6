"""Title-word indexing and search over pipe-separated movie data files."""

__version__ = "0.1.0"