[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinedex"
version = "0.1.0"
description = "Index the title words of pipe-separated movie data files across a directory tree and search them."
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "index", "inverted-index", "search", "hashtable", "fnv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cinedex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
