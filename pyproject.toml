[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triefind"
version = "0.1.0"
description = "Prefix-trie lookup and interactive fuzzy subsequence search with highlighted matches"
requires-python = ">=3.10"
dependencies = []
keywords = ["trie", "prefix", "fuzzy", "search", "autocomplete", "highlight"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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

[project.scripts]
triefind = "triefind.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["triefind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
