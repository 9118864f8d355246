"""Prefix-trie lookup and incremental fuzzy search with highlighted matches."""

__version__ = "0.1.0"
__all__ = ["__version__"]