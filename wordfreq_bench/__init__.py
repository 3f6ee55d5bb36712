"""Word frequency counting and ranking with dictionary, trie and hash-based strategies."""

__version__ = "0.1.0"
__all__ = ["__version__"]