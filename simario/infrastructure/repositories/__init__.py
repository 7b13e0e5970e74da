"""Repositories that load dictionaries from disk."""

from .dictionary_repository import DictionaryRepository, load_dictionary

__all__ = ["DictionaryRepository", "load_dictionary"]
