"""Ports (interfaces) the dictionary depends on.

Adapters for these live in :mod:`simario.infrastructure`.
"""

from .repositories import DictionaryRepositoryPort
from .services import CodingExpressionEvaluatorPort, LoggerPort, TableReaderPort

__all__ = [
    "CodingExpressionEvaluatorPort",
    "DictionaryRepositoryPort",
    "LoggerPort",
    "TableReaderPort",
]
