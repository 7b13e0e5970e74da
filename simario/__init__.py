"""simario data dictionary.

Labels the output of a population microsimulation: variable descriptions for
computed statistics and category labels for coded values.

Features:
- Code tables for categorical variables
- Flattened (grouped) code labelling
- Description resolution and ordering of computed results
- Descriptions/codings loading from CSV and Excel files
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("simario")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from simario.domain.entities import AnnotatedValue, CodeTable, ResultMeta, annotate
from simario.domain.exceptions import (
    DictionaryError,
    MalformedFlattenedCodeError,
    UnknownVariableError,
    VarnameResolutionFailure,
)
from simario.domain.services.dictionary import Dictionary
from simario.infrastructure.repositories.dictionary_repository import (
    DictionaryRepository,
    load_dictionary,
)

__all__ = [
    "__version__",
    # Dictionary
    "Dictionary",
    "CodeTable",
    "load_dictionary",
    "DictionaryRepository",
    # Results
    "AnnotatedValue",
    "ResultMeta",
    "annotate",
    # Errors
    "DictionaryError",
    "MalformedFlattenedCodeError",
    "UnknownVariableError",
    "VarnameResolutionFailure",
]
