"""Domain entities.

Core value objects of the data dictionary: code tables, flattened codes and
the result shapes the dictionary knows how to describe.
"""

from .code_table import CodeTable, code_key
from .flattened_code import FlattenedCode
from .results import (
    AnnotatedValue,
    LabeledMultiDim,
    MetadataTagged,
    ResultMeta,
    ResultShape,
    TextSequence,
    Unrecognized,
    annotate,
    classify_result,
    result_meta,
    result_value,
)

__all__ = [
    # Codings
    "CodeTable",
    "code_key",
    "FlattenedCode",
    # Results
    "AnnotatedValue",
    "ResultMeta",
    "annotate",
    "result_meta",
    "result_value",
    # Result shapes
    "ResultShape",
    "MetadataTagged",
    "LabeledMultiDim",
    "TextSequence",
    "Unrecognized",
    "classify_result",
]
