"""Table input for descriptions and codings files."""

from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    SimarioInfrastructureError,
    UnsupportedFileTypeError,
)
from .table_reader import TableReader, TableReadOptions

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "SimarioInfrastructureError",
    "TableReadOptions",
    "TableReader",
    "UnsupportedFileTypeError",
]
