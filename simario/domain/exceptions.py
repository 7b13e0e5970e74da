"""Errors raised by the data dictionary.

Every error keeps its diagnostic context as attributes so callers can branch
on the kind of failure and report the offending variable or raw value.
"""

from __future__ import annotations


class DictionaryError(Exception):
    pass


class VarnameResolutionFailure(DictionaryError):
    def __init__(self, argument: str, value_type: str) -> None:
        self.argument = argument
        self.value_type = value_type
        super().__init__(
            f"cannot determine varname from {argument} ({value_type}): no meta or names"
        )


class UnknownVariableError(DictionaryError):
    MISSING = "missing"
    EMPTY_DESCRIPTION = "empty description"

    def __init__(self, varname: str, reason: str = MISSING) -> None:
        self.varname = varname
        self.reason = reason
        if reason == self.EMPTY_DESCRIPTION:
            message = f"variable named '{varname}' has no description in the data dictionary"
        else:
            message = f"'{varname}' does not exist in the data dictionary"
        super().__init__(message)


class MalformedFlattenedCodeError(DictionaryError, ValueError):
    def __init__(self, entry: object, varname: str | None, grpby_tag: str) -> None:
        self.entry = entry
        self.varname = varname
        self.grpby_tag = grpby_tag
        super().__init__(
            f"flattened code {entry!r} for '{varname}' grouped by '{grpby_tag}' "
            "is not of the form '<group code> <code>'"
        )


class DuplicateCodeError(DictionaryError, ValueError):
    def __init__(self, varname: str, code: object) -> None:
        self.varname = varname
        self.code = code
        super().__init__(f"coding for '{varname}' defines code {code!r} more than once")


class TableSchemaError(DictionaryError, ValueError):
    def __init__(self, table: str, column: str) -> None:
        self.table = table
        self.column = column
        super().__init__(f"{table} table has no '{column}' column")
