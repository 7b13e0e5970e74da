"""Flattened codes of grouped results.

A grouped frequency table is flattened into one code per cell: ``"2 1"``
means group code ``2`` of the grouping variable and code ``1`` of the
variable itself. Ungrouped cells are a single code (``"1"``).

The group code is a single whitespace-free token; everything after the first
whitespace run belongs to the variable code.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..exceptions import MalformedFlattenedCodeError

_FLATTENED_RE = re.compile(r"^(?P<group>\S+)\s+(?P<code>\S.*)$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class FlattenedCode:
    group_code: str
    var_code: str

    @classmethod
    def parse(
        cls, entry: object, *, varname: str | None, grpby_tag: str
    ) -> FlattenedCode:
        match = _FLATTENED_RE.match(str(entry).strip())
        if match is None:
            raise MalformedFlattenedCodeError(entry, varname, grpby_tag)
        return cls(
            group_code=match.group("group"), var_code=match.group("code").strip()
        )

    def flatten(self) -> str:
        return f"{self.group_code} {self.var_code}"
