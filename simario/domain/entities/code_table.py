from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
import numbers
from typing import cast

from ...pandas_utils import is_missing_scalar
from ..exceptions import DuplicateCodeError


def code_key(value: object) -> str | None:
    """Textual identity of a coded value.

    Codes are matched the way they print in the data: ``1``, ``1.0`` and
    ``"1"`` are the same code. Missing values have no key.
    """
    if is_missing_scalar(value):
        return None
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        number = float(value)
        if number.is_integer():
            return str(int(number))
        return repr(number)
    return str(value).strip()


def _empty_index() -> dict[str, int]:
    return {}


@dataclass(frozen=True, slots=True)
class CodeTable:
    """Category labels of one coded variable, in code order.

    Example::

        CodeTable.from_pairs("SESBTH", [("Professional", 1), ("Clerical", 2)])
    """

    varname: str
    codes: tuple[object, ...]
    labels: tuple[str, ...]
    _index: dict[str, int] = field(
        default_factory=_empty_index, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if len(self.codes) != len(self.labels):
            raise ValueError(
                f"coding for '{self.varname}' has {len(self.codes)} codes "
                f"but {len(self.labels)} labels"
            )
        index: dict[str, int] = {}
        for position, code in enumerate(self.codes):
            key = code_key(code)
            if key is None:
                continue
            if key in index:
                raise DuplicateCodeError(self.varname, code)
            index[key] = position
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_pairs(
        cls, varname: str, pairs: Iterable[tuple[str, object]]
    ) -> CodeTable:
        """Build from ``(label, code)`` pairs as produced by a coding expression."""
        labels: list[str] = []
        codes: list[object] = []
        for label, code in pairs:
            labels.append(str(label))
            codes.append(code)
        return cls(varname=varname, codes=tuple(codes), labels=tuple(labels))

    @classmethod
    def from_mapping(cls, varname: str, mapping: dict[object, str]) -> CodeTable:
        return cls(
            varname=varname,
            codes=tuple(mapping.keys()),
            labels=tuple(str(v) for v in mapping.values()),
        )

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[tuple[object, str]]:
        return iter(zip(self.codes, self.labels, strict=True))

    def __contains__(self, code: object) -> bool:
        key = code_key(code)
        return key is not None and key in self._index

    def label_for(self, code: object) -> str | None:
        key = code_key(code)
        if key is None:
            return None
        position = self._index.get(key)
        if position is None:
            return None
        return self.labels[position]

    def labels_for(self, values: Iterable[object]) -> list[str | None]:
        return [self.label_for(value) for value in values]

    def code_for(self, label: str) -> object | None:
        for code, known in self:
            if known == label:
                return code
        return None

    def reversed(self) -> CodeTable:
        """The label -> code table for the same variable."""
        return CodeTable(
            varname=self.varname,
            codes=self.labels,
            labels=cast("tuple[str, ...]", self.codes),
        )

    def as_dict(self) -> dict[object, str]:
        return dict(self)
