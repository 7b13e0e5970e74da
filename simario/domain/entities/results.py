"""Computed results as seen by the data dictionary.

Statistics produced by the simulation (frequency tables, means, quantiles)
are plain values. Producers attach a :class:`ResultMeta` to say which variable
a value describes and how it was grouped, weighted or subset:

* pandas objects carry it in ``obj.attrs["meta"]``;
* anything else is wrapped in :class:`AnnotatedValue`.

When no variable name is attached the dictionary falls back on the shape of
the value. The shapes form a closed set, classified in order by
:func:`classify_result`:

``MetadataTagged``
    metadata names the variable.
``LabeledMultiDim``
    a pandas object with named axes; the last non-empty axis name wins.
``TextSequence``
    a string or a sequence of strings; the first one wins.
``Unrecognized``
    nothing to go on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, cast

import pandas as pd

from ...pandas_utils import clean_text

META_ATTR = "meta"

_META_ALIASES = {
    "varname": "varname",
    "grouping": "grouping",
    "grpby_tag": "grpby_tag",
    "grpby.tag": "grpby_tag",
    "grpbyTag": "grpby_tag",
    "set": "set",
    "weighting": "weighting",
}


def _optional_text(value: object) -> str | None:
    return clean_text(value) or None


@dataclass(frozen=True, slots=True)
class ResultMeta:
    varname: str | None = None
    grouping: str | None = None
    grpby_tag: str | None = None
    set: str | None = None
    weighting: str | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            object.__setattr__(
                self, item.name, _optional_text(getattr(self, item.name))
            )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> ResultMeta:
        values: dict[str, object] = {}
        for key, value in raw.items():
            name = _META_ALIASES.get(str(key))
            if name is not None and name not in values:
                values[name] = value
        return cls(**cast("dict[str, Any]", values))

    @classmethod
    def coerce(cls, raw: object) -> ResultMeta | None:
        if raw is None:
            return None
        if isinstance(raw, ResultMeta):
            return raw
        if isinstance(raw, Mapping):
            return cls.from_mapping(cast("Mapping[str, object]", raw))
        raise TypeError(f"unsupported result metadata: {type(raw).__name__}")


@dataclass(frozen=True, slots=True)
class AnnotatedValue:
    value: object
    meta: ResultMeta


def annotate(
    value: object,
    meta: ResultMeta | Mapping[str, object] | None = None,
    **overrides: str,
) -> object:
    """Attach metadata to ``value`` without modifying it.

    Keyword fields override the ones in ``meta``. pandas objects come back as
    shallow copies carrying ``attrs["meta"]``; other values are wrapped.
    """
    base = ResultMeta.coerce(meta) or ResultMeta()
    combined = replace(base, **cast("dict[str, Any]", overrides))
    if isinstance(value, AnnotatedValue):
        value = value.value
    if isinstance(value, (pd.Series, pd.DataFrame)):
        tagged = value.copy(deep=False)
        tagged.attrs = {**dict(value.attrs), META_ATTR: combined}
        return tagged
    return AnnotatedValue(value=value, meta=combined)


def result_meta(result: object) -> ResultMeta | None:
    if isinstance(result, AnnotatedValue):
        return result.meta
    if isinstance(result, (pd.Series, pd.DataFrame)):
        return ResultMeta.coerce(result.attrs.get(META_ATTR))
    return None


def result_value(result: object) -> object:
    if isinstance(result, AnnotatedValue):
        return result.value
    return result


@dataclass(frozen=True, slots=True)
class MetadataTagged:
    meta: ResultMeta

    @property
    def varname(self) -> str:
        return cast("str", self.meta.varname)


@dataclass(frozen=True, slots=True)
class LabeledMultiDim:
    dim_names: tuple[str, ...]

    @property
    def varname(self) -> str:
        return self.dim_names[-1]


@dataclass(frozen=True, slots=True)
class TextSequence:
    values: tuple[str, ...]

    @property
    def varname(self) -> str:
        return self.values[0]


@dataclass(frozen=True, slots=True)
class Unrecognized:
    value_type: str


ResultShape = MetadataTagged | LabeledMultiDim | TextSequence | Unrecognized


def _dim_names(value: object) -> tuple[str, ...]:
    if isinstance(value, pd.DataFrame):
        raw = [*value.index.names, *value.columns.names]
    elif isinstance(value, pd.Series):
        raw = list(value.index.names)
    else:
        return ()
    return tuple(name for name in (clean_text(n) for n in raw) if name)


def _text_values(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (pd.Series, pd.Index)):
        items = cast("list[object]", list(value))
    elif isinstance(value, (list, tuple)):
        items = list(cast("list[object] | tuple[object, ...]", value))
    else:
        return ()
    if items and all(isinstance(item, str) for item in items):
        return tuple(cast("list[str]", items))
    return ()


def classify_result(result: object) -> ResultShape:
    meta = result_meta(result)
    if meta is not None and meta.varname:
        return MetadataTagged(meta)
    value = result_value(result)
    if dim_names := _dim_names(value):
        return LabeledMultiDim(dim_names)
    if text := _text_values(value):
        return TextSequence(text)
    return Unrecognized(type(value).__name__)
