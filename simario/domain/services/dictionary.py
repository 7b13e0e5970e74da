"""Data dictionary service.

The :class:`Dictionary` holds the descriptions of the simulation variables and
the code tables of the categorical ones. It turns raw codes into category
labels and computed results into the text shown in reports.

A dictionary is an ordinary immutable value: build one per study/dataset and
pass it to whatever needs labels.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

import pandas as pd

from ...constants import Columns, Defaults, TableNames
from ...pandas_utils import clean_text, ensure_frame, find_column
from ..entities.code_table import CodeTable, code_key
from ..entities.flattened_code import FlattenedCode
from ..entities.results import (
    AnnotatedValue,
    ResultMeta,
    Unrecognized,
    classify_result,
    result_meta,
    result_value,
)
from ..exceptions import (
    TableSchemaError,
    UnknownVariableError,
    VarnameResolutionFailure,
)

if TYPE_CHECKING:
    from ...application.ports.services import (
        CodingExpressionEvaluatorPort,
        LoggerPort,
    )
    from ...config import SimarioConfig


def _empty_descriptions() -> Mapping[str, str]:
    return {}


def _empty_code_tables() -> Mapping[str, CodeTable]:
    return {}


def _optional_name(varname: object) -> str | None:
    return clean_text(varname) or None


def _join_labels(group_label: object, label: object) -> str | None:
    if group_label is None or label is None:
        return None
    return f"{group_label} {label}"


def _index_codes(index: pd.Index[Any]) -> list[str]:
    codes: list[str] = []
    for item in index:
        if isinstance(item, tuple):
            parts = cast("tuple[object, ...]", item)
            codes.append(" ".join(code_key(part) or "" for part in parts))
        else:
            codes.append(code_key(item) or "")
    return codes


@dataclass(frozen=True, slots=True, eq=False)
class Dictionary:
    descriptions: Mapping[str, str] = field(default_factory=_empty_descriptions)
    code_tables: Mapping[str, CodeTable] = field(default_factory=_empty_code_tables)
    baseline_weighting: str = Defaults.BASELINE_WEIGHTING
    scenario_label: str = Defaults.SCENARIO_LABEL

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "descriptions", MappingProxyType(dict(self.descriptions))
        )
        object.__setattr__(
            self, "code_tables", MappingProxyType(dict(self.code_tables))
        )

    @classmethod
    def from_tables(
        cls,
        descriptions: object,
        codings: object | None = None,
        *,
        evaluator: CodingExpressionEvaluatorPort | None = None,
        config: SimarioConfig | None = None,
        logger: LoggerPort | None = None,
    ) -> Dictionary:
        """Build a dictionary from a descriptions table and an optional codings table.

        Args:
            descriptions: DataFrame (or rows) with ``Varname`` and ``Description``
                columns. Other columns are ignored.
            codings: DataFrame (or rows) with ``Varname`` and ``CodingsExpr``
                columns, or None when no variable is categorical. A
                ``CodingsExpr`` cell is either an expression string, handed to
                ``evaluator``, or already evaluated ``(label, code)`` pairs.
            evaluator: Turns a coding expression into ordered ``(label, code)``
                pairs. Required only for expression strings.
            config: Supplies the weighting labels.
            logger: Receives load statistics and warnings.

        Returns:
            The new dictionary.
        """
        description_map = _build_descriptions(descriptions, logger)
        code_tables: dict[str, CodeTable] = {}
        if codings is not None:
            code_tables = _build_code_tables(codings, evaluator, logger)
        if logger is not None:
            for varname in code_tables:
                if varname not in description_map:
                    logger.warning(f"Coding for '{varname}' has no description")
            logger.log_dictionary_loaded(
                descriptions_count=len(description_map),
                codings_count=len(code_tables),
            )
        if config is None:
            return cls(descriptions=description_map, code_tables=code_tables)
        return cls(
            descriptions=description_map,
            code_tables=code_tables,
            baseline_weighting=config.baseline_weighting,
            scenario_label=config.scenario_label,
        )

    def __contains__(self, varname: object) -> bool:
        return varname in self.descriptions

    @property
    def varnames(self) -> list[str]:
        return list(self.descriptions)

    def code_table(self, varname: str) -> CodeTable | None:
        return self.code_tables.get(varname)

    def has_coding(self, varname: str) -> bool:
        return varname in self.code_tables

    def describe(self, varname: str) -> str:
        if varname not in self.descriptions:
            raise UnknownVariableError(varname)
        description = self.descriptions[varname]
        if not description:
            raise UnknownVariableError(varname, UnknownVariableError.EMPTY_DESCRIPTION)
        return description

    def match_codes(self, values: object, varname: str | None = None) -> object:
        """Category labels for coded ``values``.

        ``values`` comes back unchanged when ``varname`` is None or has no
        code table. Otherwise every value is replaced by its label, or None
        when the code is unknown. A pandas Series keeps its index; a scalar
        is treated as a one-element sequence.
        """
        name = _optional_name(varname)
        if name is None:
            return values
        table = self.code_tables.get(name)
        if table is None:
            return values
        if isinstance(values, pd.Series):
            series = cast("pd.Series[Any]", values)
            return pd.Series(
                table.labels_for(series),
                index=series.index,
                name=series.name,
                dtype="object",
            )
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            return table.labels_for([values])
        return table.labels_for(cast("Iterable[object]", values))

    def match_flattened_codes(
        self,
        flat_codes: Iterable[object] | str,
        varname: str | None,
        grpby_tag: str | None = None,
    ) -> object:
        """Category labels for flattened codes of a (possibly grouped) result.

        Without ``grpby_tag`` this is :meth:`match_codes`. With it every entry
        must be ``"<group code> <code>"``; the result is
        ``"<group label> <label>"``, or None when either part has no label. A
        pandas Series keeps its index either way.

        Raises:
            MalformedFlattenedCodeError: an entry has no group code.
        """
        group_tag = _optional_name(grpby_tag)
        if group_tag is None:
            return self.match_codes(flat_codes, varname)
        entries: list[object] = (
            [flat_codes] if isinstance(flat_codes, str) else list(flat_codes)
        )
        parsed = [
            FlattenedCode.parse(entry, varname=varname, grpby_tag=group_tag)
            for entry in entries
        ]
        group_labels = cast(
            "list[object]",
            self.match_codes([code.group_code for code in parsed], group_tag),
        )
        labels = cast(
            "list[object]",
            self.match_codes([code.var_code for code in parsed], varname),
        )
        joined = [
            _join_labels(group_label, label)
            for group_label, label in zip(group_labels, labels, strict=True)
        ]
        if isinstance(flat_codes, pd.Series):
            series = cast("pd.Series[Any]", flat_codes)
            return pd.Series(
                joined, index=series.index, name=series.name, dtype="object"
            )
        return joined

    def coding_labels_for(
        self, varnames: Iterable[str] | str
    ) -> dict[str, tuple[str, ...] | None]:
        names = [varnames] if isinstance(varnames, str) else list(varnames)
        labels: dict[str, tuple[str, ...] | None] = {}
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"variable names must be strings, got {name!r}")
            table = self.code_tables.get(name)
            labels[name] = table.labels if table is not None else None
        return labels

    def resolve_description(self, result: object, *, argument: str = "result") -> str:
        """Human-readable description of a computed result.

        The variable comes from the result's metadata, else from the last
        named axis of a pandas object, else from the first string of a text
        value. Metadata adds grouping (" by ..."), weighting (" scenario"
        unless baseline) and set (" (...)") suffixes.

        Raises:
            VarnameResolutionFailure: no variable name can be derived.
            UnknownVariableError: the variable has no description.
        """
        shape = classify_result(result)
        if isinstance(shape, Unrecognized):
            raise VarnameResolutionFailure(argument, shape.value_type)
        description = self.describe(shape.varname)
        meta = result_meta(result)
        if meta is None:
            return description
        return (
            description
            + self._grouping_suffix(meta)
            + self._weighting_suffix(meta.weighting)
            + self._set_suffix(meta.set)
        )

    def order_by_description(self, *items: object) -> Any:
        """Order results by their descriptions.

        Results are passed as separate arguments, or as a single list or
        tuple, and come back as a list. A single mapping of named results
        comes back as a dict with the same keys, reordered by the
        descriptions of its values. Equal descriptions keep their original
        order.
        """
        if len(items) == 1 and isinstance(items[0], Mapping):
            panel = cast("Mapping[object, object]", items[0])
            keys = list(panel)
            order = self._description_order(
                [(panel[key], f"items[{key!r}]") for key in keys]
            )
            return {keys[i]: panel[keys[i]] for i in order}
        results: Sequence[object] = items
        if len(items) == 1 and isinstance(items[0], (list, tuple)):
            results = cast("Sequence[object]", items[0])
        order = self._description_order(
            [(item, f"items[{i}]") for i, item in enumerate(results)]
        )
        return [results[i] for i in order]

    def relabel_index(
        self,
        result: object,
        varname: str | None = None,
        grpby_tag: str | None = None,
    ) -> object:
        """Copy of a pandas result with its row codes replaced by labels.

        ``varname`` and ``grpby_tag`` default to the result's metadata. A
        two-level index is treated as flattened ``"<group code> <code>"``
        entries. Codes without a label keep their raw text.
        """
        value = result_value(result)
        if not isinstance(value, (pd.Series, pd.DataFrame)):
            raise TypeError(
                f"can only relabel pandas results, got {type(value).__name__}"
            )
        meta = result_meta(result) or ResultMeta()
        codes = _index_codes(value.index)
        labels = cast(
            "list[object]",
            self.match_flattened_codes(
                codes, varname or meta.varname, grpby_tag or meta.grpby_tag
            ),
        )
        relabeled = value.copy()
        relabeled.index = pd.Index(
            [
                code if label is None else label
                for code, label in zip(codes, labels, strict=True)
            ],
            name=value.index.names[-1],
        )
        if isinstance(result, AnnotatedValue):
            return AnnotatedValue(value=relabeled, meta=result.meta)
        return relabeled

    def _description_order(self, results: list[tuple[object, str]]) -> list[int]:
        descriptions = [
            self.resolve_description(result, argument=argument)
            for result, argument in results
        ]
        return sorted(range(len(descriptions)), key=descriptions.__getitem__)

    def _grouping_suffix(self, meta: ResultMeta) -> str:
        if meta.grouping:
            return f" by {meta.grouping}"
        if meta.grpby_tag:
            return " by " + self.resolve_description(
                meta.grpby_tag, argument="grpby_tag"
            )
        return ""

    def _weighting_suffix(self, weighting: str | None) -> str:
        if weighting is None or weighting == self.baseline_weighting:
            return ""
        return f" {self.scenario_label}"

    def _set_suffix(self, subset: str | None) -> str:
        if subset is None:
            return ""
        return f" ({subset})"


def _require_column(df: pd.DataFrame, options: list[str], table: str) -> str:
    column = find_column(df, options)
    if column is None:
        raise TableSchemaError(table, options[0])
    return column


def _build_descriptions(table: object, logger: LoggerPort | None) -> dict[str, str]:
    df = ensure_frame(table)
    varname_col = _require_column(df, [Columns.VARNAME], TableNames.DESCRIPTIONS)
    description_col = _require_column(
        df, [Columns.DESCRIPTION], TableNames.DESCRIPTIONS
    )
    descriptions: dict[str, str] = {}
    for raw_varname, raw_description in zip(
        df[varname_col], df[description_col], strict=True
    ):
        # blank rows at the end of the source file
        varname = clean_text(raw_varname)
        if not varname:
            continue
        if varname in descriptions:
            if logger is not None:
                logger.warning(f"Duplicate description for '{varname}' ignored")
            continue
        descriptions[varname] = clean_text(raw_description)
    return descriptions


def _pairs_from_cell(
    cell: object, varname: str, evaluator: CodingExpressionEvaluatorPort | None
) -> list[tuple[str, object]] | None:
    if isinstance(cell, str):
        expr = cell.strip()
        if not expr:
            return None
        if evaluator is None:
            raise ValueError(
                f"coding for '{varname}' is an expression but no evaluator was given"
            )
        return evaluator.evaluate(expr)
    if isinstance(cell, Mapping):
        mapping = cast("Mapping[object, object]", cell)
        return [(str(label), code) for code, label in mapping.items()]
    if isinstance(cell, (list, tuple)):
        return [
            (str(label), code)
            for label, code in cast("Iterable[tuple[object, object]]", cell)
        ]
    if not clean_text(cell):
        return None
    raise TypeError(
        f"unsupported coding for '{varname}': {type(cell).__name__}"
    )


def _build_code_tables(
    table: object,
    evaluator: CodingExpressionEvaluatorPort | None,
    logger: LoggerPort | None,
) -> dict[str, CodeTable]:
    df = ensure_frame(table)
    varname_col = _require_column(df, [Columns.VARNAME], TableNames.CODINGS)
    expr_col = _require_column(
        df, list(Columns.CODINGS_EXPR_ALIASES), TableNames.CODINGS
    )
    code_tables: dict[str, CodeTable] = {}
    for raw_varname, cell in zip(df[varname_col], df[expr_col], strict=True):
        varname = clean_text(raw_varname)
        if not varname:
            continue
        pairs = _pairs_from_cell(cell, varname, evaluator)
        if pairs is None:
            continue
        if varname in code_tables:
            if logger is not None:
                logger.warning(f"Duplicate coding for '{varname}' ignored")
            continue
        code_tables[varname] = CodeTable.from_pairs(varname, pairs)
        if logger is not None:
            logger.debug(f"Coding for '{varname}': {len(pairs)} categories")
    return code_tables
