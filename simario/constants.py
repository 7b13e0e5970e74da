from typing import ClassVar


class Defaults:
    DESCRIPTIONS_FILE = "data/descriptions.csv"
    BASELINE_WEIGHTING = "weightBase"
    SCENARIO_LABEL = "scenario"
    ENCODING = "utf-8"
    CONFIG_FILE = "simario.toml"


class Columns:
    VARNAME = "Varname"
    DESCRIPTION = "Description"
    CODINGS_EXPR = "CodingsExpr"
    CODINGS_EXPR_ALIASES: ClassVar[tuple[str, ...]] = ("CodingsExpr", "Codings_Expr")


class TableNames:
    DESCRIPTIONS = "descriptions"
    CODINGS = "codings"


class FileTypes:
    CSV: ClassVar[tuple[str, ...]] = (".csv",)
    EXCEL: ClassVar[tuple[str, ...]] = (".xls", ".xlsx")


class EnvVars:
    DESCRIPTIONS_FILE = "SIMARIO_DESCRIPTIONS_FILE"
    CODINGS_FILE = "SIMARIO_CODINGS_FILE"
    BASELINE_WEIGHTING = "SIMARIO_BASELINE_WEIGHTING"
    SCENARIO_LABEL = "SIMARIO_SCENARIO_LABEL"
    ENCODING = "SIMARIO_ENCODING"
