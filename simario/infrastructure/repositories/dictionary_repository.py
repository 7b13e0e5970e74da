"""Loading of dictionaries from descriptions/codings files (infrastructure).

Relative file paths are resolved against the working directory. The loaded
dictionary is kept per repository instance; there is no process-wide one.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ...config import SimarioConfig
from ...domain.services.dictionary import Dictionary
from ..expressions.coding_expression import RCodingExpressionEvaluator
from ..io.table_reader import TableReader, TableReadOptions
from ..logging.null_logger import NullLogger

if TYPE_CHECKING:
    import pandas as pd

    from ...application.ports.services import (
        CodingExpressionEvaluatorPort,
        LoggerPort,
        TableReaderPort,
    )


class DictionaryRepository:
    pass

    def __init__(
        self,
        config: SimarioConfig | None = None,
        reader: TableReaderPort | None = None,
        evaluator: CodingExpressionEvaluatorPort | None = None,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self._config = config or SimarioConfig()
        self._reader = reader or TableReader(
            TableReadOptions(encoding=self._config.encoding)
        )
        self._evaluator = evaluator or RCodingExpressionEvaluator()
        self._logger = logger or NullLogger()
        self._dictionary: Dictionary | None = None

    @property
    def config(self) -> SimarioConfig:
        return self._config

    def load(self) -> Dictionary:
        if self._dictionary is not None:
            return self._dictionary
        descriptions = self._read_table(self._config.descriptions_file)
        codings = None
        if self._config.codings_file is not None:
            codings = self._read_table(self._config.codings_file)
        self._dictionary = Dictionary.from_tables(
            descriptions,
            codings,
            evaluator=self._evaluator,
            config=self._config,
            logger=self._logger,
        )
        return self._dictionary

    def clear_cache(self) -> None:
        self._dictionary = None

    def _read_table(self, path: Path) -> pd.DataFrame:
        df = self._reader.read(path)
        self._logger.log_table_loaded(path.name, len(df), df.shape[1])
        return df


def load_dictionary(
    descriptions_file: str | Path,
    codings_file: str | Path | None = None,
    *,
    config: SimarioConfig | None = None,
    logger: LoggerPort | None = None,
) -> Dictionary:
    """Load a dictionary from a descriptions file and an optional codings file.

    The file paths override the ones in ``config``; its other settings apply.
    """
    base = config or SimarioConfig()
    repository = DictionaryRepository(
        config=SimarioConfig(
            descriptions_file=Path(descriptions_file),
            codings_file=Path(codings_file) if codings_file is not None else None,
            baseline_weighting=base.baseline_weighting,
            scenario_label=base.scenario_label,
            encoding=base.encoding,
        ),
        logger=logger,
    )
    return repository.load()
