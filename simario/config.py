from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars


def _optional_path(raw: str | None) -> Path | None:
    if raw is None:
        return None
    cleaned = raw.strip()
    return Path(cleaned) if cleaned else None


@dataclass(frozen=True, slots=True)
class SimarioConfig:
    descriptions_file: Path = field(
        default_factory=lambda: Path(Defaults.DESCRIPTIONS_FILE)
    )
    codings_file: Path | None = None
    baseline_weighting: str = Defaults.BASELINE_WEIGHTING
    scenario_label: str = Defaults.SCENARIO_LABEL
    encoding: str = Defaults.ENCODING

    def __post_init__(self) -> None:
        if not self.baseline_weighting.strip():
            raise ValueError("baseline_weighting must not be empty")
        if not self.scenario_label.strip():
            raise ValueError("scenario_label must not be empty")
        if not self.encoding.strip():
            raise ValueError("encoding must not be empty")

    @classmethod
    def from_env(cls) -> SimarioConfig:
        return cls(
            descriptions_file=Path(
                os.getenv(EnvVars.DESCRIPTIONS_FILE, Defaults.DESCRIPTIONS_FILE)
            ),
            codings_file=_optional_path(os.getenv(EnvVars.CODINGS_FILE)),
            baseline_weighting=os.getenv(
                EnvVars.BASELINE_WEIGHTING, Defaults.BASELINE_WEIGHTING
            ),
            scenario_label=os.getenv(EnvVars.SCENARIO_LABEL, Defaults.SCENARIO_LABEL),
            encoding=os.getenv(EnvVars.ENCODING, Defaults.ENCODING),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> SimarioConfig:
        config = SimarioConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: SimarioConfig
    ) -> SimarioConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        paths = _get_table(data, "paths")
        labels = _get_table(data, "labels")
        descriptions_file = base_config.descriptions_file
        if value := paths.get("descriptions_file"):
            descriptions_file = Path(str(value))
        codings_file = base_config.codings_file
        if "codings_file" in paths:
            raw = paths.get("codings_file")
            codings_file = _optional_path(None if raw is None else str(raw))
        encoding = base_config.encoding
        if (value := paths.get("encoding")) is not None:
            encoding = _coerce_str(value, key="paths.encoding")
        baseline_weighting = base_config.baseline_weighting
        if (value := labels.get("baseline_weighting")) is not None:
            baseline_weighting = _coerce_str(value, key="labels.baseline_weighting")
        scenario_label = base_config.scenario_label
        if (value := labels.get("scenario_label")) is not None:
            scenario_label = _coerce_str(value, key="labels.scenario_label")
        return SimarioConfig(
            descriptions_file=descriptions_file,
            codings_file=codings_file,
            baseline_weighting=baseline_weighting,
            scenario_label=scenario_label,
            encoding=encoding,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
