"""Configuration model for lingograde."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from lingograde.engine.cloze import CLOZE_THRESHOLD, MASK
from lingograde.engine.diff import MISSING_PLACEHOLDER, SMART_DIFF_THRESHOLD
from lingograde.engine.validator import DEFAULT_THRESHOLDS, Tolerance

CONFIG_FILENAME = "config.yaml"
TOLERANCE_ENV = "LINGOGRADE_TOLERANCE"


class ThresholdTable(BaseModel):
    """Minimum similarity per tolerance level."""
    model_config = ConfigDict(frozen=True)

    strict: float = Field(default=DEFAULT_THRESHOLDS[Tolerance.STRICT], ge=0.0, le=1.0)
    normal: float = Field(default=DEFAULT_THRESHOLDS[Tolerance.NORMAL], ge=0.0, le=1.0)
    lenient: float = Field(default=DEFAULT_THRESHOLDS[Tolerance.LENIENT], ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_order(self) -> "ThresholdTable":
        if not self.strict >= self.normal >= self.lenient:
            raise ValueError("thresholds must satisfy strict >= normal >= lenient")
        return self

    def as_mapping(self) -> Mapping[Tolerance, float]:
        return MappingProxyType({
            Tolerance.STRICT: self.strict,
            Tolerance.NORMAL: self.normal,
            Tolerance.LENIENT: self.lenient,
        })


class MatchingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Kept separate even though both default to 0.6
    diff_threshold: float = Field(default=SMART_DIFF_THRESHOLD, ge=0.0, le=1.0)
    cloze_threshold: float = Field(default=CLOZE_THRESHOLD, ge=0.0, le=1.0)
    mask: str = MASK
    placeholder: str = Field(default=MISSING_PLACEHOLDER, min_length=1)


class Settings(BaseModel):
    default_tolerance: Tolerance = Tolerance.NORMAL
    thresholds: ThresholdTable = Field(default_factory=ThresholdTable)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    data_dir: Path = Path.home() / ".lingograde"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        config_path = config_path or cls.model_fields["data_dir"].default / CONFIG_FILENAME
        data = {}
        if config_path.exists():
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        env_tolerance = os.environ.get(TOLERANCE_ENV)
        if env_tolerance and isinstance(data, dict):
            data["default_tolerance"] = env_tolerance
        # A non-mapping file is reported by pydantic
        return cls.model_validate(data)

    def save(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        config_path = self.data_dir / CONFIG_FILENAME
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
