"""Configuration: environment variables, YAML documents and number formats."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union, cast

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_FLOAT_FORMAT = "%.2f"

X_FORMAT_ENV = "CHARTJS_X_FLOAT_FORMAT"
Y_FORMAT_ENV = "CHARTJS_Y_FLOAT_FORMAT"
LOGLEVEL_ENV = "LOGLEVEL"

_loaded = False


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable, loading a ``.env`` file on first use.

    Variables already present in the process environment win over ``.env``.
    """
    global _loaded
    if not _loaded:
        load_dotenv(override=False)
        _loaded = True
    return os.getenv(key, default)


class FormatConfig(BaseModel):
    """printf-style formats used for the numbers of a Values payload.

    ``x_float_format`` applies to X coordinates (and to bare category values),
    ``y_float_format`` to Y and R coordinates.
    """

    x_float_format: str = DEFAULT_FLOAT_FORMAT
    y_float_format: str = DEFAULT_FLOAT_FORMAT

    @field_validator("x_float_format", "y_float_format")
    @classmethod
    def validate_float_format(cls, v: str) -> str:
        try:
            v % 1.5
        except (TypeError, ValueError) as e:
            raise ValueError(f"{v!r} is not a usable float format: {e}")
        return v

    @classmethod
    def from_env(cls) -> "FormatConfig":
        return cls(
            x_float_format=get_env(X_FORMAT_ENV) or DEFAULT_FLOAT_FORMAT,
            y_float_format=get_env(Y_FORMAT_ENV) or DEFAULT_FLOAT_FORMAT,
        )

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "FormatConfig":
        """Return a validated copy with ``overrides`` applied on top."""
        if not overrides:
            return self
        return FormatConfig(**{**self.model_dump(), **dict(overrides)})


class DocumentLoadError(FileNotFoundError):
    pass


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML chart document whose top level is a mapping."""
    path = Path(path)
    if not path.exists():
        raise DocumentLoadError(f"Missing chart document: {path}")
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict):
        raise ValueError(f"Unexpected YAML structure in {path}; expected mapping")
    logger.debug("Loaded chart document %s with keys %s", path, sorted(raw))
    return cast(Dict[str, Any], raw)
