from __future__ import annotations

"""Run configuration for the arborette CLI.

Example ``arborette.yml``::

    log_level: debug
    sink: log
    pause: false
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from arborette.errors import ConfigError

__all__ = ["RunConfig", "load_config", "apply_overrides"]


class RunConfig(BaseModel):  # noqa: D101 – self-documenting via fields
    model_config = ConfigDict(extra="forbid")

    log_level: Literal["debug", "info", "warning", "error"] = "info"
    sink: Literal["console", "log"] = "console"
    pause: bool = False  # wait for a keypress after the demo run


def load_config(path: str | Path | None = None) -> RunConfig:
    """Return the config stored at *path*, or defaults when *path* is None."""
    if path is None:
        return RunConfig()
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    try:
        return RunConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e


def apply_overrides(cfg: RunConfig, **overrides) -> RunConfig:
    """Return *cfg* with the non-None *overrides* applied and re-validated."""
    given = {k: v for k, v in overrides.items() if v is not None}
    try:
        return RunConfig.model_validate({**cfg.model_dump(), **given})
    except ValidationError as e:
        raise ConfigError(f"Invalid option: {e}") from e
