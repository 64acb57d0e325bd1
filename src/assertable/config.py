from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


class AssertConfig(BaseModel):
    """Settings shared by every assertion in a test session.

    Attributes:
        max_value_length: Longest rendering of a value inside a diagnostic
            line; longer values are cut and end in "...".
        fail_fast: Raise on the first failed assertion instead of collecting
            failures until the end of the test.
        debug_log: What the plugin's debug log file records: every predicate
            evaluation ("evaluations") or only reported failures ("failures").
    """

    model_config = ConfigDict(extra="forbid")
    max_value_length: int = Field(default=200, ge=10)
    fail_fast: bool = False
    debug_log: Literal["evaluations", "failures"] = "evaluations"


_active = AssertConfig()


def get_config() -> AssertConfig:
    return _active


def set_config(config: AssertConfig) -> AssertConfig:
    """Install ``config`` as the active config and return the previous one."""
    global _active
    previous, _active = _active, config
    return previous


def load_config(path: Path) -> AssertConfig:
    """Load and validate an assertion config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return AssertConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return AssertConfig(**raw)
