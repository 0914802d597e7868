"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from pnpm_car.runner import PNPM_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "PNPM_CAR_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _coerce_flag(value: object, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return default


class RunnerConfig(BaseModel):
    """Settings for a single wrapper invocation.

    Every field maps to a ``PNPM_CAR_<FIELD>`` environment variable.
    """

    executable: str = Field(default=PNPM_NAME, description="Package manager to forward to")
    skip_animation: bool = Field(
        default=False, description="Go straight to the package manager without the car"
    )
    debug: bool = Field(default=False, description="Log diagnostics to stderr")

    @field_validator("executable", mode="before")
    @classmethod
    def validate_executable(cls, value: object) -> str:
        """Blank values fall back to pnpm."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        return PNPM_NAME

    @field_validator("skip_animation", "debug", mode="before")
    @classmethod
    def validate_flag(cls, value: object) -> bool:
        """Gracefully coerce unrecognized values to off."""
        return _coerce_flag(value, default=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunnerConfig:
        """Build settings from ``environ`` (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        data = {
            name: env[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in env
        }
        return cls.model_validate(data)


__all__ = ["ENV_PREFIX", "RunnerConfig"]
