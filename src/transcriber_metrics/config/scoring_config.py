"""Immutable scoring settings passed explicitly to each evaluation call."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..exceptions import ConfigError
from .load import load_config

__all__ = ["ScoringConfig"]


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Settings shared by every clip of an evaluation run."""

    collar: float = 0.0
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.collar) or self.collar < 0:
            raise ConfigError(f"scoring.collar must be a non-negative number, got {self.collar!r}.")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError(f"scoring.max_workers must be at least 1, got {self.max_workers!r}.")

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> ScoringConfig:
        """Build settings from a loaded configuration (reads its ``scoring`` section)."""
        section = config.get("scoring") or {}
        if not isinstance(section, Mapping):
            raise ConfigError("scoring section must be a mapping.")
        try:
            collar = float(section.get("collar", 0.0))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"scoring.collar is not a number: {section.get('collar')!r}") from exc
        max_workers = section.get("max_workers")
        return cls(collar=collar, max_workers=int(max_workers) if max_workers is not None else None)

    @classmethod
    def load(
        cls,
        env: str = "default",
        *,
        config_dir: str | Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> ScoringConfig:
        """Load, merge and validate the ``env`` configuration, then read its scoring section."""
        return cls.from_mapping(load_config(env, config_dir=config_dir, overrides=overrides))
