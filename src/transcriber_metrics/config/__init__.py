"""Configuration loading helpers."""

from __future__ import annotations

from ..exceptions import ConfigError
from .load import load_config
from .scoring_config import ScoringConfig

__all__ = [
    "ConfigError",
    "ScoringConfig",
    "load_config",
]
