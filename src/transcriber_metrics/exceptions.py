"""Exception types for Transcriber Metrics."""

from __future__ import annotations

__all__ = ["ConfigError", "InvalidCollarError", "InvalidSegmentError", "MetricsError"]


class MetricsError(Exception):
    """Base class for every error raised by the scoring package."""


class InvalidSegmentError(MetricsError, ValueError):
    """
    Raised when a segment violates its invariants (empty speaker label,
    non-finite times, or an end that precedes its start).
    """


class ConfigError(MetricsError, RuntimeError):
    """Raised when configuration loading or validation fails."""


class InvalidCollarError(MetricsError, ValueError):
    """Raised when a scoring collar is not a finite number of seconds."""
