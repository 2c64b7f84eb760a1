"""Multi-clip evaluation helpers."""

from .batch import (
    BatchReport,
    BatchSummary,
    ClipInput,
    ClipScore,
    SegmentLike,
    score_batch,
    score_clip,
)

__all__ = [
    "BatchReport",
    "BatchSummary",
    "ClipInput",
    "ClipScore",
    "SegmentLike",
    "score_batch",
    "score_clip",
]
