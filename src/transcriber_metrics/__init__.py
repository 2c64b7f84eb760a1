"""Transcriber Metrics: DER, JER and WER scoring for diarized transcripts."""

from __future__ import annotations

from .config import ScoringConfig, load_config
from .evaluation import BatchReport, BatchSummary, ClipInput, ClipScore, score_batch, score_clip
from .exceptions import ConfigError, InvalidCollarError, InvalidSegmentError, MetricsError
from .results import DERComponents, DiarizationEvaluation, JERResult, WERComponents
from .scoring import (
    apply_collar,
    calculate_der,
    calculate_jer,
    calculate_wer,
    evaluate_diarization,
    find_greedy_mapping,
    tokenize,
)
from .segments import Segment, speaker_id_for_label, speaker_label_for_id

__version__ = "0.1.0"

__all__ = [
    "BatchReport",
    "BatchSummary",
    "ClipInput",
    "ClipScore",
    "ConfigError",
    "DERComponents",
    "DiarizationEvaluation",
    "InvalidCollarError",
    "InvalidSegmentError",
    "JERResult",
    "MetricsError",
    "ScoringConfig",
    "Segment",
    "WERComponents",
    "apply_collar",
    "calculate_der",
    "calculate_jer",
    "calculate_wer",
    "evaluate_diarization",
    "find_greedy_mapping",
    "load_config",
    "score_batch",
    "score_clip",
    "speaker_id_for_label",
    "speaker_label_for_id",
    "tokenize",
]
