"""Scoring modules for diarization and transcription evaluation."""

from .der import calculate_der, evaluate_diarization
from .intervals import (
    CollarRegion,
    apply_collar,
    collar_regions,
    merge_regions,
    overlap,
    subtract_regions,
)
from .jer import calculate_jer
from .speaker_mapping import SpeakerMapper, find_greedy_mapping, label_overlaps
from .wer import EditCounts, Text, calculate_wer, edit_counts, tokenize

__all__ = [
    "CollarRegion",
    "EditCounts",
    "SpeakerMapper",
    "Text",
    "apply_collar",
    "calculate_der",
    "calculate_jer",
    "calculate_wer",
    "collar_regions",
    "edit_counts",
    "evaluate_diarization",
    "find_greedy_mapping",
    "label_overlaps",
    "merge_regions",
    "overlap",
    "subtract_regions",
    "tokenize",
]
