"""DER (Diarization Error Rate) scoring."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..results import DERComponents, DiarizationEvaluation
from ..segments import Segment
from ..utils.logging import get_logger
from .intervals import apply_collar, overlap
from .jer import calculate_jer
from .speaker_mapping import SpeakerMapper, find_greedy_mapping

LOGGER = get_logger(__name__)

__all__ = ["calculate_der", "evaluate_diarization"]


def calculate_der(
    reference: Sequence[Segment],
    hypothesis: Sequence[Segment],
    collar: float = 0.0,
    *,
    mapper: SpeakerMapper = find_greedy_mapping,
) -> DERComponents:
    """Compute DER components for a hypothesis against a reference annotation.

    DER = (Confusion + False Alarm + Missed Detection) / Total Reference Speech

    Args:
        reference: Ground-truth segments
        hypothesis: Predicted segments
        collar: Seconds excluded either side of every reference boundary
        mapper: Speaker matcher, ``(hypothesis, reference) -> {hyp_label: ref_label}``

    Returns:
        DERComponents holding the error durations and total reference duration

    Confusion only counts the single hypothesis segment that overlaps each reference
    segment the most, rather than every mismatched overlap.
    """

    trimmed_reference, trimmed_hypothesis = apply_collar(reference, hypothesis, collar)
    mapping = mapper(trimmed_hypothesis, trimmed_reference)
    LOGGER.debug("Speaker mapping: %s", mapping)

    total_duration = sum(segment.duration for segment in trimmed_reference)
    missed_detection = _uncovered_duration(trimmed_reference, trimmed_hypothesis)
    false_alarm = _uncovered_duration(trimmed_hypothesis, trimmed_reference)
    confusion = _confusion_duration(trimmed_reference, trimmed_hypothesis, mapping)

    components = DERComponents(
        confusion=float(confusion),
        false_alarm=float(false_alarm),
        missed_detection=float(missed_detection),
        total_duration=float(total_duration),
    )
    LOGGER.debug(
        "DER %.4f (confusion=%.3f false_alarm=%.3f missed=%.3f total=%.3f)",
        components.der,
        components.confusion,
        components.false_alarm,
        components.missed_detection,
        components.total_duration,
    )
    return components


def evaluate_diarization(
    reference: Sequence[Segment],
    hypothesis: Sequence[Segment],
    collar: float = 0.0,
) -> DiarizationEvaluation:
    """Return DER (with ``collar``) and JER (without collar) for the same annotations."""
    return DiarizationEvaluation(
        der=calculate_der(reference, hypothesis, collar),
        jer=calculate_jer(reference, hypothesis),
    )


def _uncovered_duration(segments: Sequence[Segment], others: Sequence[Segment]) -> float:
    """Sum of each segment's duration not covered by ``others``, regardless of speaker."""
    uncovered = 0.0
    for segment in segments:
        covered = sum(overlap(segment, other) for other in others)
        uncovered += max(0.0, segment.duration - covered)
    return uncovered


def _confusion_duration(
    reference: Sequence[Segment],
    hypothesis: Sequence[Segment],
    mapping: Mapping[str, str],
) -> float:
    confusion = 0.0
    for ref in reference:
        best: Segment | None = None
        best_overlap = 0.0
        for hyp in hypothesis:
            shared = overlap(ref, hyp)
            if shared > best_overlap:
                best = hyp
                best_overlap = shared
        if best is not None and mapping.get(best.speaker, best.speaker) != ref.speaker:
            confusion += best_overlap
    return confusion
