"""JER (Jaccard Error Rate) scoring."""

from __future__ import annotations

from collections.abc import Sequence

from ..results import JERResult
from ..segments import Segment
from .intervals import overlap

__all__ = ["calculate_jer"]


def calculate_jer(reference: Sequence[Segment], hypothesis: Sequence[Segment]) -> JERResult:
    """Compute a label-agnostic Jaccard error rate.

    JER = 1 - intersection / union, where the intersection sums the overlap of every
    (reference, hypothesis) pair and the union is the combined speech duration minus
    that intersection. Speaker labels are not consulted.
    """
    intersection = sum(overlap(ref, hyp) for ref in reference for hyp in hypothesis)
    reference_duration = sum(segment.duration for segment in reference)
    hypothesis_duration = sum(segment.duration for segment in hypothesis)
    union = reference_duration + hypothesis_duration - intersection
    return JERResult(intersection=float(intersection), union=float(union))
