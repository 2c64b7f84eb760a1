"""Greedy alignment of hypothesis speaker labels onto reference speaker labels."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence

from ..segments import Segment
from .intervals import overlap

__all__ = ["SpeakerMapper", "find_greedy_mapping", "label_overlaps"]

SpeakerMapper = Callable[[Sequence[Segment], Sequence[Segment]], dict[str, str]]
"""Signature shared by speaker matchers: ``(hypothesis, reference) -> {hyp: ref}``."""


def label_overlaps(
    hypothesis: Sequence[Segment], reference: Sequence[Segment]
) -> dict[tuple[str, str], float]:
    """Total overlap for every (hypothesis label, reference label) pair that co-occurs."""
    totals: dict[tuple[str, str], float] = defaultdict(float)
    for hyp in hypothesis:
        for ref in reference:
            shared = overlap(hyp, ref)
            if shared > 0:
                totals[(hyp.speaker, ref.speaker)] += shared
    return dict(totals)


def find_greedy_mapping(
    hypothesis: Sequence[Segment], reference: Sequence[Segment]
) -> dict[str, str]:
    """Map each hypothesis label to the unused reference label it overlaps most.

    Hypothesis labels are visited in sorted order and each reference label can be
    claimed once. On equal overlap the reference label that sorts first wins. Labels
    with no positive overlap against any unused reference label stay unmapped.
    This is a single greedy pass, not an optimal bipartite assignment.
    """

    totals = label_overlaps(hypothesis, reference)
    reference_labels = sorted({segment.speaker for segment in reference})
    used: set[str] = set()
    mapping: dict[str, str] = {}

    for hyp_label in sorted({segment.speaker for segment in hypothesis}):
        best_label: str | None = None
        best_overlap = 0.0
        for ref_label in reference_labels:
            if ref_label in used:
                continue
            shared = totals.get((hyp_label, ref_label), 0.0)
            if shared > best_overlap:
                best_label = ref_label
                best_overlap = shared
        if best_label is not None:
            mapping[hyp_label] = best_label
            used.add(best_label)

    return mapping
