"""Tests for collar regions and segment subtraction."""

from __future__ import annotations

import math

import pytest

from transcriber_metrics.exceptions import InvalidCollarError, MetricsError
from transcriber_metrics.scoring.intervals import (
    CollarRegion,
    apply_collar,
    collar_regions,
    merge_regions,
    overlap,
    subtract_regions,
)
from transcriber_metrics.segments import Segment


def test_overlap_ignores_speakers_and_clamps_at_zero() -> None:
    assert overlap(Segment("A", 0.0, 4.0), Segment("B", 3.0, 6.0)) == 1.0
    assert overlap(Segment("A", 0.0, 1.0), Segment("A", 2.0, 3.0)) == 0.0


def test_merge_regions_joins_overlapping_and_touching_spans() -> None:
    regions = [
        CollarRegion(5.0, 6.0),
        CollarRegion(0.0, 1.0),
        CollarRegion(1.0, 2.0),
        CollarRegion(0.5, 1.5),
    ]

    assert merge_regions(regions) == [CollarRegion(0.0, 2.0), CollarRegion(5.0, 6.0)]


def test_merge_regions_handles_empty_input() -> None:
    assert merge_regions([]) == []


def test_collar_regions_use_distinct_reference_boundaries() -> None:
    reference = [Segment("A", 0.0, 2.0), Segment("B", 2.0, 5.0)]

    regions = collar_regions(reference, 0.5)

    assert regions == [
        CollarRegion(-0.5, 0.5),
        CollarRegion(1.5, 2.5),
        CollarRegion(4.5, 5.5),
    ]


def test_close_boundaries_merge_into_one_region() -> None:
    reference = [Segment("A", 0.0, 1.0), Segment("B", 1.2, 3.0)]

    regions = collar_regions(reference, 0.25)

    assert len(regions) == 3
    assert regions[1].start == pytest.approx(0.75)
    assert regions[1].end == pytest.approx(1.45)


def test_subtract_regions_splits_segment_around_region() -> None:
    pieces = subtract_regions(Segment("A", 0.0, 10.0), [CollarRegion(4.0, 6.0)])

    assert pieces == [Segment("A", 0.0, 4.0), Segment("A", 6.0, 10.0)]


def test_subtract_regions_can_remove_segment_entirely() -> None:
    assert subtract_regions(Segment("A", 1.0, 2.0), [CollarRegion(0.5, 2.5)]) == []


def test_subtract_regions_trims_both_edges() -> None:
    regions = [CollarRegion(-1.0, 1.0), CollarRegion(3.0, 5.0), CollarRegion(8.0, 9.0)]

    pieces = subtract_regions(Segment("B", 0.0, 4.0), regions)

    assert pieces == [Segment("B", 1.0, 3.0)]


def test_apply_collar_non_positive_returns_copies() -> None:
    reference = [Segment("A", 0.0, 1.0)]
    hypothesis = [Segment("B", 0.0, 1.0)]

    trimmed_ref, trimmed_hyp = apply_collar(reference, hypothesis, 0.0)

    assert trimmed_ref == reference and trimmed_ref is not reference
    assert trimmed_hyp == hypothesis and trimmed_hyp is not hypothesis
    assert apply_collar(reference, hypothesis, -1.0) == (reference, hypothesis)


def test_apply_collar_trims_hypothesis_with_reference_boundaries_only() -> None:
    reference = [Segment("A", 0.0, 4.0)]
    hypothesis = [Segment("X", 1.0, 3.0), Segment("Y", 3.5, 6.0)]

    trimmed_ref, trimmed_hyp = apply_collar(reference, hypothesis, 0.5)

    assert trimmed_ref == [Segment("A", 0.5, 3.5)]
    assert trimmed_hyp == [Segment("X", 1.0, 3.0), Segment("Y", 4.5, 6.0)]


def test_apply_collar_does_not_mutate_inputs(three_turn_reference: list[Segment]) -> None:
    original = list(three_turn_reference)

    trimmed_ref, _ = apply_collar(three_turn_reference, [], 0.25)

    assert three_turn_reference == original
    assert sum(segment.duration for segment in trimmed_ref) == pytest.approx(7.5 - 6 * 0.25)


@pytest.mark.parametrize("collar", [math.nan, math.inf, -math.inf])
def test_apply_collar_rejects_non_finite_collar(collar: float) -> None:
    reference = [Segment("A", 0.0, 5.0)]

    with pytest.raises(InvalidCollarError):
        apply_collar(reference, [], collar)
    assert issubclass(InvalidCollarError, MetricsError)
    assert issubclass(InvalidCollarError, ValueError)
