"""Interval arithmetic used to forgive boundary errors around reference turns."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..exceptions import InvalidCollarError
from ..segments import Segment
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "CollarRegion",
    "apply_collar",
    "collar_regions",
    "merge_regions",
    "overlap",
    "subtract_regions",
]


@dataclass(frozen=True, slots=True, order=True)
class CollarRegion:
    """A ``[start, end]`` span excluded from scoring."""

    start: float
    end: float


def overlap(first: Segment, second: Segment) -> float:
    """Return the duration shared by two segments, ignoring speaker labels."""
    return max(0.0, min(first.end, second.end) - max(first.start, second.start))


def merge_regions(regions: Iterable[CollarRegion]) -> list[CollarRegion]:
    """Collapse overlapping or touching regions into a sorted, disjoint list."""
    merged: list[CollarRegion] = []
    current: CollarRegion | None = None
    for region in sorted(regions):
        if current is None:
            current = region
        elif region.start <= current.end:
            current = CollarRegion(current.start, max(current.end, region.end))
        else:
            merged.append(current)
            current = region
    if current is not None:
        merged.append(current)
    return merged


def collar_regions(reference: Sequence[Segment], collar: float) -> list[CollarRegion]:
    """Build the merged collar regions around every distinct reference boundary."""
    boundaries = {segment.start for segment in reference} | {segment.end for segment in reference}
    return merge_regions(
        CollarRegion(boundary - collar, boundary + collar) for boundary in boundaries
    )


def subtract_regions(segment: Segment, regions: Sequence[CollarRegion]) -> list[Segment]:
    """Return the pieces of ``segment`` lying outside every region, in time order."""
    pieces: list[tuple[float, float]] = [(segment.start, segment.end)]
    for region in regions:
        remaining: list[tuple[float, float]] = []
        for start, end in pieces:
            if start < region.start:
                remaining.append((start, min(end, region.start)))
            if end > region.end:
                remaining.append((max(start, region.end), end))
        pieces = remaining
        if not pieces:
            break
    return [segment.with_span(start, end) for start, end in pieces if end > start]


def apply_collar(
    reference: Sequence[Segment],
    hypothesis: Sequence[Segment],
    collar: float,
) -> tuple[list[Segment], list[Segment]]:
    """Remove ``collar`` seconds either side of each reference boundary from both sets.

    A non-positive collar leaves both sets untouched. The input sequences are never
    modified; fresh lists are always returned. NaN or infinite collars raise
    :class:`InvalidCollarError`.
    """

    if not math.isfinite(collar):
        raise InvalidCollarError(f"Collar must be a finite number of seconds, got {collar!r}.")
    if collar <= 0:
        return list(reference), list(hypothesis)

    regions = collar_regions(reference, collar)
    LOGGER.debug("Collar %.3fs produced %d scoring exclusion regions", collar, len(regions))

    trimmed_reference = [
        piece for segment in reference for piece in subtract_regions(segment, regions)
    ]
    trimmed_hypothesis = [
        piece for segment in hypothesis for piece in subtract_regions(segment, regions)
    ]
    return trimmed_reference, trimmed_hypothesis
