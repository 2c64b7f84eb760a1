"""Global pytest fixtures for Transcriber Metrics."""

from __future__ import annotations

import pytest

from transcriber_metrics.segments import Segment


@pytest.fixture()
def three_turn_reference() -> list[Segment]:
    """Two speakers alternating over 7.5 seconds."""
    return [
        Segment("A", 0.0, 2.3),
        Segment("B", 2.3, 5.0),
        Segment("A", 5.0, 7.5),
    ]


@pytest.fixture()
def overlap_reference() -> list[Segment]:
    return [
        Segment("C", 0, 5),
        Segment("D", 5, 9),
        Segment("A", 10, 14),
        Segment("D", 14, 15),
        Segment("C", 17, 20),
        Segment("B", 22, 25),
    ]


@pytest.fixture()
def overlap_hypothesis() -> list[Segment]:
    return [
        Segment("C", 0, 8),
        Segment("A", 11, 15),
        Segment("C", 17, 21),
        Segment("B", 23, 25),
    ]
