"""Speaker-labelled time segments consumed by the diarization scorers."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidSegmentError

__all__ = [
    "Segment",
    "speaker_id_for_label",
    "speaker_label_for_id",
]

_LETTER_COUNT = 26


def speaker_label_for_id(speaker_id: int) -> str | None:
    """Return ``"A"`` .. ``"Z"`` for ids in ``[0, 26)`` and ``None`` otherwise."""
    if 0 <= speaker_id < _LETTER_COUNT:
        return chr(ord("A") + speaker_id)
    return None


def speaker_id_for_label(label: str) -> int | None:
    """Invert :func:`speaker_label_for_id`; decimal labels map to their integer value."""
    if len(label) == 1 and "A" <= label <= "Z":
        return ord(label) - ord("A")
    digits = label[1:] if label.startswith("-") else label
    if label.isascii() and digits.isdigit():
        return int(label)
    return None


@dataclass(frozen=True, slots=True)
class Segment:
    """A half-open ``[start, end)`` span of speech attributed to one speaker."""

    speaker: str
    start: float
    end: float

    def __post_init__(self) -> None:
        if not isinstance(self.speaker, str) or not self.speaker:
            raise InvalidSegmentError(
                f"Segment speaker label must be a non-empty string: {self!r}"
            )
        try:
            finite = math.isfinite(self.start) and math.isfinite(self.end)
        except TypeError as exc:
            raise InvalidSegmentError(f"Segment times must be numbers: {self!r}") from exc
        if not finite:
            raise InvalidSegmentError(f"Segment times must be finite: {self!r}")
        if self.end < self.start:
            raise InvalidSegmentError(
                f"Segment end {self.end} precedes start {self.start} for speaker {self.speaker!r}."
            )

    @classmethod
    def from_speaker_id(cls, speaker_id: int, start: float, end: float) -> Segment:
        """Build a segment whose label is derived from a numeric speaker id."""
        label = speaker_label_for_id(speaker_id)
        return cls(label if label is not None else str(speaker_id), float(start), float(end))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Segment:
        """Build a segment from an already-parsed mapping.

        Accepts either a ``speaker`` label or a numeric ``speaker_id``.
        """
        try:
            start = float(payload["start"])
            end = float(payload["end"])
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidSegmentError(
                f"Segment payload needs numeric start/end: {payload!r}"
            ) from exc

        speaker = payload.get("speaker")
        if speaker is not None:
            return cls(str(speaker), start, end)
        speaker_id = payload.get("speaker_id")
        if isinstance(speaker_id, int) and not isinstance(speaker_id, bool):
            return cls.from_speaker_id(speaker_id, start, end)
        raise InvalidSegmentError(f"Segment payload needs a speaker or speaker_id: {payload!r}")

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def speaker_id(self) -> int | None:
        """Numeric id derived from the label, or ``None`` when it has no numeric form."""
        return speaker_id_for_label(self.speaker)

    def with_span(self, start: float, end: float) -> Segment:
        """Return a copy of this segment covering ``[start, end)``."""
        return Segment(self.speaker, start, end)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the segment."""
        return {"speaker": self.speaker, "start": self.start, "end": self.end}
