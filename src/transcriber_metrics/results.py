"""Immutable result records returned by the scorers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "DERComponents",
    "DiarizationEvaluation",
    "JERResult",
    "WERComponents",
]


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


@dataclass(frozen=True, slots=True)
class DERComponents:
    """Durations (seconds) accumulated while scoring diarization output."""

    confusion: float = 0.0
    false_alarm: float = 0.0
    missed_detection: float = 0.0
    total_duration: float = 0.0

    @property
    def error_duration(self) -> float:
        return self.confusion + self.false_alarm + self.missed_detection

    @property
    def der(self) -> float:
        """Diarization error rate; ``0.0`` when there is no reference speech."""
        return _ratio(self.error_duration, self.total_duration)

    @property
    def confusion_rate(self) -> float:
        return _ratio(self.confusion, self.total_duration)

    @property
    def false_alarm_rate(self) -> float:
        return _ratio(self.false_alarm, self.total_duration)

    @property
    def missed_detection_rate(self) -> float:
        return _ratio(self.missed_detection, self.total_duration)

    def to_dict(self) -> dict[str, Any]:
        return {
            "der": self.der,
            "confusion": self.confusion,
            "false_alarm": self.false_alarm,
            "missed_detection": self.missed_detection,
            "total_duration": self.total_duration,
        }


@dataclass(frozen=True, slots=True)
class WERComponents:
    """Edit operation counts from aligning a hypothesis transcript to its reference."""

    substitutions: int = 0
    deletions: int = 0
    insertions: int = 0
    total_words: int = 0

    @property
    def errors(self) -> int:
        return self.substitutions + self.deletions + self.insertions

    @property
    def wer(self) -> float:
        """Word error rate; ``0.0`` when the reference has no words."""
        return _ratio(self.errors, self.total_words)

    @property
    def accuracy(self) -> float:
        return max(0.0, 1.0 - self.wer)

    def to_dict(self) -> dict[str, Any]:
        return {
            "wer": self.wer,
            "accuracy": self.accuracy,
            "substitutions": self.substitutions,
            "deletions": self.deletions,
            "insertions": self.insertions,
            "total_words": self.total_words,
        }


@dataclass(frozen=True, slots=True)
class JERResult:
    """Label-agnostic overlap between reference and hypothesis speech."""

    intersection: float
    union: float

    @property
    def jer(self) -> float:
        """Jaccard error rate; ``1.0`` when neither side contains speech."""
        if self.union <= 0:
            return 1.0
        return 1.0 - self.intersection / self.union

    def to_dict(self) -> dict[str, Any]:
        return {"jer": self.jer, "intersection": self.intersection, "union": self.union}


@dataclass(frozen=True, slots=True)
class DiarizationEvaluation:
    """DER and JER computed over the same pair of annotations."""

    der: DERComponents
    jer: JERResult

    def to_dict(self) -> dict[str, Any]:
        return {"der": self.der.to_dict(), "jer": self.jer.to_dict()}
