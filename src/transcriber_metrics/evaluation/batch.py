"""Scoring of many evaluation clips with an aggregate summary."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..config.scoring_config import ScoringConfig
from ..exceptions import MetricsError
from ..results import DERComponents, WERComponents
from ..scoring.der import calculate_der
from ..scoring.wer import Text, calculate_wer
from ..segments import Segment
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "BatchReport",
    "BatchSummary",
    "ClipInput",
    "ClipScore",
    "SegmentLike",
    "score_batch",
    "score_clip",
]

SegmentLike = Segment | Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ClipInput:
    """Reference and hypothesis annotations for one evaluation clip."""

    clip_id: str
    reference_segments: Sequence[SegmentLike] = ()
    hypothesis_segments: Sequence[SegmentLike] = ()
    reference_text: Text | None = None
    hypothesis_text: Text | None = None


@dataclass(frozen=True, slots=True)
class ClipScore:
    """Scores for one clip; ``wer`` is ``None`` when no transcripts were supplied."""

    clip_id: str
    der: DERComponents
    wer: WERComponents | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"clip_id": self.clip_id, "der": self.der.to_dict()}
        if self.wer is not None:
            payload["wer"] = self.wer.to_dict()
        return payload


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Averages across clips plus error components pooled over all reference speech."""

    clip_count: int
    mean_der: float
    mean_wer: float | None
    confusion_rate: float
    false_alarm_rate: float
    missed_detection_rate: float
    total_duration: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "clip_count": self.clip_count,
            "mean_der": self.mean_der,
            "mean_wer": self.mean_wer,
            "confusion_rate": self.confusion_rate,
            "false_alarm_rate": self.false_alarm_rate,
            "missed_detection_rate": self.missed_detection_rate,
            "total_duration": self.total_duration,
        }


@dataclass(frozen=True, slots=True)
class BatchReport:
    """Per-clip scores in input order and the clips that could not be scored."""

    scores: tuple[ClipScore, ...]
    failures: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "failures", MappingProxyType(dict(self.failures)))

    def summary(self) -> BatchSummary:
        """Aggregate the scored clips."""
        clip_count = len(self.scores)
        if clip_count == 0:
            return BatchSummary(0, 0.0, None, 0.0, 0.0, 0.0, 0.0)

        pooled = DERComponents(
            confusion=sum(score.der.confusion for score in self.scores),
            false_alarm=sum(score.der.false_alarm for score in self.scores),
            missed_detection=sum(score.der.missed_detection for score in self.scores),
            total_duration=sum(score.der.total_duration for score in self.scores),
        )
        wers = [score.wer.wer for score in self.scores if score.wer is not None]

        return BatchSummary(
            clip_count=clip_count,
            mean_der=sum(score.der.der for score in self.scores) / clip_count,
            mean_wer=sum(wers) / len(wers) if wers else None,
            confusion_rate=pooled.confusion_rate,
            false_alarm_rate=pooled.false_alarm_rate,
            missed_detection_rate=pooled.missed_detection_rate,
            total_duration=pooled.total_duration,
        )


def score_clip(clip: ClipInput, config: ScoringConfig | None = None) -> ClipScore:
    """Score a single clip: DER always, WER when both transcripts are present."""
    config = config or ScoringConfig()
    reference = _as_segments(clip.reference_segments)
    hypothesis = _as_segments(clip.hypothesis_segments)
    der = calculate_der(reference, hypothesis, config.collar)

    wer: WERComponents | None = None
    if clip.reference_text is not None and clip.hypothesis_text is not None:
        wer = calculate_wer(clip.reference_text, clip.hypothesis_text)

    return ClipScore(clip_id=clip.clip_id, der=der, wer=wer)


def _as_segments(items: Sequence[SegmentLike]) -> list[Segment]:
    return [item if isinstance(item, Segment) else Segment.from_mapping(item) for item in items]


def _score_or_error(clip: ClipInput, config: ScoringConfig) -> ClipScore | MetricsError:
    try:
        return score_clip(clip, config)
    except MetricsError as exc:
        return exc


def score_batch(
    clips: Iterable[ClipInput],
    config: ScoringConfig | None = None,
    *,
    max_workers: int | None = None,
) -> BatchReport:
    """Score every clip independently.

    Args:
        clips: Clips to evaluate
        config: Shared scoring settings (collar, default worker count)
        max_workers: Thread count; falls back to ``config.max_workers``. ``None`` or 1
            scores sequentially.

    Returns:
        BatchReport with scores in input order. Clips that fail validation are
        logged and listed in ``failures`` instead of aborting the batch.
    """

    config = config or ScoringConfig()
    clip_list = list(clips)
    workers = max_workers if max_workers is not None else config.max_workers

    if workers and workers > 1 and len(clip_list) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            outcomes = list(pool.map(lambda clip: _score_or_error(clip, config), clip_list))
    else:
        outcomes = [_score_or_error(clip, config) for clip in clip_list]

    scores: list[ClipScore] = []
    failures: dict[str, str] = {}
    for clip, outcome in zip(clip_list, outcomes):
        if isinstance(outcome, MetricsError):
            LOGGER.error("Failed to score %s: %s", clip.clip_id, outcome)
            failures[clip.clip_id] = str(outcome)
            continue
        scores.append(outcome)
        wer_text = f"{outcome.wer.wer:.3f}" if outcome.wer is not None else "N/A"
        LOGGER.info("%s: DER = %.3f, WER = %s", clip.clip_id, outcome.der.der, wer_text)

    return BatchReport(scores=tuple(scores), failures=failures)
