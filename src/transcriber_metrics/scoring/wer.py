"""WER (Word Error Rate) scoring."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence
from typing import NamedTuple

from ..results import WERComponents
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

__all__ = ["EditCounts", "Text", "calculate_wer", "edit_counts", "tokenize"]

Text = str | Sequence[str]


class EditCounts(NamedTuple):
    """One cell of the alignment table."""

    distance: int
    substitutions: int
    deletions: int
    insertions: int

    def substitute(self) -> EditCounts:
        return self._replace(distance=self.distance + 1, substitutions=self.substitutions + 1)

    def delete(self) -> EditCounts:
        return self._replace(distance=self.distance + 1, deletions=self.deletions + 1)

    def insert(self) -> EditCounts:
        return self._replace(distance=self.distance + 1, insertions=self.insertions + 1)


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def tokenize(text: str) -> list[str]:
    """Lowercase ``text`` and split it on whitespace and punctuation.

    >>> tokenize("Hello, world!")
    ['hello', 'world']
    """
    tokens: list[str] = []
    for chunk in text.lower().split():
        current: list[str] = []
        for char in chunk:
            if _is_punctuation(char):
                if current:
                    tokens.append("".join(current))
                    current = []
            else:
                current.append(char)
        if current:
            tokens.append("".join(current))
    return tokens


def _as_words(text: Text) -> list[str]:
    if isinstance(text, str):
        return tokenize(text)
    return list(text)


def edit_counts(reference: Sequence[str], hypothesis: Sequence[str]) -> EditCounts:
    """Levenshtein alignment of two word sequences, tracking operation types.

    Words are compared case-insensitively. When several operations reach the same
    distance, substitution is preferred over deletion, and deletion over insertion.
    """
    n, m = len(reference), len(hypothesis)
    ref = [word.lower() for word in reference]
    hyp = [word.lower() for word in hypothesis]

    # dp[i][j] aligns the first i reference words with the first j hypothesis words
    dp = [[EditCounts(0, 0, 0, 0)] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = EditCounts(i, 0, i, 0)
    for j in range(m + 1):
        dp[0][j] = EditCounts(j, 0, 0, j)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if ref[i - 1] == hyp[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
                continue

            best = dp[i - 1][j - 1].substitute()
            deletion = dp[i - 1][j].delete()
            insertion = dp[i][j - 1].insert()
            if deletion.distance < best.distance:
                best = deletion
            if insertion.distance < best.distance:
                best = insertion
            dp[i][j] = best

    return dp[n][m]


def calculate_wer(reference: Text, hypothesis: Text) -> WERComponents:
    """Compute Word Error Rate components.

    WER = (S + D + I) / N
    where:
        S = substitutions
        D = deletions
        I = insertions
        N = number of words in reference

    Args:
        reference: Reference text, or an already tokenized word list
        hypothesis: Hypothesis text, or an already tokenized word list

    Returns:
        WERComponents with operation counts; ``wer`` is 0 for an empty reference
    """
    ref_words = _as_words(reference)
    hyp_words = _as_words(hypothesis)

    if not ref_words and not hyp_words:
        return WERComponents()
    if not ref_words:
        return WERComponents(insertions=len(hyp_words), total_words=0)
    if not hyp_words:
        return WERComponents(deletions=len(ref_words), total_words=len(ref_words))

    counts = edit_counts(ref_words, hyp_words)
    result = WERComponents(
        substitutions=counts.substitutions,
        deletions=counts.deletions,
        insertions=counts.insertions,
        total_words=len(ref_words),
    )
    LOGGER.debug(
        "WER %.4f over %d reference words (S=%d D=%d I=%d)",
        result.wer,
        result.total_words,
        result.substitutions,
        result.deletions,
        result.insertions,
    )
    return result
