"""Tests for WER scoring."""

from __future__ import annotations

import pytest

from transcriber_metrics.scoring.wer import EditCounts, calculate_wer, edit_counts, tokenize


def test_tokenize_lowercases_and_splits_on_punctuation() -> None:
    assert tokenize("Hello, world!") == ["hello", "world"]
    assert tokenize("  don't\tstop...now ") == ["don", "t", "stop", "now"]
    assert tokenize("?!") == []


def test_perfect_match() -> None:
    text = "the quick brown fox jumps over the lazy dog"

    result = calculate_wer(text, text)

    assert result.wer == 0.0
    assert result.accuracy == 1.0
    assert (result.substitutions, result.deletions, result.insertions) == (0, 0, 0)
    assert result.total_words == 9


def test_substitutions_only() -> None:
    result = calculate_wer("the quick brown fox jumps", "the slow brown dog runs")

    assert result.substitutions == 3
    assert result.deletions == 0
    assert result.insertions == 0
    assert result.total_words == 5
    assert result.wer == 0.6
    assert result.accuracy == pytest.approx(0.4)


def test_deletions_only() -> None:
    result = calculate_wer(
        "the quick brown fox jumps over the lazy dog", "the brown fox jumps the dog"
    )

    assert (result.substitutions, result.deletions, result.insertions) == (0, 3, 0)
    assert result.wer == pytest.approx(1 / 3)


def test_insertions_only() -> None:
    result = calculate_wer("the fox jumps", "the quick brown fox jumps over")

    assert (result.substitutions, result.deletions, result.insertions) == (0, 0, 3)
    assert result.wer == 1.0
    assert result.accuracy == 0.0


def test_mixed_errors_total() -> None:
    result = calculate_wer("hello world how are you", "hi world what you doing")

    assert result.errors == 4
    assert result.total_words == 5
    assert result.wer == 0.8


def test_wer_can_exceed_one() -> None:
    result = calculate_wer("hi", "oh hi there friend")

    assert result.insertions == 3
    assert result.wer == 3.0
    assert result.accuracy == 0.0


def test_case_and_punctuation_insensitive() -> None:
    result = calculate_wer("Hello, world! How are you?", "Hello world How are you")

    assert result.wer == 0.0
    assert result.total_words == 5
    assert calculate_wer("Hello World", "hello world").errors == 0


def test_empty_hypothesis_is_all_deletions() -> None:
    result = calculate_wer("hello world", "")

    assert (result.substitutions, result.deletions, result.insertions) == (0, 2, 0)
    assert result.total_words == 2
    assert result.wer == 1.0


def test_empty_reference_reports_zero_wer() -> None:
    result = calculate_wer("", "hello world")

    assert result.insertions == 2
    assert result.total_words == 0
    assert result.wer == 0.0


def test_both_empty() -> None:
    assert calculate_wer("", "   ").to_dict() == {
        "wer": 0.0,
        "accuracy": 1.0,
        "substitutions": 0,
        "deletions": 0,
        "insertions": 0,
        "total_words": 0,
    }


def test_word_lists_are_used_as_given() -> None:
    result = calculate_wer(["the", "quick", "brown", "fox"], ["the", "fast", "brown", "dog"])

    assert result.substitutions == 2
    assert result.total_words == 4
    assert result.wer == 0.5


def test_word_lists_compare_case_insensitively() -> None:
    assert calculate_wer(["Hello", "World"], ["hello", "WORLD"]).errors == 0


def test_substitution_preferred_on_ties() -> None:
    # "a b" -> "b c" can be one deletion plus one insertion or two substitutions.
    assert edit_counts(["a", "b"], ["b", "c"]) == EditCounts(2, 2, 0, 0)


def test_shorter_hypothesis_substitutes_before_deleting() -> None:
    assert edit_counts(["a", "b", "c"], ["x"]) == EditCounts(3, 1, 2, 0)


def test_calculate_wer_is_pure() -> None:
    first = calculate_wer("one two three", "one too three four")
    second = calculate_wer("one two three", "one too three four")

    assert first == second
