from __future__ import annotations

import pytest
from sentiment_dashboard.scoring import (
    _CATEGORY_THRESHOLDS,
    SentimentCategory,
    SentimentEntry,
    SentimentScore,
    categorize_weight,
    classify,
    color_of,
    emoji_of,
    presentation,
    rank,
    sentiment_color,
    sentiment_emoji,
    sort_by_sentiment,
    weigh,
)


def _entry(text: str, **scores: float) -> SentimentEntry:
    return SentimentEntry(text=text, score=SentimentScore(**scores))


def test_weigh_ignores_neutral_and_discounts_mixed() -> None:
    score = SentimentScore(positive=0.9, negative=0.05, neutral=0.05, mixed=0.0)
    assert weigh(score) == pytest.approx(0.85)
    assert weigh(SentimentScore(neutral=1.0)) == 0.0
    assert weigh(SentimentScore(mixed=1.0)) == pytest.approx(-0.5)


def test_weigh_accepts_unnormalised_vectors() -> None:
    assert weigh(SentimentScore(positive=2.0, negative=-1.0)) == pytest.approx(3.0)


def test_weigh_missing_score_is_zero() -> None:
    assert weigh(None) == 0.0


def test_identical_vectors_weigh_identically() -> None:
    a = SentimentScore(positive=0.5, negative=0.2, neutral=0.2, mixed=0.1)
    b = SentimentScore(positive=0.5, negative=0.2, neutral=0.2, mixed=0.1)
    assert weigh(a) == weigh(b)


def test_from_payload_defaults_missing_classes() -> None:
    score = SentimentScore.from_payload({"Positive": 0.7, "negative": 0.1, "Mixed": None})
    assert score == SentimentScore(positive=0.7, negative=0.1, neutral=0.0, mixed=0.0)
    assert score.to_payload()["Positive"] == 0.7


def test_rank_orders_positive_neutral_negative() -> None:
    negative = _entry("awful", positive=0.1, negative=0.8, neutral=0.1, mixed=0.0)
    neutral = _entry("fine", positive=0.2, negative=0.2, neutral=0.5, mixed=0.1)
    positive = _entry("great", positive=0.8, negative=0.1, neutral=0.1, mixed=0.0)

    ranked = rank([negative, neutral, positive])

    assert [entry.text for entry in ranked] == ["great", "fine", "awful"]


def test_rank_returns_new_list_without_mutating_input() -> None:
    entries = [
        _entry("low", negative=1.0),
        _entry("high", positive=1.0),
    ]
    original = list(entries)
    ranked = rank(entries)
    assert ranked is not entries
    assert entries == original
    assert ranked[0].text == "high"


@pytest.mark.parametrize("entries", [None, [], ()])
def test_rank_empty_or_missing_input(entries) -> None:
    assert rank(entries) == []


def test_rank_keeps_duplicate_scores() -> None:
    first = _entry("first", positive=0.5, negative=0.2, neutral=0.2, mixed=0.1)
    second = _entry("second", positive=0.5, negative=0.2, neutral=0.2, mixed=0.1)
    ranked = rank([first, second])
    assert sorted(entry.text for entry in ranked) == ["first", "second"]


def test_rank_preserves_entries_without_scores() -> None:
    entries = [
        SentimentEntry(text="unscored"),
        _entry("happy", positive=0.9, neutral=0.1),
        SentimentEntry(text="also unscored", score=None),
        _entry("sad", negative=0.9, neutral=0.1),
    ]
    ranked = rank(entries)
    assert len(ranked) == len(entries)
    assert {entry.text for entry in ranked} == {entry.text for entry in entries}


def test_rank_is_idempotent() -> None:
    entries = [
        _entry("a", positive=0.3, negative=0.6),
        _entry("b", positive=0.9),
        _entry("c", neutral=1.0),
        _entry("d", mixed=0.8, positive=0.2),
    ]
    once = rank(entries)
    twice = rank(once)
    assert [e.text for e in twice] == [e.text for e in once]
    weights = [weigh(e.score) for e in twice]
    assert weights == sorted(weights, reverse=True)


def test_sort_by_sentiment_alias() -> None:
    assert sort_by_sentiment is rank


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        (0.85, SentimentCategory.STRONGLY_POSITIVE),
        (0.5, SentimentCategory.MILDLY_POSITIVE),
        (0.3, SentimentCategory.MILDLY_POSITIVE),
        (0.2, SentimentCategory.NEUTRAL),
        (0.0, SentimentCategory.NEUTRAL),
        (-0.2, SentimentCategory.NEUTRAL),
        (-0.35, SentimentCategory.MILDLY_NEGATIVE),
        (-0.5, SentimentCategory.MILDLY_NEGATIVE),
        (-0.51, SentimentCategory.STRONGLY_NEGATIVE),
    ],
)
def test_categorize_weight_boundaries_are_exclusive(weight, expected) -> None:
    assert categorize_weight(weight) is expected


def test_classify_exact_boundaries_from_vectors() -> None:
    assert classify(SentimentScore(positive=0.5, neutral=0.5)) is SentimentCategory.MILDLY_POSITIVE
    assert classify(SentimentScore(positive=0.2, neutral=0.8)) is SentimentCategory.NEUTRAL
    assert classify(SentimentScore(negative=0.5, neutral=0.5)) is SentimentCategory.MILDLY_NEGATIVE
    assert classify(SentimentScore(negative=0.2, neutral=0.8)) is SentimentCategory.NEUTRAL


def test_strongly_positive_vector_presentation() -> None:
    score = SentimentScore(mixed=0.0, positive=0.9, neutral=0.05, negative=0.05)
    assert classify(score) is SentimentCategory.STRONGLY_POSITIVE
    assert sentiment_color(score) == "text-green-600"
    assert sentiment_emoji(score) == "😄"


def test_mildly_negative_vector_presentation() -> None:
    score = SentimentScore(mixed=0.1, positive=0.1, neutral=0.4, negative=0.4)
    assert weigh(score) == pytest.approx(-0.35)
    assert presentation(score) == ("text-red-400", "😕")


def test_missing_score_is_neutral() -> None:
    assert classify(None) is SentimentCategory.NEUTRAL
    assert presentation(None) == ("text-gray-600", "😐")


def test_every_category_has_color_and_emoji() -> None:
    expected = {
        SentimentCategory.STRONGLY_POSITIVE: ("text-green-600", "😄"),
        SentimentCategory.MILDLY_POSITIVE: ("text-green-400", "🙂"),
        SentimentCategory.NEUTRAL: ("text-gray-600", "😐"),
        SentimentCategory.MILDLY_NEGATIVE: ("text-red-400", "😕"),
        SentimentCategory.STRONGLY_NEGATIVE: ("text-red-600", "😠"),
    }
    for category, (color, emoji) in expected.items():
        assert color_of(category) == color
        assert emoji_of(category) == emoji


def test_color_and_emoji_agree_across_range() -> None:
    emoji_for_color = {
        "text-green-600": "😄",
        "text-green-400": "🙂",
        "text-gray-600": "😐",
        "text-red-400": "😕",
        "text-red-600": "😠",
    }
    for step in range(-20, 21):
        positive = max(0.0, step / 20)
        negative = max(0.0, -step / 20)
        score = SentimentScore(positive=positive, negative=negative)
        assert emoji_for_color[sentiment_color(score)] == sentiment_emoji(score)


def test_threshold_rows_hold_comparison_callables() -> None:
    for beyond, bound, category in _CATEGORY_THRESHOLDS:
        assert callable(beyond)
        assert beyond(bound, bound) is False
        assert categorize_weight(bound) is not category
