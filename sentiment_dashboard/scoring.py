"""Weighted sentiment scoring, ranking and presentation buckets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from operator import gt, lt
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class SentimentScore:
    """Probability-like distribution over the four sentiment classes."""

    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0
    mixed: float = 0.0

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SentimentScore":
        """Build a score from a provider mapping such as ``{"Positive": 0.9, ...}``.

        Keys are matched case-insensitively and absent classes default to 0.
        """

        values = {str(key).lower(): value for key, value in payload.items()}
        return cls(
            positive=float(values.get("positive") or 0.0),
            negative=float(values.get("negative") or 0.0),
            neutral=float(values.get("neutral") or 0.0),
            mixed=float(values.get("mixed") or 0.0),
        )

    def to_payload(self) -> Dict[str, float]:
        return {
            "Positive": self.positive,
            "Negative": self.negative,
            "Neutral": self.neutral,
            "Mixed": self.mixed,
        }


@dataclass(frozen=True)
class SentimentEntry:
    text: str
    score: Optional[SentimentScore] = None


class SentimentCategory(Enum):
    STRONGLY_POSITIVE = "strongly_positive"
    MILDLY_POSITIVE = "mildly_positive"
    NEUTRAL = "neutral"
    MILDLY_NEGATIVE = "mildly_negative"
    STRONGLY_NEGATIVE = "strongly_negative"


SENTIMENT_WEIGHTS: Dict[str, float] = {
    "positive": 1.0,
    "negative": -1.0,
    "mixed": -0.5,
    "neutral": 0.0,
}

# Evaluated in order; the first matching row wins. All bounds are exclusive.
_CATEGORY_THRESHOLDS: Tuple[Tuple[Callable[[float, float], bool], float, SentimentCategory], ...] = (
    (gt, 0.5, SentimentCategory.STRONGLY_POSITIVE),
    (gt, 0.2, SentimentCategory.MILDLY_POSITIVE),
    (lt, -0.5, SentimentCategory.STRONGLY_NEGATIVE),
    (lt, -0.2, SentimentCategory.MILDLY_NEGATIVE),
)

_COLORS: Dict[SentimentCategory, str] = {
    SentimentCategory.STRONGLY_POSITIVE: "text-green-600",
    SentimentCategory.MILDLY_POSITIVE: "text-green-400",
    SentimentCategory.NEUTRAL: "text-gray-600",
    SentimentCategory.MILDLY_NEGATIVE: "text-red-400",
    SentimentCategory.STRONGLY_NEGATIVE: "text-red-600",
}

_EMOJIS: Dict[SentimentCategory, str] = {
    SentimentCategory.STRONGLY_POSITIVE: "😄",
    SentimentCategory.MILDLY_POSITIVE: "🙂",
    SentimentCategory.NEUTRAL: "😐",
    SentimentCategory.MILDLY_NEGATIVE: "😕",
    SentimentCategory.STRONGLY_NEGATIVE: "😠",
}


def weigh(score: SentimentScore | None) -> float:
    """Collapse a sentiment vector into a signed scalar.

    Neutral never contributes. Inputs are not validated, so malformed vectors
    may produce values outside ``[-1, 1]``. A missing vector weighs ``0.0``.
    """

    if score is None:
        return 0.0
    return (
        score.positive * SENTIMENT_WEIGHTS["positive"]
        + score.negative * SENTIMENT_WEIGHTS["negative"]
        + score.mixed * SENTIMENT_WEIGHTS["mixed"]
        + score.neutral * SENTIMENT_WEIGHTS["neutral"]
    )


def _compare_entries(a: SentimentEntry, b: SentimentEntry) -> float:
    if a.score is None or b.score is None:
        return 0
    return weigh(b.score) - weigh(a.score)


def rank(entries: Iterable[SentimentEntry] | None) -> List[SentimentEntry]:
    """Return a new list ordered from most positive to most negative.

    Entries without a score compare as ties against everything, so they are
    kept but have no enforced position.
    """

    if not entries:
        return []
    return sorted(entries, key=cmp_to_key(_compare_entries))


sort_by_sentiment = rank


def categorize_weight(weight: float) -> SentimentCategory:
    for beyond, bound, category in _CATEGORY_THRESHOLDS:
        if beyond(weight, bound):
            return category
    return SentimentCategory.NEUTRAL


def classify(score: SentimentScore | None) -> SentimentCategory:
    return categorize_weight(weigh(score))


def color_of(category: SentimentCategory) -> str:
    return _COLORS[category]


def emoji_of(category: SentimentCategory) -> str:
    return _EMOJIS[category]


def sentiment_color(score: SentimentScore | None) -> str:
    """Tailwind-style color class for a score; greener is more positive."""

    return color_of(classify(score))


def sentiment_emoji(score: SentimentScore | None) -> str:
    return emoji_of(classify(score))


def presentation(score: SentimentScore | None) -> Tuple[str, str]:
    """Return ``(color, emoji)`` from a single classification."""

    category = classify(score)
    return color_of(category), emoji_of(category)

