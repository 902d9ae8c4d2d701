"""Core modules for the sentiment analysis dashboard."""

from .scoring import (
    SENTIMENT_WEIGHTS,
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
from .classifier import (
    ClassifierError,
    HTTPSentimentClassifier,
    HuggingFaceSentimentClassifier,
    KeywordSentimentClassifier,
    SentimentClassifier,
    scores_from_labels,
)
from .profiles import (
    ClassifierProfile,
    apply_profile_defaults,
    describe_classifier_profiles,
    get_classifier_profile,
    list_classifier_profiles,
)
from .dashboard import SentimentDashboard, render_entries, render_entry

__all__ = [
    "SENTIMENT_WEIGHTS",
    "SentimentCategory",
    "SentimentEntry",
    "SentimentScore",
    "categorize_weight",
    "classify",
    "color_of",
    "emoji_of",
    "presentation",
    "rank",
    "sentiment_color",
    "sentiment_emoji",
    "sort_by_sentiment",
    "weigh",
    "ClassifierError",
    "SentimentClassifier",
    "HuggingFaceSentimentClassifier",
    "HTTPSentimentClassifier",
    "KeywordSentimentClassifier",
    "scores_from_labels",
    "ClassifierProfile",
    "list_classifier_profiles",
    "get_classifier_profile",
    "describe_classifier_profiles",
    "apply_profile_defaults",
    "SentimentDashboard",
    "render_entry",
    "render_entries",
]
