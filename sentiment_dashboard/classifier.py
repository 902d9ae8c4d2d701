"""Sentiment classifier collaborators that produce four-way score vectors."""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict, Iterable, Mapping, Protocol

import requests

from .scoring import SentimentScore

logger = logging.getLogger(__name__)

_SENTIMENT_CLASSES = ("positive", "negative", "neutral", "mixed")

DEFAULT_LABEL_MAP: Dict[str, str] = {
    "positive": "positive",
    "pos": "positive",
    "negative": "negative",
    "neg": "negative",
    "neutral": "neutral",
    "neu": "neutral",
    "mixed": "mixed",
}


class ClassifierError(RuntimeError):
    """Raised when a classifier backend fails to produce a score."""


class SentimentClassifier(Protocol):
    def classify(self, text: str) -> SentimentScore:
        ...


def scores_from_labels(
    results: Iterable[Mapping[str, Any]],
    label_map: Mapping[str, str] | None = None,
) -> SentimentScore:
    """Fold ``[{"label": ..., "score": ...}, ...]`` pipeline output into a score.

    Labels missing from the map are skipped; classes the model never reports
    stay at zero.
    """

    mapping = {key.lower(): value for key, value in DEFAULT_LABEL_MAP.items()}
    for key, value in (label_map or {}).items():
        mapping[str(key).lower()] = value
    totals = {name: 0.0 for name in _SENTIMENT_CLASSES}
    for item in results:
        label = str(item.get("label", "")).strip().lower()
        target = mapping.get(label)
        if target not in totals:
            logger.debug("Ignoring unmapped sentiment label %r", label)
            continue
        try:
            totals[target] += float(item.get("score", 0.0))
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric score for label %r", label)
    return SentimentScore(**totals)


class HuggingFaceSentimentClassifier:
    """Score text with a Hugging Face text-classification model."""

    def __init__(
        self,
        model_id: str = "cardiffnlp/twitter-roberta-base-sentiment-latest",
        *,
        label_map: Mapping[str, str] | None = None,
        device: str | int | None = None,
        max_chars: int = 512,
        max_tokens: int = 512,
        pipeline_factory=None,
    ) -> None:
        if pipeline_factory is None:
            from transformers import pipeline

            pipeline_factory = pipeline

        kwargs: Dict[str, Any] = {"model": model_id, "tokenizer": model_id}
        if device is not None:
            kwargs["device"] = device
        self._pipeline = pipeline_factory("text-classification", **kwargs)
        self.model_id = model_id
        self.label_map = dict(label_map or {})
        self.max_chars = max(1, max_chars)
        self.max_tokens = max(1, max_tokens)

    def classify(self, text: str) -> SentimentScore:
        if not text.strip():
            raise ValueError("text must not be empty")
        try:
            raw = self._pipeline(
                text[: self.max_chars],
                top_k=None,
                truncation=True,
                max_length=self.max_tokens,
            )
        except Exception as exc:
            raise ClassifierError(f"{self.model_id} failed: {exc}") from exc
        # Batched calls nest one list per input.
        if raw and isinstance(raw[0], list):
            raw = raw[0]
        if not raw:
            raise ClassifierError(f"{self.model_id} returned no labels")
        logger.debug("Pipeline labels for %s: %s", self.model_id, raw)
        return scores_from_labels(raw, self.label_map)


class HTTPSentimentClassifier:
    """Score text with a cloud endpoint returning Comprehend-style payloads.

    The endpoint receives ``{"Text": ..., "LanguageCode": ...}`` and must reply
    with a JSON object holding a ``SentimentScore`` mapping.
    """

    def __init__(
        self,
        endpoint: str | None = None,
        *,
        api_key: str | None = None,
        language_code: str = "en",
        request_timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint or os.environ.get("SENTIMENT_ENDPOINT")
        self.api_key = api_key or os.environ.get("SENTIMENT_API_KEY")
        missing = [
            name
            for name, value in (
                ("SENTIMENT_ENDPOINT", self.endpoint),
                ("SENTIMENT_API_KEY", self.api_key),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                "Sentiment service not properly configured. Missing: " + ", ".join(missing)
            )
        self.language_code = language_code
        self.request_timeout = request_timeout
        self._session = session or requests.Session()

    def classify(self, text: str) -> SentimentScore:
        if not text.strip():
            raise ValueError("text must not be empty")
        logger.debug("POST %s (%d chars)", self.endpoint, len(text))
        try:
            response = self._session.post(
                self.endpoint,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                json={"Text": text, "LanguageCode": self.language_code},
                timeout=self.request_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.JSONDecodeError as exc:
            raise ClassifierError("sentiment service returned invalid JSON") from exc
        except requests.RequestException as exc:
            raise ClassifierError(str(exc)) from exc
        scores = payload.get("SentimentScore") if isinstance(payload, Mapping) else None
        if not isinstance(scores, Mapping):
            raise ClassifierError("sentiment service returned no SentimentScore")
        try:
            return SentimentScore.from_payload(scores)
        except (TypeError, ValueError) as exc:
            raise ClassifierError(f"malformed SentimentScore: {scores!r}") from exc


_WORD_RE = re.compile(r"[a-z']+")

_POSITIVE_CUES = ("love", "great", "good", "happy", "amazing", "excellent", "like", "wonderful")
_NEGATIVE_CUES = ("hate", "bad", "awful", "terrible", "sad", "angry", "worst", "dislike")
_MIXED_CUES = ("but", "however", "although", "though")


class KeywordSentimentClassifier:
    """Offline classifier counting cue words, for debugging without a model."""

    def __init__(
        self,
        *,
        positive_words: Iterable[str] | None = None,
        negative_words: Iterable[str] | None = None,
        mixed_words: Iterable[str] | None = None,
    ) -> None:
        self.positive_words = frozenset(_POSITIVE_CUES if positive_words is None else positive_words)
        self.negative_words = frozenset(_NEGATIVE_CUES if negative_words is None else negative_words)
        self.mixed_words = frozenset(_MIXED_CUES if mixed_words is None else mixed_words)

    def classify(self, text: str) -> SentimentScore:
        words = _WORD_RE.findall(text.lower())
        positive = sum(word in self.positive_words for word in words)
        negative = sum(word in self.negative_words for word in words)
        mixed = sum(word in self.mixed_words for word in words) if positive and negative else 0
        total = positive + negative + mixed
        if total == 0:
            return SentimentScore(neutral=1.0)
        # Reserve a share for neutral so a single cue word is not a certainty.
        spread = total + 1
        return SentimentScore(
            positive=positive / spread,
            negative=negative / spread,
            neutral=1 / spread,
            mixed=mixed / spread,
        )
