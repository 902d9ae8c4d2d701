"""Dashboard session that analyzes text and keeps entries ranked."""

from __future__ import annotations

import logging
from typing import List, Sequence

from .classifier import ClassifierError, SentimentClassifier
from .scoring import SentimentEntry, SentimentScore, presentation, rank

logger = logging.getLogger(__name__)

_ANSI_COLORS = {
    "text-green-600": "\033[1;32m",
    "text-green-400": "\033[32m",
    "text-gray-600": "\033[90m",
    "text-red-400": "\033[31m",
    "text-red-600": "\033[1;31m",
}
_ANSI_RESET = "\033[0m"


class SentimentDashboard:
    """Holds analyzed entries in display order, most positive first."""

    def __init__(self, classifier: SentimentClassifier) -> None:
        self.classifier = classifier
        self._entries: List[SentimentEntry] = []
        self.last_error: str | None = None

    @property
    def entries(self) -> List[SentimentEntry]:
        return list(self._entries)

    def analyze(self, text: str) -> SentimentEntry | None:
        """Classify ``text`` and insert it into the ranked board.

        Blank input is ignored. A classifier failure is recorded in
        ``last_error`` and leaves the board untouched.
        """

        if not text.strip():
            return None
        self.last_error = None
        try:
            score = self.classifier.classify(text)
        except ClassifierError as exc:
            logger.exception("Sentiment analysis failed for %r", text[:80])
            self.last_error = f"Failed to analyze sentiment: {exc}"
            return None
        entry = SentimentEntry(text=text, score=score)
        self._entries = rank([*self._entries, entry])
        return entry

    def add_entry(self, text: str, score: SentimentScore | None = None) -> SentimentEntry:
        """Insert an entry whose score was computed elsewhere."""

        entry = SentimentEntry(text=text, score=score)
        self._entries = rank([*self._entries, entry])
        return entry

    def clear(self) -> None:
        self._entries = []
        self.last_error = None

    def render(self, *, use_color: bool = False) -> str:
        return render_entries(self._entries, use_color=use_color)


def _percent(value: float) -> str:
    return f"{value * 100:.1f}%"


def render_entry(entry: SentimentEntry, *, use_color: bool = False) -> str:
    """Format an entry as its text followed by an emoji and score breakdown."""

    color, emoji = presentation(entry.score)
    if entry.score is None:
        detail = "(no sentiment available)"
    else:
        detail = (
            f"Positive: {_percent(entry.score.positive)} | "
            f"Negative: {_percent(entry.score.negative)} | "
            f"Neutral: {_percent(entry.score.neutral)} | "
            f"Mixed: {_percent(entry.score.mixed)}"
        )
    badge = f"{emoji} [{color}]"
    if use_color:
        badge = f"{_ANSI_COLORS.get(color, '')}{badge}{_ANSI_RESET}"
    return f"{entry.text}\n  {badge} {detail}"


def render_entries(entries: Sequence[SentimentEntry], *, use_color: bool = False) -> str:
    if not entries:
        return "No entries yet."
    blocks = [
        f"{index}. {render_entry(entry, use_color=use_color)}"
        for index, entry in enumerate(entries, start=1)
    ]
    return "\n".join(blocks)
