"""Service for the word cloud."""

from __future__ import annotations

from collections import Counter

from engage_app.constants.session_constants import (
    WORD_CLOUD_LIMIT,
    WORD_CLOUD_MAX_FONT_REM,
    WORD_CLOUD_MIN_FONT_REM,
)
from engage_app.core.errors import ValidationError
from engage_app.core.models import WordCloudEntry


class WordCloud:
    """Stores raw submissions; frequencies are recomputed on every read."""

    def __init__(self) -> None:
        self._words: list[str] = []

    def get_words(self) -> list[str]:
        return list(self._words)

    def submit_word(self, text: str) -> str:
        word = text.strip().lower()
        if not word:
            raise ValidationError("Word must not be empty.")
        self._words.append(word)
        return word

    def entries(self, limit: int = WORD_CLOUD_LIMIT) -> list[WordCloudEntry]:
        return build_word_cloud(self._words, limit)


def build_word_cloud(words: list[str], limit: int = WORD_CLOUD_LIMIT) -> list[WordCloudEntry]:
    """Count words, most frequent first; ties keep first-occurrence order."""
    counts = Counter(words)
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [WordCloudEntry(text=text, count=count) for text, count in ranked[:limit]]


def font_scale(count: int, max_count: int) -> float:
    """Font size in rem for an entry, scaled linearly against the top count."""
    if max_count <= 0:
        return WORD_CLOUD_MIN_FONT_REM
    span = WORD_CLOUD_MAX_FONT_REM - WORD_CLOUD_MIN_FONT_REM
    return WORD_CLOUD_MIN_FONT_REM + span * (count / max_count)
