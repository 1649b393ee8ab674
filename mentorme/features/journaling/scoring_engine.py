"""
Journaling Quality Scoring Engine

Scores a user's journaling practice on three independent axes:
- Frequency: entries in the trailing 7 days (0..40)
- Depth: average word count over the trailing 30 days (10..40)
- Consistency: entries spread over distinct days (0 or 20)

Score = frequency + depth + consistency, always within 0..100. With no
entries in the trailing 30 days the score is 0.

The insight sentence may come from the summarizer (at most one call per
score); every failure falls back to the deterministic insight table.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import journals_since, newest_first
from mentorme.features.summarizer.service import Summarizer, SummaryTask, call_summarizer
from mentorme.models.base import as_utc
from mentorme.models.journal import JournalEntry
from mentorme.models.mentor import (
    JournalingFrequency,
    JournalingMetrics,
    JournalingQuality,
)


class JournalingQualityScorer:
    """Journaling metrics with an optional summarizer-written insight."""

    RECENT_DAYS = 7
    SAMPLE_DAYS = 30

    def __init__(self, summarizer: Optional[Summarizer] = None, timeout_seconds: float = 8.0):
        self.summarizer = summarizer
        self.timeout_seconds = timeout_seconds

    async def score(self, journals: Sequence[JournalEntry], now: datetime) -> JournalingMetrics:
        now = as_utc(now)
        metrics = JournalingQualityScorer.compute(journals, now)
        if metrics.entries_last_30_days == 0:
            return metrics

        sample = newest_first(journals_since(journals, now, JournalingQualityScorer.SAMPLE_DAYS))
        insight = await call_summarizer(
            self.summarizer,
            [entry.text for entry in sample],
            task=SummaryTask.JOURNALING_INSIGHT,
            timeout=self.timeout_seconds,
            hints={
                "entries_last_7_days": metrics.entries_last_7_days,
                "average_word_count": metrics.average_word_count,
                "is_consistent": metrics.is_consistent,
            },
        )
        if insight is None:
            return metrics
        return metrics.model_copy(update={"insight": insight})

    @staticmethod
    def compute(journals: Sequence[JournalEntry], now: datetime) -> JournalingMetrics:
        """Deterministic metrics; never calls the summarizer."""
        now = as_utc(now)
        last_7 = journals_since(journals, now, JournalingQualityScorer.RECENT_DAYS)
        sample = journals_since(journals, now, JournalingQualityScorer.SAMPLE_DAYS)

        average_words = JournalingQualityScorer._average_word_count(sample)
        frequency = JournalingQualityScorer._frequency(len(last_7), len(sample))
        quality = JournalingQualityScorer._quality(average_words)
        consistent = JournalingQualityScorer._is_consistent(sample, now)

        frequency_points = t.FREQUENCY_SCORES[frequency]
        quality_points = t.QUALITY_SCORES[quality] if sample else 0
        consistency_points = t.CONSISTENCY_BONUS if consistent else 0

        return JournalingMetrics(
            entries_last_7_days=len(last_7),
            entries_last_30_days=len(sample),
            average_word_count=average_words,
            frequency=frequency,
            quality=quality,
            is_consistent=consistent,
            frequency_points=frequency_points,
            quality_points=quality_points,
            consistency_points=consistency_points,
            quality_score=frequency_points + quality_points + consistency_points,
            insight=JournalingQualityScorer.fallback_insight(
                frequency, quality, consistent, len(last_7)
            ),
        )

    @staticmethod
    def _average_word_count(sample: List[JournalEntry]) -> float:
        if not sample:
            return 0.0
        return sum(entry.word_count for entry in sample) / len(sample)

    @staticmethod
    def _frequency(entries_last_7: int, entries_last_30: int) -> JournalingFrequency:
        if entries_last_7 >= t.DAILY_JOURNALING_MIN:
            return JournalingFrequency.DAILY
        if entries_last_7 >= t.REGULAR_JOURNALING_MIN:
            return JournalingFrequency.REGULAR
        if entries_last_7 >= t.OCCASIONAL_JOURNALING_MIN:
            return JournalingFrequency.OCCASIONAL
        if entries_last_30 > 0:
            return JournalingFrequency.SPORADIC
        return JournalingFrequency.ABSENT

    @staticmethod
    def _quality(average_words: float) -> JournalingQuality:
        if average_words >= t.DEEP_WORD_COUNT_MIN:
            return JournalingQuality.DEEP
        if average_words >= t.MODERATE_WORD_COUNT_MIN:
            return JournalingQuality.MODERATE
        if average_words >= t.SHALLOW_WORD_COUNT_MIN:
            return JournalingQuality.SHALLOW
        return JournalingQuality.MINIMAL

    @staticmethod
    def _is_consistent(sample: List[JournalEntry], now: datetime) -> bool:
        if len(sample) < t.CONSISTENCY_MIN_UNIQUE_DAYS:
            return False
        # Calendar days in the timezone of now
        unique_days = {entry.created_at.astimezone(now.tzinfo).date() for entry in sample}
        return len(unique_days) >= t.CONSISTENCY_MIN_UNIQUE_DAYS

    @staticmethod
    def fallback_insight(
        frequency: JournalingFrequency,
        quality: JournalingQuality,
        is_consistent: bool,
        entries_last_7: int,
    ) -> str:
        """Canned insight, first matching rule wins."""
        F, Q = JournalingFrequency, JournalingQuality

        if frequency == F.DAILY and quality == Q.DEEP:
            return (
                f"Your journaling practice is exceptional! {entries_last_7} thoughtful entries "
                "this week shows real commitment to self-awareness."
            )
        if frequency == F.REGULAR and quality == Q.DEEP:
            return "You're building a strong journaling habit with deep, meaningful reflections!"
        if frequency == F.REGULAR and quality == Q.MODERATE:
            return (
                f"Great consistency with {entries_last_7} entries this week! "
                "Your reflections are developing nicely."
            )
        if frequency == F.DAILY and quality == Q.SHALLOW:
            return (
                "You're journaling daily - that's amazing! Try exploring your thoughts "
                "a bit deeper to gain more insights."
            )
        if frequency == F.OCCASIONAL:
            return (
                "You're getting started with journaling! More frequent reflection "
                "will help you understand your patterns."
            )
        if frequency == F.SPORADIC:
            return (
                "I notice your journaling is inconsistent. Regular reflection is key "
                "to growth - even brief entries help!"
            )
        if quality == Q.MINIMAL and entries_last_7 > 0:
            return (
                "Your entries are brief. Try spending a few more minutes to explore "
                "what you're really feeling and thinking."
            )
        if frequency == F.ABSENT:
            return (
                "You haven't journaled recently. Reflection is powerful for "
                "understanding yourself and making progress."
            )
        return "Keep building your journaling practice!"
