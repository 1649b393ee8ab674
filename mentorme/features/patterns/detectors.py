"""
Shared activity-pattern detectors.

Pure helpers reused by the focus recommender, the action recommender, the
check-in generator and the state classifier. Every helper takes ``now``
explicitly. Elapsed days and hours truncate toward zero, and trailing
windows are strict (an entry exactly N days old is outside an N-day window).
"""

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.models.goal import Goal
from mentorme.models.habit import Habit
from mentorme.models.journal import JournalEntry


def whole_days(earlier: datetime, later: datetime) -> int:
    return int((later - earlier).total_seconds() / 86400)


def whole_hours(earlier: datetime, later: datetime) -> int:
    return int((later - earlier).total_seconds() / 3600)


def journals_since(journals: Sequence[JournalEntry], now: datetime, days: int) -> List[JournalEntry]:
    cutoff = now - timedelta(days=days)
    return [j for j in journals if j.created_at > cutoff]


def newest_first(journals: Sequence[JournalEntry]) -> List[JournalEntry]:
    return sorted(journals, key=lambda j: j.created_at, reverse=True)


def activity_gap_days(journals: Sequence[JournalEntry], now: datetime) -> int:
    """Days since the most recent journal, or NO_JOURNAL_SENTINEL if none."""
    if not journals:
        return t.NO_JOURNAL_SENTINEL
    latest = max(j.created_at for j in journals)
    return whole_days(latest, now)


def detect_struggling_pattern(
    active_goals: Sequence[Goal],
    habits: Sequence[Habit],
    journals: Sequence[JournalEntry],
    now: datetime,
) -> Optional[int]:
    """Return how many days the user has been stuck, or None."""
    if not active_goals and not habits:
        return None

    stuck_goals = [g for g in active_goals if g.current_progress < t.STRUGGLING_MAX_PROGRESS]
    if stuck_goals:
        oldest = min(stuck_goals, key=lambda g: g.created_at)
        days = whole_days(oldest.created_at, now)
        recent = journals_since(journals, now, t.STRUGGLING_MIN_DAYS)
        if days >= t.STRUGGLING_MIN_DAYS and not recent:
            return days

    idle_habits = [h for h in habits if h.current_streak == 0]
    if idle_habits:
        oldest_habit = min(idle_habits, key=lambda h: h.created_at)
        days = whole_days(oldest_habit.created_at, now)
        if days >= t.STRUGGLING_MIN_DAYS:
            return days

    return None


def first_stuck_goal(active_goals: Sequence[Goal]) -> Optional[Goal]:
    return next((g for g in active_goals if g.current_progress < t.STRUGGLING_MAX_PROGRESS), None)
