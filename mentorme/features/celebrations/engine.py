"""
Celebrations and proactive check-ins.

Both return at most one message. Celebrations check habit streak milestones
before goal progress milestones; check-ins prefer an inactivity nudge over
the Monday intentions prompt.
"""

from datetime import datetime
from typing import Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import activity_gap_days, journals_since
from mentorme.models.base import as_utc
from mentorme.models.goal import Goal, active_goals
from mentorme.models.habit import Habit
from mentorme.models.journal import JournalEntry
from mentorme.models.mentor import MentorMessage, MentorMessageType

MONDAY = 0


class CelebrationDetector:
    @staticmethod
    def celebrate(
        habits: Sequence[Habit],
        goals: Sequence[Goal],
        now: datetime,
    ) -> Optional[MentorMessage]:
        now = as_utc(now)
        for habit in habits:
            if habit.current_streak in t.STREAK_MILESTONES:
                return MentorMessage(
                    message=(
                        f"🔥 Incredible! You've maintained your {habit.title} habit for "
                        f"{habit.current_streak} consecutive days. "
                        "This is becoming part of who you are!"
                    ),
                    type=MentorMessageType.CELEBRATION,
                    created_at=now,
                )

        for goal in active_goals(goals):
            progress = goal.current_progress
            if t.HALFWAY_PROGRESS_MIN <= progress < t.HALFWAY_PROGRESS_MAX:
                return MentorMessage(
                    message=(
                        f"🎯 You're halfway there! {progress}% complete on '{goal.title}'. "
                        "The momentum you've built is real!"
                    ),
                    type=MentorMessageType.CELEBRATION,
                    created_at=now,
                )
            if t.FINISH_LINE_PROGRESS_MIN <= progress < t.FINISH_LINE_PROGRESS_MAX:
                return MentorMessage(
                    message=(
                        f"🌟 Wow! You're {progress}% of the way to '{goal.title}'. "
                        "The finish line is in sight!"
                    ),
                    type=MentorMessageType.CELEBRATION,
                    created_at=now,
                )

        return None


class CheckInGenerator:
    @staticmethod
    def check_in(journals: Sequence[JournalEntry], now: datetime) -> Optional[MentorMessage]:
        now = as_utc(now)
        gap = activity_gap_days(journals, now)
        if t.COMEBACK_MIN_DAYS <= gap < t.NO_JOURNAL_SENTINEL:
            return MentorMessage(
                message=f"I haven't heard from you in {gap} days. How are you doing?",
                type=MentorMessageType.CHECK_IN,
                created_at=now,
            )

        if now.weekday() == MONDAY and not journals_since(journals, now, 7):
            return MentorMessage(
                message="It's a new week! Want to set intentions together?",
                type=MentorMessageType.CHECK_IN,
                created_at=now,
            )

        return None
