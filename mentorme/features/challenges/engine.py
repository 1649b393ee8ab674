"""Growth challenge suggestions. At most two are offered at a time."""

from datetime import datetime
from typing import List, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import journals_since
from mentorme.models.base import as_utc
from mentorme.models.goal import Goal, active_goals
from mentorme.models.habit import Habit
from mentorme.models.journal import JournalEntry
from mentorme.models.mentor import Challenge


STREAK_CHALLENGE = Challenge(
    key="streak_7",
    title="7-Day Streak Challenge",
    description="Build momentum by maintaining all your habits for 7 consecutive days",
    icon="local_fire_department",
)

PROGRESS_CHALLENGE = Challenge(
    key="progress_boost_30",
    title="30-Day Progress Boost",
    description="Make significant progress on one goal in the next 30 days",
    icon="rocket_launch",
)

REFLECTION_CHALLENGE = Challenge(
    key="reflection_week",
    title="Daily Reflection Week",
    description="Journal every day for 7 days to deepen your self-awareness",
    icon="auto_stories",
)


class ChallengeGenerator:
    @staticmethod
    def generate(
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> List[Challenge]:
        now = as_utc(now)
        challenges: List[Challenge] = []

        if habits:
            average_streak = sum(h.current_streak for h in habits) / len(habits)
            if average_streak < t.CHALLENGE_STREAK_THRESHOLD:
                challenges.append(STREAK_CHALLENGE)

        if any(g.current_progress < t.CHALLENGE_PROGRESS_THRESHOLD for g in active_goals(goals)):
            challenges.append(PROGRESS_CHALLENGE)

        if len(journals_since(journals, now, 7)) < t.CHALLENGE_JOURNAL_THRESHOLD:
            challenges.append(REFLECTION_CHALLENGE)

        return challenges[:t.MAX_CHALLENGES]
