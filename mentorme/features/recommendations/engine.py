from datetime import datetime
from typing import List, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import activity_gap_days
from mentorme.models.base import as_utc
from mentorme.models.goal import Goal, active_goals
from mentorme.models.habit import Habit
from mentorme.models.journal import JournalEntry
from mentorme.models.mentor import ActionType, RecommendedAction


class ActionRecommender:
    """Every applicable next action, in a fixed order (may be empty)."""

    @staticmethod
    def recommend(
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> List[RecommendedAction]:
        now = as_utc(now)
        actions: List[RecommendedAction] = []
        active = active_goals(goals)

        low_progress = [g for g in active if g.current_progress < t.LOW_PROGRESS_MAX]
        for goal in low_progress[:t.MAX_STALLED_GOALS]:
            actions.append(RecommendedAction(
                title=f"Review: {goal.title}",
                description=f"Only {goal.current_progress}% complete - let's get this moving",
                goal_id=goal.id,
                type=ActionType.UPDATE_GOAL,
            ))

        if active and not habits:
            actions.append(RecommendedAction(
                title="Start a daily habit",
                description="Habits are the building blocks of your goals",
                type=ActionType.START_HABIT,
            ))

        # Users who never journaled count as overdue too
        if activity_gap_days(journals, now) >= t.RECOMMEND_REFLECTION_MIN_DAYS:
            actions.append(RecommendedAction(
                title="Take time to reflect",
                description="Reflection helps you understand what's working",
                type=ActionType.REFLECT,
            ))

        on_track = sum(1 for g in active if g.current_progress >= t.ON_TRACK_PROGRESS_MIN)
        if active and on_track >= len(active) * t.CHALLENGE_READY_THRESHOLD:
            actions.append(RecommendedAction(
                title="Challenge yourself",
                description="You're doing great - ready for more?",
                type=ActionType.ACCEPT_CHALLENGE,
            ))

        return actions
