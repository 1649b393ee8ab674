"""
Daily focus recommender.

Collects every candidate focus independently, then returns the one with the
highest priority. Ties keep collection order: urgent goals, stalled goals,
celebration, mini-win, reflection.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import (
    detect_struggling_pattern,
    first_stuck_goal,
    journals_since,
    whole_days,
)
from mentorme.models.base import as_utc
from mentorme.models.goal import Goal, active_goals
from mentorme.models.habit import Habit
from mentorme.models.journal import JournalEntry
from mentorme.models.mentor import FocusRecommendation, FocusType


class FocusRecommender:
    """Pure deterministic focus selection."""

    @staticmethod
    def recommend(
        goals: Sequence[Goal],
        journals: Sequence[JournalEntry],
        habits: Sequence[Habit],
        now: datetime,
    ) -> Optional[FocusRecommendation]:
        now = as_utc(now)
        active = active_goals(goals)
        if not active:
            return FocusRecommendation(
                title="Start with reflection",
                context="Understanding yourself is the first step to growth",
                type=FocusType.REFLECTION,
                priority=t.NEW_USER_PRIORITY,
            )

        candidates: List[FocusRecommendation] = []
        candidates.extend(FocusRecommender._urgent_goals(active, now))
        candidates.extend(FocusRecommender._stalled_goals(active))

        celebration = FocusRecommender._celebration(habits)
        if celebration:
            candidates.append(celebration)

        mini_win = FocusRecommender._mini_win(active, habits, journals, now)
        if mini_win:
            candidates.append(mini_win)

        recent = journals_since(journals, now, t.FOCUS_REFLECTION_MIN_DAYS)
        if not recent and not candidates:
            candidates.append(FocusRecommendation(
                title="Take a moment to reflect",
                context="How are you feeling today?",
                type=FocusType.REFLECTION,
                priority=t.REFLECTION_PRIORITY,
            ))

        if not candidates:
            return None
        # sorted() is stable, so equal priorities keep collection order
        return sorted(candidates, key=lambda c: c.priority, reverse=True)[0]

    @staticmethod
    def _urgent_goals(active: Sequence[Goal], now: datetime) -> List[FocusRecommendation]:
        urgent = []
        for goal in active:
            if goal.target_date is None or goal.current_progress >= 100:
                continue
            days_left = whole_days(now, goal.target_date)
            if 0 <= days_left <= t.URGENT_FOCUS_MAX_DAYS:
                urgent.append(FocusRecommendation(
                    title=goal.title,
                    context=FocusRecommender.deadline_context(goal, days_left),
                    goal_id=goal.id,
                    type=FocusType.URGENT_GOAL,
                    priority=t.URGENT_GOAL_BASE_PRIORITY - days_left * t.URGENT_GOAL_DAY_PENALTY,
                ))
        return urgent

    @staticmethod
    def _stalled_goals(active: Sequence[Goal]) -> List[FocusRecommendation]:
        return [
            FocusRecommendation(
                title=f"Make progress on: {goal.title}",
                context=f"{goal.current_progress}% complete • {goal.category.display_name}",
                goal_id=goal.id,
                type=FocusType.STALLED_GOAL,
                priority=t.STALLED_GOAL_BASE_PRIORITY
                - goal.current_progress * t.STALLED_GOAL_PROGRESS_MULTIPLIER,
            )
            for goal in active
            if goal.current_progress < t.LOW_PROGRESS_MAX
        ]

    @staticmethod
    def _celebration(habits: Sequence[Habit]) -> Optional[FocusRecommendation]:
        best: Optional[Habit] = None
        for habit in habits:
            if habit.current_streak < t.STREAK_PROTECTION_MIN:
                continue
            # Later habits win ties
            if best is None or habit.current_streak >= best.current_streak:
                best = habit
        if best is None or best.current_streak % t.STREAK_CELEBRATION_INTERVAL != 0:
            return None
        return FocusRecommendation(
            title=f"Celebrate your {best.title} streak!",
            context=f"{best.current_streak} days strong 🔥",
            type=FocusType.CELEBRATION,
            priority=t.CELEBRATION_PRIORITY,
        )

    @staticmethod
    def _mini_win(
        active: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> Optional[FocusRecommendation]:
        days = detect_struggling_pattern(active, habits, journals, now)
        if days is None or days < t.STRUGGLING_MIN_DAYS:
            return None
        goal = first_stuck_goal(active)
        if goal is None:
            return None
        return FocusRecommendation(
            title=f"Just 5 minutes on {goal.title}",
            context=(
                "Starting is the hardest part. Can you do just 5 minutes today? "
                "Small wins build momentum."
            ),
            goal_id=goal.id,
            type=FocusType.MINI_WIN,
            priority=t.MINI_WIN_PRIORITY,
        )

    @staticmethod
    def deadline_context(goal: Goal, days_left: int) -> str:
        if days_left == 0:
            due = "Due today"
        elif days_left == 1:
            due = "Due tomorrow"
        else:
            due = f"Due in {days_left} days"
        return f"{goal.category.display_name} • {due} • {goal.current_progress}% complete"
