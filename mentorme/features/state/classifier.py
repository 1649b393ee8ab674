"""
User State Classifier

Maps one immutable snapshot (goals, habits, journals, discovery flags, now)
to exactly one UserState. Checks run in a fixed priority order and the
first match wins:

    new_user > urgent_deadline > streak_at_risk > stalled_goal > mini_win
    > comeback > needs_halt_check > discover_habit_checking > discover_chat
    > discover_milestones > winning > only_journals > only_habits
    > only_goals > habits_and_goals > balanced

The only I/O is theme extraction for journal-only users, which degrades to
a keyword heuristic when the summarizer is missing, slow or failing.
"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import (
    activity_gap_days,
    detect_struggling_pattern,
    first_stuck_goal,
    journals_since,
    newest_first,
    whole_days,
    whole_hours,
)
from mentorme.features.state.halt import assess_halt_need
from mentorme.features.summarizer.service import Summarizer, SummaryTask, call_summarizer
from mentorme.models.base import as_utc
from mentorme.models.goal import Goal, active_goals
from mentorme.models.habit import DAILY_REFLECTION_SYSTEM_TYPE, Habit
from mentorme.models.journal import FeatureDiscoveryFlags, JournalEntry
from mentorme.models.mentor import JournalingMetrics
from mentorme.models.user_state import (
    BalancedContext,
    ComebackContext,
    DiscoverChatContext,
    DiscoverHabitCheckingContext,
    DiscoverMilestonesContext,
    HabitsAndGoalsContext,
    MiniWinContext,
    NewUserContext,
    OnlyGoalsContext,
    OnlyHabitsContext,
    OnlyJournalsContext,
    StalledGoalContext,
    StreakAtRiskContext,
    UrgentDeadlineContext,
    UserState,
    UserStateType,
    WinningContext,
)


class UserStateClassifier:
    """Stateless apart from its summarizer binding; safe to share or rebuild per call."""

    def __init__(self, summarizer: Optional[Summarizer] = None, timeout_seconds: float = 8.0):
        self.summarizer = summarizer
        self.timeout_seconds = timeout_seconds

    async def classify(
        self,
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        journaling_metrics: Optional[JournalingMetrics],
        discovery: FeatureDiscoveryFlags,
        now: datetime,
        precomputed_theme: Optional[str] = None,
    ) -> UserState:
        now = as_utc(now)
        if not goals and not habits and not journals:
            return UserState(type=UserStateType.NEW_USER, context=NewUserContext())

        active = active_goals(goals)

        state = (
            UserStateClassifier._urgent_deadline(active, now)
            or UserStateClassifier._streak_at_risk(habits, now)
            or UserStateClassifier._stalled_goal(active, now)
            or UserStateClassifier._mini_win(active, habits, journals, now)
            or UserStateClassifier._comeback(journals, now)
            or UserStateClassifier._halt_check(journals, now)
            or UserStateClassifier._discovery(goals, habits, journals, discovery)
        )
        if state is not None:
            return state

        if UserStateClassifier.is_winning(goals, habits, journals, now):
            return UserState(
                type=UserStateType.WINNING,
                context=UserStateClassifier.winning_context(goals, habits, journals, now),
            )

        has_journals, has_habits, has_goals = bool(journals), bool(habits), bool(goals)

        if has_journals and not has_habits and not has_goals:
            theme = precomputed_theme or await self.extract_theme(journals, now)
            return UserState(type=UserStateType.ONLY_JOURNALS, context=OnlyJournalsContext(theme=theme))

        if not has_journals and has_habits and not has_goals:
            return UserState(type=UserStateType.ONLY_HABITS, context=OnlyHabitsContext(habit=habits[0]))

        if not has_journals and not has_habits and has_goals:
            return UserState(type=UserStateType.ONLY_GOALS, context=OnlyGoalsContext(goal=goals[0]))

        primary_goal = active[0] if active else (goals[0] if goals else None)

        if not has_journals and has_habits and has_goals:
            return UserState(
                type=UserStateType.HABITS_AND_GOALS,
                context=HabitsAndGoalsContext(habit=habits[0], goal=primary_goal),
            )

        return UserState(
            type=UserStateType.BALANCED,
            context=BalancedContext(
                has_data=has_journals or has_habits or has_goals,
                habit=habits[0] if habits else None,
                goal=primary_goal,
                journaling_metrics=journaling_metrics,
            ),
        )

    # -- priority checks ---------------------------------------------------

    @staticmethod
    def _urgent_deadline(active: Sequence[Goal], now: datetime) -> Optional[UserState]:
        for goal in active:
            if goal.target_date is None or goal.current_progress >= 100:
                continue
            hours = whole_hours(now, goal.target_date)
            if 0 < hours <= t.URGENT_DEADLINE_MAX_HOURS:
                return UserState(
                    type=UserStateType.URGENT_DEADLINE,
                    context=UrgentDeadlineContext(goal=goal, hours_remaining=hours),
                )
        return None

    @staticmethod
    def _streak_at_risk(habits: Sequence[Habit], now: datetime) -> Optional[UserState]:
        for habit in habits:
            if (
                habit.is_active
                and habit.current_streak >= t.STREAK_PROTECTION_MIN
                and not habit.is_completed_today(now)
            ):
                return UserState(type=UserStateType.STREAK_AT_RISK, context=StreakAtRiskContext(habit=habit))
        return None

    @staticmethod
    def _stalled_goal(active: Sequence[Goal], now: datetime) -> Optional[UserState]:
        for goal in active:
            days = whole_days(goal.created_at, now)
            if days >= t.STALLED_GOAL_MIN_DAYS and goal.current_progress < t.STALLED_GOAL_MAX_PROGRESS:
                return UserState(type=UserStateType.STALLED_GOAL, context=StalledGoalContext(goal=goal, days=days))
        return None

    @staticmethod
    def _mini_win(
        active: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> Optional[UserState]:
        days_stuck = detect_struggling_pattern(active, habits, journals, now)
        if days_stuck is None or days_stuck < t.STRUGGLING_MIN_DAYS:
            return None
        goal = first_stuck_goal(active)
        if goal is None:
            return None
        return UserState(type=UserStateType.MINI_WIN, context=MiniWinContext(goal=goal, days=days_stuck))

    @staticmethod
    def _comeback(journals: Sequence[JournalEntry], now: datetime) -> Optional[UserState]:
        if not journals:
            return None
        gap = activity_gap_days(journals, now)
        if t.COMEBACK_MIN_DAYS <= gap < t.NO_JOURNAL_SENTINEL:
            return UserState(type=UserStateType.COMEBACK, context=ComebackContext(days=gap))
        return None

    @staticmethod
    def _halt_check(journals: Sequence[JournalEntry], now: datetime) -> Optional[UserState]:
        context = assess_halt_need(journals, now)
        if context is None:
            return None
        return UserState(type=UserStateType.NEEDS_HALT_CHECK, context=context)

    @staticmethod
    def _discovery(
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        discovery: FeatureDiscoveryFlags,
    ) -> Optional[UserState]:
        reflected = discovery.has_completed_guided_reflection or bool(journals)
        if reflected and not discovery.has_checked_off_reflection_habit:
            reflection_habit = next(
                (h for h in habits if h.system_type == DAILY_REFLECTION_SYSTEM_TYPE), None
            )
            # Only right after the first journal, never again
            if reflection_habit is not None and len(journals) == 1:
                return UserState(
                    type=UserStateType.DISCOVER_HABIT_CHECKING,
                    context=DiscoverHabitCheckingContext(habit=reflection_habit),
                )

        very_new = len(goals) <= 1 and len(journals) <= 1 and len(habits) <= 1
        if not discovery.has_opened_chat_screen and very_new and (goals or journals):
            return UserState(
                type=UserStateType.DISCOVER_CHAT,
                context=DiscoverChatContext(goal=goals[0] if goals else None, journal_count=len(journals)),
            )

        if not discovery.has_created_milestone and len(goals) == 1:
            goal = goals[0]
            if goal.is_active and not goal.milestones:
                return UserState(
                    type=UserStateType.DISCOVER_MILESTONES,
                    context=DiscoverMilestonesContext(goal=goal),
                )

        return None

    # -- winning -------------------------------------------------------------

    @staticmethod
    def is_winning(
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> bool:
        if not habits and not goals:
            return False

        now = as_utc(now)
        # Every active habit is treated as daily
        window_start = now - timedelta(days=t.WINNING_EVALUATION_DAYS)
        active_habits = [h for h in habits if h.is_active]
        expected = len(active_habits) * t.WINNING_EVALUATION_DAYS
        if expected > 0:
            completed = sum(
                1 for h in active_habits for done in h.completion_dates if done > window_start
            )
            if completed / expected < t.WINNING_COMPLETION_RATE:
                return False

        if journals and len(journals_since(journals, now, 7)) < t.WINNING_JOURNALS_PER_WEEK:
            return False

        return True

    @staticmethod
    def winning_context(
        goals: Sequence[Goal],
        habits: Sequence[Habit],
        journals: Sequence[JournalEntry],
        now: datetime,
    ) -> WinningContext:
        now = as_utc(now)
        longest, streak_habit = 0, None
        for habit in habits:
            if habit.current_streak > longest:
                longest, streak_habit = habit.current_streak, habit

        best_progress, progress_goal = 0, None
        for goal in active_goals(goals):
            if goal.current_progress > best_progress:
                best_progress, progress_goal = goal.current_progress, goal

        return WinningContext(
            streak=longest,
            streak_habit=streak_habit,
            progress_goal=progress_goal,
            journal_count=len(journals_since(journals, now, 7)),
        )

    # -- themes --------------------------------------------------------------

    async def extract_theme(self, journals: Sequence[JournalEntry], now: datetime) -> str:
        recent = newest_first(journals_since(journals, as_utc(now), t.THEME_SAMPLE_DAYS))[:t.THEME_SAMPLE_SIZE]
        if not recent:
            return t.DEFAULT_THEME

        theme = await call_summarizer(
            self.summarizer,
            [entry.text for entry in recent],
            task=SummaryTask.JOURNAL_THEME,
            timeout=self.timeout_seconds,
        )
        if theme:
            return theme
        return UserStateClassifier.keyword_theme(recent)

    @staticmethod
    def keyword_theme(journals: Sequence[JournalEntry]) -> str:
        text = " ".join(entry.text for entry in journals).lower()
        for theme, keywords in t.THEME_KEYWORDS:
            if any(keyword in text for keyword in keywords):
                return theme
        return t.DEFAULT_THEME
