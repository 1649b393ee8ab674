"""
User state classification result.

Each state variant carries its own typed context model; UserState checks that
the context matches the declared type so renderers never guess at payloads.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from mentorme.models.goal import Goal
from mentorme.models.habit import Habit
from mentorme.models.mentor import JournalingMetrics


class UserStateType(str, Enum):
    NEW_USER = "new_user"
    URGENT_DEADLINE = "urgent_deadline"
    STREAK_AT_RISK = "streak_at_risk"
    STALLED_GOAL = "stalled_goal"
    MINI_WIN = "mini_win"
    COMEBACK = "comeback"
    NEEDS_HALT_CHECK = "needs_halt_check"
    DISCOVER_HABIT_CHECKING = "discover_habit_checking"
    DISCOVER_CHAT = "discover_chat"
    DISCOVER_MILESTONES = "discover_milestones"
    WINNING = "winning"
    ONLY_JOURNALS = "only_journals"
    ONLY_HABITS = "only_habits"
    ONLY_GOALS = "only_goals"
    HABITS_AND_GOALS = "habits_and_goals"
    BALANCED = "balanced"


class HaltReason(str, Enum):
    STRESS_KEYWORDS = "stress_keywords"
    NO_JOURNALING = "no_journaling"
    PERIODIC_CHECK = "periodic_check"
    FIRST_HALT = "first_halt"


class _Context(BaseModel):
    model_config = ConfigDict(frozen=True)


class NewUserContext(_Context):
    pass


class UrgentDeadlineContext(_Context):
    goal: Goal
    hours_remaining: int


class StreakAtRiskContext(_Context):
    habit: Habit


class StalledGoalContext(_Context):
    goal: Goal
    days: int


class MiniWinContext(_Context):
    goal: Goal
    days: int


class ComebackContext(_Context):
    days: int


class HaltCheckContext(_Context):
    reason: HaltReason
    keyword: Optional[str] = None
    days_since_last_journal: Optional[int] = None
    days_since_last_halt: Optional[int] = None


class DiscoverHabitCheckingContext(_Context):
    habit: Habit


class DiscoverChatContext(_Context):
    goal: Optional[Goal] = None
    journal_count: int


class DiscoverMilestonesContext(_Context):
    goal: Goal


class WinningContext(_Context):
    streak: int
    streak_habit: Optional[Habit] = None
    progress_goal: Optional[Goal] = None
    journal_count: int


class OnlyJournalsContext(_Context):
    theme: str


class OnlyHabitsContext(_Context):
    habit: Habit


class OnlyGoalsContext(_Context):
    goal: Goal


class HabitsAndGoalsContext(_Context):
    habit: Habit
    goal: Goal


class BalancedContext(_Context):
    has_data: bool
    habit: Optional[Habit] = None
    goal: Optional[Goal] = None
    journaling_metrics: Optional[JournalingMetrics] = None


StateContext = Union[
    NewUserContext,
    UrgentDeadlineContext,
    StreakAtRiskContext,
    StalledGoalContext,
    MiniWinContext,
    ComebackContext,
    HaltCheckContext,
    DiscoverHabitCheckingContext,
    DiscoverChatContext,
    DiscoverMilestonesContext,
    WinningContext,
    OnlyJournalsContext,
    OnlyHabitsContext,
    OnlyGoalsContext,
    HabitsAndGoalsContext,
    BalancedContext,
]

CONTEXT_TYPES = {
    UserStateType.NEW_USER: NewUserContext,
    UserStateType.URGENT_DEADLINE: UrgentDeadlineContext,
    UserStateType.STREAK_AT_RISK: StreakAtRiskContext,
    UserStateType.STALLED_GOAL: StalledGoalContext,
    UserStateType.MINI_WIN: MiniWinContext,
    UserStateType.COMEBACK: ComebackContext,
    UserStateType.NEEDS_HALT_CHECK: HaltCheckContext,
    UserStateType.DISCOVER_HABIT_CHECKING: DiscoverHabitCheckingContext,
    UserStateType.DISCOVER_CHAT: DiscoverChatContext,
    UserStateType.DISCOVER_MILESTONES: DiscoverMilestonesContext,
    UserStateType.WINNING: WinningContext,
    UserStateType.ONLY_JOURNALS: OnlyJournalsContext,
    UserStateType.ONLY_HABITS: OnlyHabitsContext,
    UserStateType.ONLY_GOALS: OnlyGoalsContext,
    UserStateType.HABITS_AND_GOALS: HabitsAndGoalsContext,
    UserStateType.BALANCED: BalancedContext,
}


class UserState(BaseModel):
    """Exactly one state per classification, with its matching context."""
    model_config = ConfigDict(frozen=True)

    type: UserStateType
    context: StateContext

    @model_validator(mode="after")
    def _context_matches_type(self):
        expected = CONTEXT_TYPES[self.type]
        if type(self.context) is not expected:
            raise ValueError(f"{self.type.value} requires {expected.__name__}")
        return self
