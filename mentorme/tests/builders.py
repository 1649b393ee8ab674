"""Snapshot builders shared by the mentor tests. Times are relative to a given ``now``."""

from datetime import datetime, timedelta
from itertools import count
from typing import List, Optional

from mentorme.models.goal import Goal, GoalCategory, GoalStatus, Milestone
from mentorme.models.habit import Habit, HabitStatus
from mentorme.models.journal import JournalEntry, JournalEntryType, QAPair

_ids = count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}_{next(_ids)}"


def goal(
    now: datetime,
    *,
    title: str = "Run a half marathon",
    progress: int = 0,
    age_days: float = 0,
    due_in: Optional[timedelta] = None,
    status: GoalStatus = GoalStatus.ACTIVE,
    category: GoalCategory = GoalCategory.FITNESS,
    milestones: int = 0,
) -> Goal:
    goal_id = _next_id("goal")
    return Goal(
        id=goal_id,
        title=title,
        category=category,
        status=status,
        current_progress=progress,
        created_at=now - timedelta(days=age_days),
        target_date=now + due_in if due_in is not None else None,
        milestones=[
            Milestone(id=f"{goal_id}_m{i}", goal_id=goal_id, title=f"Step {i}", order=i)
            for i in range(milestones)
        ],
    )


def habit(
    now: datetime,
    *,
    title: str = "Meditate",
    streak: int = 0,
    age_days: float = 0,
    done_days_ago: Optional[List[int]] = None,
    status: HabitStatus = HabitStatus.ACTIVE,
    system_type: Optional[str] = None,
) -> Habit:
    return Habit(
        id=_next_id("habit"),
        title=title,
        status=status,
        current_streak=streak,
        longest_streak=streak,
        completion_dates=[now - timedelta(days=d) for d in (done_days_ago or [])],
        created_at=now - timedelta(days=age_days),
        system_type=system_type,
    )


def journal(
    now: datetime,
    *,
    days_ago: float = 0,
    content: Optional[str] = "Quiet day, wrote a few notes.",
    words: Optional[int] = None,
) -> JournalEntry:
    if words is not None:
        content = " ".join(["word"] * words)
    return JournalEntry(
        id=_next_id("journal"),
        created_at=now - timedelta(days=days_ago),
        type=JournalEntryType.QUICK_NOTE,
        content=content,
    )


def halt_journal(now: datetime, *, days_ago: float = 0) -> JournalEntry:
    return JournalEntry(
        id=_next_id("halt"),
        created_at=now - timedelta(days=days_ago),
        type=JournalEntryType.GUIDED_JOURNAL,
        reflection_type="halt",
        qa_pairs=[
            QAPair(question="Are you hungry?", answer="Had lunch, feeling fine."),
            QAPair(question="Are you rested?", answer="Slept well."),
        ],
    )
