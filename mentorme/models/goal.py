from enum import Enum
from typing import List, Optional

from pydantic import Field

from mentorme.models.base import SnapshotModel, UtcDatetime


class GoalStatus(str, Enum):
    ACTIVE = "active"
    BACKLOG = "backlog"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class GoalCategory(str, Enum):
    HEALTH = "health"
    FITNESS = "fitness"
    CAREER = "career"
    LEARNING = "learning"
    RELATIONSHIPS = "relationships"
    FINANCE = "finance"
    PERSONAL = "personal"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    GoalCategory.HEALTH: "Health & Wellness",
    GoalCategory.FITNESS: "Fitness",
    GoalCategory.CAREER: "Career",
    GoalCategory.LEARNING: "Learning",
    GoalCategory.RELATIONSHIPS: "Relationships",
    GoalCategory.FINANCE: "Finance",
    GoalCategory.PERSONAL: "Personal",
    GoalCategory.OTHER: "Other",
}


class Milestone(SnapshotModel):
    id: str
    goal_id: Optional[str] = None
    title: str
    order: int = 0
    is_completed: bool = False
    completed_date: Optional[UtcDatetime] = None
    target_date: Optional[UtcDatetime] = None


class Goal(SnapshotModel):
    """A user goal as seen by the mentor. Progress is a 0-100 percentage."""

    id: str
    title: str
    description: str = ""
    category: GoalCategory = GoalCategory.PERSONAL
    status: GoalStatus = GoalStatus.ACTIVE
    current_progress: int = Field(0, ge=0, le=100, description="Completion percentage")
    created_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None
    target_date: Optional[UtcDatetime] = None
    milestones: List[Milestone] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.status == GoalStatus.ACTIVE


def active_goals(goals: List[Goal]) -> List[Goal]:
    return [g for g in goals if g.is_active]
