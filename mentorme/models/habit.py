from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from mentorme.models.base import SnapshotModel, UtcDatetime

# Habit created by the app to nudge a daily reflection
DAILY_REFLECTION_SYSTEM_TYPE = "daily_reflection"


class HabitStatus(str, Enum):
    ACTIVE = "active"
    BACKLOG = "backlog"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class Habit(SnapshotModel):
    id: str
    title: str
    description: str = ""
    status: HabitStatus = HabitStatus.ACTIVE
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    completion_dates: List[UtcDatetime] = Field(default_factory=list)
    created_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None
    system_type: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == HabitStatus.ACTIVE

    def is_completed_on(self, day: date, tz=None) -> bool:
        for completed in self.completion_dates:
            local = completed.astimezone(tz) if tz is not None else completed
            if local.date() == day:
                return True
        return False

    def is_completed_today(self, now: datetime) -> bool:
        """Calendar-day match in the timezone of ``now``."""
        return self.is_completed_on(now.date(), now.tzinfo)
