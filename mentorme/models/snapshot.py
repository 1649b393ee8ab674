from typing import List

from pydantic import Field

from mentorme.models.base import SnapshotModel
from mentorme.models.goal import Goal
from mentorme.models.habit import Habit
from mentorme.models.journal import FeatureDiscoveryFlags, JournalEntry


class MentorSnapshot(SnapshotModel):
    """Everything the mentor reads about one user, loaded up front."""

    goals: List[Goal] = Field(default_factory=list)
    habits: List[Habit] = Field(default_factory=list)
    journals: List[JournalEntry] = Field(default_factory=list, description="Newest first")
    discovery: FeatureDiscoveryFlags = Field(default_factory=FeatureDiscoveryFlags)

    @property
    def is_empty(self) -> bool:
        return not self.goals and not self.habits and not self.journals

    @property
    def journals_only(self) -> bool:
        return bool(self.journals) and not self.habits and not self.goals
