"""
Derived mentor signals.

Every model here is computed per call from a snapshot and never persisted.
All models frozen (immutable).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mentorme.models.base import UtcDatetime


class JournalingFrequency(str, Enum):
    DAILY = "daily"
    REGULAR = "regular"
    OCCASIONAL = "occasional"
    SPORADIC = "sporadic"
    ABSENT = "absent"


class JournalingQuality(str, Enum):
    DEEP = "deep"
    MODERATE = "moderate"
    SHALLOW = "shallow"
    MINIMAL = "minimal"


class JournalingMetrics(BaseModel):
    """Three independent axes (frequency, depth, consistency) summed into quality_score."""
    model_config = ConfigDict(frozen=True)

    entries_last_7_days: int
    entries_last_30_days: int
    average_word_count: float
    frequency: JournalingFrequency
    quality: JournalingQuality
    is_consistent: bool
    frequency_points: int = Field(..., ge=0, le=40)
    quality_points: int = Field(..., ge=0, le=40)
    consistency_points: int = Field(..., description="Either 0 or the consistency bonus")
    quality_score: int = Field(..., ge=0, le=100)
    insight: str


class FocusType(str, Enum):
    URGENT_GOAL = "urgent_goal"
    STALLED_GOAL = "stalled_goal"
    REFLECTION = "reflection"
    CELEBRATION = "celebration"
    MINI_WIN = "mini_win"


class FocusRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    context: str
    goal_id: Optional[str] = None
    type: FocusType
    priority: float


class MentorMessageType(str, Enum):
    PATTERN = "pattern"
    CELEBRATION = "celebration"
    QUESTION = "question"
    SUGGESTION = "suggestion"
    CHECK_IN = "check_in"


class MentorMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    type: MentorMessageType
    action_text: Optional[str] = None
    created_at: UtcDatetime


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable identifier, e.g. 'streak_7'")
    title: str
    description: str
    icon: str


class ActionType(str, Enum):
    UPDATE_GOAL = "update_goal"
    START_HABIT = "start_habit"
    REFLECT = "reflect"
    ACCEPT_CHALLENGE = "accept_challenge"


class RecommendedAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    goal_id: Optional[str] = None
    type: ActionType
