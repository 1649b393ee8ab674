from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mentorme.models.mentor import (
    Challenge,
    FocusRecommendation,
    JournalingMetrics,
    MentorMessage,
    RecommendedAction,
)
from mentorme.models.user_state import UserState


class CardUrgency(str, Enum):
    URGENT = "urgent"
    ATTENTION = "attention"
    CELEBRATION = "celebration"
    INFO = "info"


class MentorActionType(str, Enum):
    NAVIGATE = "navigate"
    CHAT = "chat"
    QUICK_ACTION = "quick_action"


class MentorAction(BaseModel):
    """Button on a coaching card."""
    model_config = ConfigDict(frozen=True)

    label: str
    type: MentorActionType
    destination: Optional[str] = Field(None, description="Screen route for navigate/quick actions")
    context: Optional[dict] = None
    chat_pre_fill: Optional[str] = Field(None, description="Opening message when type is chat")

    @classmethod
    def navigate(cls, label: str, destination: str, context: Optional[dict] = None) -> "MentorAction":
        return cls(label=label, type=MentorActionType.NAVIGATE, destination=destination, context=context)

    @classmethod
    def chat(cls, label: str, chat_pre_fill: Optional[str] = None) -> "MentorAction":
        return cls(label=label, type=MentorActionType.CHAT, chat_pre_fill=chat_pre_fill)

    @classmethod
    def quick_action(cls, label: str, context: dict, destination: Optional[str] = None) -> "MentorAction":
        return cls(label=label, type=MentorActionType.QUICK_ACTION, destination=destination, context=context)


class MentorCoachingCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: UserState
    message: str
    primary_action: MentorAction
    secondary_action: MentorAction
    urgency: CardUrgency


class MentorBriefing(BaseModel):
    """Everything the home screen needs from one snapshot."""
    model_config = ConfigDict(frozen=True)

    card: MentorCoachingCard
    journaling: JournalingMetrics
    focus: Optional[FocusRecommendation] = None
    celebration: Optional[MentorMessage] = None
    check_in: Optional[MentorMessage] = None
    challenges: List[Challenge] = Field(default_factory=list)
    recommendations: List[RecommendedAction] = Field(default_factory=list)
