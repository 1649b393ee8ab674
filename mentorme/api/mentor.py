"""
Mentor API Endpoints

POST /v1/mentor/state       - classified user state with typed context
POST /v1/mentor/card        - coaching card for the current state
POST /v1/mentor/briefing    - card plus focus, celebration, check-in, challenges
POST /v1/mentor/journaling  - journaling quality metrics
POST /v1/mentor/focus       - single daily focus recommendation
POST /v1/mentor/challenges  - up to two growth challenges

Every endpoint takes the user's snapshot as the JSON body. The optional
``now`` query parameter pins the clock for deterministic results.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from mentorme.core.config import settings
from mentorme.core.errors import ValidationError
from mentorme.features.challenges.engine import ChallengeGenerator
from mentorme.features.coaching.service import MentorCoachingService
from mentorme.features.focus.engine import FocusRecommender
from mentorme.features.summarizer.service import build_summarizer
from mentorme.models.base import as_utc
from mentorme.models.snapshot import MentorSnapshot

router = APIRouter(prefix="/v1/mentor", tags=["mentor"])

NowParam = Annotated[Optional[str], Query(description="Optional ISO timestamp for deterministic testing")]


def get_coaching_service() -> MentorCoachingService:
    """Build a coaching service bound to the configured summarizer."""
    return MentorCoachingService(
        summarizer=build_summarizer(settings),
        timeout_seconds=settings.SUMMARIZER_TIMEOUT_SECONDS,
    )


CoachingService = Annotated[MentorCoachingService, Depends(get_coaching_service)]


def parse_now(now: Optional[str]) -> datetime:
    if not now:
        return datetime.now(timezone.utc)
    try:
        return as_utc(datetime.fromisoformat(now))
    except ValueError:
        raise ValidationError("Invalid 'now' timestamp format. Use ISO 8601.")


@router.post("/state")
async def get_user_state(snapshot: MentorSnapshot, service: CoachingService, now: NowParam = None) -> dict:
    """
    Classify the user into exactly one mentor state.

    Returns:
        {"data": {"type": "streak_at_risk", "context": {"habit": {...}}}}
    """
    state = await service.classify(snapshot, parse_now(now))
    return {"data": state.model_dump(mode="json")}


@router.post("/card")
async def get_coaching_card(snapshot: MentorSnapshot, service: CoachingService, now: NowParam = None) -> dict:
    card = await service.generate_card(snapshot, parse_now(now))
    return {"data": card.model_dump(mode="json")}


@router.post("/briefing")
async def get_briefing(snapshot: MentorSnapshot, service: CoachingService, now: NowParam = None) -> dict:
    briefing = await service.briefing(snapshot, parse_now(now))
    return {"data": briefing.model_dump(mode="json")}


@router.post("/journaling")
async def get_journaling_metrics(snapshot: MentorSnapshot, service: CoachingService, now: NowParam = None) -> dict:
    """
    Score journaling practice (0-100).

    Returns:
        {
            "data": {
                "entries_last_7_days": 6,
                "frequency": "daily",
                "quality": "deep",
                "is_consistent": true,
                "quality_score": 100,
                "insight": "..."
            }
        }
    """
    metrics = await service.scorer.score(snapshot.journals, parse_now(now))
    return {"data": metrics.model_dump(mode="json")}


@router.post("/focus")
async def get_focus(snapshot: MentorSnapshot, now: NowParam = None) -> dict:
    focus = FocusRecommender.recommend(snapshot.goals, snapshot.journals, snapshot.habits, parse_now(now))
    return {"data": focus.model_dump(mode="json") if focus else None}


@router.post("/challenges")
async def get_challenges(snapshot: MentorSnapshot, now: NowParam = None) -> dict:
    challenges = ChallengeGenerator.generate(snapshot.goals, snapshot.habits, snapshot.journals, parse_now(now))
    return {"data": [c.model_dump(mode="json") for c in challenges]}
