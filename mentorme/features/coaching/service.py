"""
Mentor coaching orchestration.

Runs one top-level pass over a snapshot: journaling metrics, state
classification, then card rendering. When the snapshot is journals-only the
journaling score and the theme extraction are independent summarizer calls,
so they run concurrently.
"""

import asyncio
from datetime import datetime
from typing import Optional, Tuple

from mentorme.core.logging import log_event
from mentorme.core.tracing import start_span
from mentorme.features.celebrations.engine import CelebrationDetector, CheckInGenerator
from mentorme.features.challenges.engine import ChallengeGenerator
from mentorme.features.coaching.cards import render_card
from mentorme.features.focus.engine import FocusRecommender
from mentorme.features.journaling.scoring_engine import JournalingQualityScorer
from mentorme.features.recommendations.engine import ActionRecommender
from mentorme.features.state.classifier import UserStateClassifier
from mentorme.features.summarizer.service import Summarizer
from mentorme.models.base import as_utc
from mentorme.models.coaching import MentorBriefing, MentorCoachingCard
from mentorme.models.mentor import JournalingMetrics
from mentorme.models.snapshot import MentorSnapshot
from mentorme.models.user_state import NewUserContext, UserState, UserStateType


class MentorCoachingService:
    def __init__(self, summarizer: Optional[Summarizer] = None, timeout_seconds: float = 8.0):
        self.scorer = JournalingQualityScorer(summarizer, timeout_seconds)
        self.classifier = UserStateClassifier(summarizer, timeout_seconds)

    async def assess(self, snapshot: MentorSnapshot, now: datetime) -> Tuple[UserState, JournalingMetrics]:
        """Classify the user and score their journaling in one pass."""
        now = as_utc(now)
        if snapshot.is_empty:
            # Nothing to summarize for a brand new user
            state = UserState(type=UserStateType.NEW_USER, context=NewUserContext())
            return state, JournalingQualityScorer.compute(snapshot.journals, now)

        with start_span(
            "mentor.assess",
            {
                "mentor.goals": len(snapshot.goals),
                "mentor.habits": len(snapshot.habits),
                "mentor.journals": len(snapshot.journals),
            },
        ):
            theme = None
            if snapshot.journals_only:
                metrics, theme = await asyncio.gather(
                    self.scorer.score(snapshot.journals, now),
                    self.classifier.extract_theme(snapshot.journals, now),
                )
            else:
                metrics = await self.scorer.score(snapshot.journals, now)

            state = await self.classifier.classify(
                snapshot.goals,
                snapshot.habits,
                snapshot.journals,
                metrics,
                snapshot.discovery,
                now,
                precomputed_theme=theme,
            )

        log_event(
            "info",
            "mentor.state.classified",
            event_type="mentor_state",
            extra={"state": state.type.value, "quality_score": metrics.quality_score},
        )
        return state, metrics

    async def classify(self, snapshot: MentorSnapshot, now: datetime) -> UserState:
        state, _ = await self.assess(snapshot, now)
        return state

    async def generate_card(self, snapshot: MentorSnapshot, now: datetime) -> MentorCoachingCard:
        state, _ = await self.assess(snapshot, now)
        return render_card(state)

    async def briefing(self, snapshot: MentorSnapshot, now: datetime) -> MentorBriefing:
        """Card plus every secondary signal for the home screen."""
        now = as_utc(now)
        state, metrics = await self.assess(snapshot, now)
        goals, habits, journals = snapshot.goals, snapshot.habits, snapshot.journals
        return MentorBriefing(
            card=render_card(state),
            journaling=metrics,
            focus=FocusRecommender.recommend(goals, journals, habits, now),
            celebration=CelebrationDetector.celebrate(habits, goals, now),
            check_in=CheckInGenerator.check_in(journals, now),
            challenges=ChallengeGenerator.generate(goals, habits, journals, now),
            recommendations=ActionRecommender.recommend(goals, habits, journals, now),
        )
