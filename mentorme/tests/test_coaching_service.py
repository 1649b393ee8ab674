"""
Coaching orchestration tests.

Verify:
1. Brand new users never reach the summarizer
2. Journals-only snapshots fetch insight and theme together
3. Other snapshots only ask for the journaling insight
4. The briefing bundles every secondary signal from the same clock
"""

import pytest

from mentorme.core.tracing import get_exported_spans, reset_exported_spans, setup_tracing
from mentorme.features.coaching.service import MentorCoachingService
from mentorme.features.summarizer.service import SummaryTask
from mentorme.models.coaching import CardUrgency
from mentorme.models.mentor import FocusType
from mentorme.models.snapshot import MentorSnapshot
from mentorme.models.user_state import UserStateType
from mentorme.tests.builders import goal, habit, journal
from mentorme.tests.mocks import StubSummarizer

REPLIES = {
    SummaryTask.JOURNALING_INSIGHT: "You keep coming back to the page, and it shows.",
    SummaryTask.JOURNAL_THEME: "career growth",
}


@pytest.mark.asyncio
async def test_new_user_skips_summarizer(now):
    stub = StubSummarizer(REPLIES)
    service = MentorCoachingService(stub)

    state, metrics = await service.assess(MentorSnapshot(), now)

    assert state.type == UserStateType.NEW_USER
    assert metrics.quality_score == 0
    assert stub.calls == []


@pytest.mark.asyncio
async def test_journals_only_requests_insight_and_theme(now):
    stub = StubSummarizer(REPLIES)
    service = MentorCoachingService(stub)
    snapshot = MentorSnapshot(journals=[journal(now), journal(now, days_ago=0.5)])

    state, metrics = await service.assess(snapshot, now)

    assert sorted(call["task"].value for call in stub.calls) == ["journal_theme", "journaling_insight"]
    assert state.type == UserStateType.ONLY_JOURNALS
    assert state.context.theme == "career growth"
    assert metrics.insight == REPLIES[SummaryTask.JOURNALING_INSIGHT]


@pytest.mark.asyncio
async def test_mixed_snapshot_only_requests_insight(now):
    stub = StubSummarizer(REPLIES)
    service = MentorCoachingService(stub)
    snapshot = MentorSnapshot(goals=[goal(now, progress=3, age_days=10)], journals=[journal(now)])

    state, _ = await service.assess(snapshot, now)

    assert [call["task"] for call in stub.calls] == [SummaryTask.JOURNALING_INSIGHT]
    assert state.type == UserStateType.STALLED_GOAL


@pytest.mark.asyncio
async def test_summarizer_outage_still_classifies(now):
    service = MentorCoachingService(StubSummarizer(error=TimeoutError("slow")))
    snapshot = MentorSnapshot(journals=[journal(now, content="New job, lots to learn"), journal(now, days_ago=1)])

    card = await service.generate_card(snapshot, now)

    assert card.state.type == UserStateType.ONLY_JOURNALS
    assert "reflecting on career" in card.message


@pytest.mark.asyncio
async def test_card_for_streak_at_risk(now):
    service = MentorCoachingService()
    snapshot = MentorSnapshot(habits=[habit(now, title="Read", streak=9)])

    card = await service.generate_card(snapshot, now)

    assert card.state.type == UserStateType.STREAK_AT_RISK
    assert card.urgency == CardUrgency.URGENT


@pytest.mark.asyncio
async def test_briefing_bundles_signals(now):
    service = MentorCoachingService()
    snapshot = MentorSnapshot(
        goals=[goal(now, title="Write a novel", progress=0, age_days=5)],
        habits=[habit(now, title="Stretch", streak=7, done_days_ago=[0])],
    )

    briefing = await service.briefing(snapshot, now)

    assert briefing.card.state.type == UserStateType.STALLED_GOAL
    assert briefing.journaling.quality_score == 0
    assert briefing.focus.type == FocusType.MINI_WIN
    assert "Stretch habit for 7 consecutive days" in briefing.celebration.message
    assert briefing.check_in is None
    assert [c.key for c in briefing.challenges] == ["progress_boost_30", "reflection_week"]
    assert [a.title for a in briefing.recommendations] == ["Review: Write a novel", "Take time to reflect"]


@pytest.mark.asyncio
async def test_briefing_reads_naive_clock_as_utc(now):
    service = MentorCoachingService()
    snapshot = MentorSnapshot(
        goals=[goal(now, title="Write a novel", progress=0, age_days=5)],
        habits=[habit(now, title="Stretch", streak=7, done_days_ago=[0])],
        journals=[journal(now, days_ago=4)],
    )

    naive = await service.briefing(snapshot, now.replace(tzinfo=None))

    assert naive == await service.briefing(snapshot, now)
    assert naive.check_in.message == "I haven't heard from you in 4 days. How are you doing?"
    assert naive.celebration.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_assess_emits_span_when_tracing_enabled(now):
    setup_tracing(enabled=True, exporter_name="memory")
    reset_exported_spans()
    try:
        await MentorCoachingService().classify(MentorSnapshot(journals=[journal(now)]), now)
        spans = [s for s in get_exported_spans() if s.name == "mentor.assess"]
        assert spans
        assert spans[0].attributes["mentor.journals"] == 1
    finally:
        setup_tracing(enabled=False)
