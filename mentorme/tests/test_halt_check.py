"""HALT check-in triggers, in priority order."""

from mentorme.features.state.halt import assess_halt_need, find_stress_keyword
from mentorme.models.journal import JournalEntry, JournalEntryType, QAPair
from mentorme.models.user_state import HaltReason
from mentorme.tests.builders import halt_journal, journal


def test_stress_keyword_today(now):
    journals = [journal(now, content="Feeling really OVERWHELMED by this week")]

    context = assess_halt_need(journals, now)

    assert context.reason == HaltReason.STRESS_KEYWORDS
    assert context.keyword == "overwhelm"


def test_stress_keyword_in_guided_answer(now):
    entry = JournalEntry(
        id="g1",
        created_at=now,
        type=JournalEntryType.GUIDED_JOURNAL,
        qa_pairs=[QAPair(question="How are you?", answer="Honestly I can't cope lately")],
    )
    assert find_stress_keyword([entry], now) == "can't cope"


def test_old_stress_is_ignored(now):
    journals = [journal(now, days_ago=8.5, content="so much stress")]
    assert find_stress_keyword(journals, now) is None


def test_stress_beats_every_other_signal(now):
    """Five journals and no HALT history would also qualify as first_halt."""
    journals = [journal(now, content="angry at myself")] + [journal(now, days_ago=d) for d in (1, 2, 3, 4)]

    assert assess_halt_need(journals, now).reason == HaltReason.STRESS_KEYWORDS


def test_no_journaling_gap(now):
    context = assess_halt_need([journal(now, days_ago=3.5)], now)

    assert context.reason == HaltReason.NO_JOURNALING
    assert context.days_since_last_journal == 3


def test_periodic_check_after_a_week(now):
    journals = [journal(now), halt_journal(now, days_ago=8)]

    context = assess_halt_need(journals, now)

    assert context.reason == HaltReason.PERIODIC_CHECK
    assert context.days_since_last_halt == 8


def test_recent_halt_suppresses_first_halt(now):
    journals = [halt_journal(now, days_ago=2)] + [journal(now, days_ago=d) for d in range(5)]
    assert assess_halt_need(journals, now) is None


def test_first_halt_after_five_journals(now):
    journals = [journal(now, days_ago=d * 0.3) for d in range(5)]

    context = assess_halt_need(journals, now)

    assert context.reason == HaltReason.FIRST_HALT
    assert context.days_since_last_halt is None


def test_not_needed(now):
    assert assess_halt_need([journal(now), journal(now, days_ago=1)], now) is None
    assert assess_halt_need([], now) is None
