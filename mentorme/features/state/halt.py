"""
HALT check-in detection (Hungry, Angry, Lonely, Tired).

Signals are checked in order and the first one wins: stress words in a
recent entry, a journaling gap, an overdue periodic check, then a first
check for users with enough history.
"""

from datetime import datetime
from typing import Optional, Sequence

from mentorme.features import thresholds as t
from mentorme.features.patterns.detectors import whole_days
from mentorme.models.base import as_utc
from mentorme.models.journal import JournalEntry
from mentorme.models.user_state import HaltCheckContext, HaltReason


def find_stress_keyword(journals: Sequence[JournalEntry], now: datetime) -> Optional[str]:
    now = as_utc(now)
    for journal in journals:
        if whole_days(journal.created_at, now) > t.HALT_RECENT_DAYS:
            continue
        text = journal.text.lower()
        for keyword in t.STRESS_KEYWORDS:
            if keyword in text:
                return keyword
    return None


def assess_halt_need(journals: Sequence[JournalEntry], now: datetime) -> Optional[HaltCheckContext]:
    """Return why a HALT check-in is due, or None if it isn't."""
    now = as_utc(now)
    keyword = find_stress_keyword(journals, now)
    if keyword is not None:
        return HaltCheckContext(reason=HaltReason.STRESS_KEYWORDS, keyword=keyword)

    if journals:
        latest = max(j.created_at for j in journals)
        days_since_journal = whole_days(latest, now)
        if days_since_journal >= t.HALT_NO_JOURNAL_DAYS:
            return HaltCheckContext(
                reason=HaltReason.NO_JOURNALING,
                days_since_last_journal=days_since_journal,
            )

    halt_journals = [j for j in journals if j.is_halt_check]
    if halt_journals:
        latest_halt = max(j.created_at for j in halt_journals)
        days_since_halt = whole_days(latest_halt, now)
        if days_since_halt >= t.HALT_PERIODIC_DAYS:
            return HaltCheckContext(
                reason=HaltReason.PERIODIC_CHECK,
                days_since_last_halt=days_since_halt,
            )
    elif len(journals) >= t.HALT_FIRST_MIN_JOURNALS:
        return HaltCheckContext(reason=HaltReason.FIRST_HALT)

    return None
