from datetime import timedelta

from mentorme.features.patterns.detectors import (
    activity_gap_days,
    detect_struggling_pattern,
    whole_days,
    whole_hours,
)
from mentorme.tests.builders import goal, habit, journal


def test_whole_days_truncates_toward_zero(now):
    assert whole_days(now - timedelta(hours=71), now) == 2
    assert whole_days(now - timedelta(hours=72), now) == 3
    # A deadline 5 hours in the past is still "today"
    assert whole_days(now, now - timedelta(hours=5)) == 0


def test_whole_hours_truncates(now):
    assert whole_hours(now, now + timedelta(minutes=59)) == 0
    assert whole_hours(now, now + timedelta(hours=5, minutes=30)) == 5


def test_activity_gap_sentinel_when_no_journals(now):
    assert activity_gap_days([], now) == 999


def test_activity_gap_uses_most_recent_entry(now):
    journals = [journal(now, days_ago=10), journal(now, days_ago=4)]
    assert activity_gap_days(journals, now) == 4


def test_struggling_none_without_goals_or_habits(now):
    assert detect_struggling_pattern([], [], [journal(now, days_ago=9)], now) is None


def test_struggling_from_oldest_stuck_goal(now):
    goals = [goal(now, progress=2, age_days=4), goal(now, progress=1, age_days=6)]
    assert detect_struggling_pattern(goals, [], [], now) == 6


def test_recent_journal_suppresses_goal_signal(now):
    goals = [goal(now, progress=2, age_days=6)]
    assert detect_struggling_pattern(goals, [], [journal(now, days_ago=1)], now) is None


def test_struggling_falls_back_to_idle_habit(now):
    goals = [goal(now, progress=2, age_days=6)]
    habits = [habit(now, streak=0, age_days=5), habit(now, streak=3, age_days=30)]
    # Goal signal suppressed by a recent journal; the idle habit still counts
    assert detect_struggling_pattern(goals, habits, [journal(now)], now) == 5


def test_young_items_are_not_struggling(now):
    goals = [goal(now, progress=0, age_days=2)]
    habits = [habit(now, streak=0, age_days=2)]
    assert detect_struggling_pattern(goals, habits, [], now) is None
