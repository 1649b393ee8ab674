from mentorme.features.challenges.engine import (
    PROGRESS_CHALLENGE,
    REFLECTION_CHALLENGE,
    STREAK_CHALLENGE,
    ChallengeGenerator,
)
from mentorme.features.recommendations.engine import ActionRecommender
from mentorme.models.goal import GoalStatus
from mentorme.models.mentor import ActionType
from mentorme.tests.builders import goal, habit, journal


class TestChallenges:
    def test_capped_at_two_in_order(self, now):
        challenges = ChallengeGenerator.generate(
            [goal(now, progress=10)], [habit(now, streak=2)], [], now
        )
        assert challenges == [STREAK_CHALLENGE, PROGRESS_CHALLENGE]

    def test_reflection_challenge_for_quiet_week(self, now):
        challenges = ChallengeGenerator.generate([goal(now, progress=80)], [habit(now, streak=9)], [], now)
        assert [c.key for c in challenges] == ["reflection_week"]

    def test_average_streak_at_threshold_skips_streak_challenge(self, now):
        habits = [habit(now, streak=4), habit(now, streak=10)]
        journals = [journal(now, days_ago=d) for d in (0, 1, 2)]

        assert ChallengeGenerator.generate([], habits, journals, now) == []

    def test_inactive_goals_ignored(self, now):
        paused = goal(now, progress=0, status=GoalStatus.ABANDONED)
        challenges = ChallengeGenerator.generate([paused], [], [], now)
        assert challenges == [REFLECTION_CHALLENGE]


class TestActionRecommendations:
    def test_low_progress_goals_capped_at_two(self, now):
        goals = [goal(now, title=f"Goal {i}", progress=i * 5) for i in range(3)]

        actions = ActionRecommender.recommend(goals, [habit(now)], [journal(now)], now)

        updates = [a for a in actions if a.type == ActionType.UPDATE_GOAL]
        assert [a.title for a in updates] == ["Review: Goal 0", "Review: Goal 1"]
        assert updates[1].description == "Only 5% complete - let's get this moving"

    def test_full_ordering(self, now):
        actions = ActionRecommender.recommend(
            [goal(now, progress=20), goal(now, progress=60), goal(now, progress=90)],
            [],
            [],
            now,
        )

        assert [a.type for a in actions] == [
            ActionType.UPDATE_GOAL,
            ActionType.START_HABIT,
            ActionType.REFLECT,
        ]

    def test_challenge_when_most_goals_on_track(self, now):
        goals = [goal(now, progress=p) for p in (40, 60, 90)]

        actions = ActionRecommender.recommend(goals, [habit(now)], [journal(now)], now)

        assert [a.type for a in actions] == [ActionType.ACCEPT_CHALLENGE]

    def test_never_journaled_means_reflect(self, now):
        actions = ActionRecommender.recommend([], [], [], now)
        assert [a.type for a in actions] == [ActionType.REFLECT]

    def test_may_be_empty(self, now):
        assert ActionRecommender.recommend([], [habit(now)], [journal(now, days_ago=2)], now) == []
