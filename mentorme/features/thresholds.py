"""
Mentor tuning constants.

Every engine reads its thresholds from here so the whole mentor can be
retuned in one place. Percentages are 0-100 progress values.
"""

from mentorme.models.mentor import JournalingFrequency, JournalingQuality

# Journaling frequency (entries in trailing 7 days)
DAILY_JOURNALING_MIN = 5
REGULAR_JOURNALING_MIN = 3
OCCASIONAL_JOURNALING_MIN = 1

# Journaling depth (average words per entry, trailing 30 days)
DEEP_WORD_COUNT_MIN = 150
MODERATE_WORD_COUNT_MIN = 75
SHALLOW_WORD_COUNT_MIN = 30

CONSISTENCY_MIN_UNIQUE_DAYS = 3

FREQUENCY_SCORES = {
    JournalingFrequency.DAILY: 40,
    JournalingFrequency.REGULAR: 30,
    JournalingFrequency.OCCASIONAL: 20,
    JournalingFrequency.SPORADIC: 10,
    JournalingFrequency.ABSENT: 0,
}

QUALITY_SCORES = {
    JournalingQuality.DEEP: 40,
    JournalingQuality.MODERATE: 30,
    JournalingQuality.SHALLOW: 20,
    JournalingQuality.MINIMAL: 10,
}

CONSISTENCY_BONUS = 20

# Deadlines
URGENT_DEADLINE_MAX_HOURS = 24
URGENT_FOCUS_MAX_DAYS = 3

# State detection
STREAK_PROTECTION_MIN = 7
STALLED_GOAL_MIN_DAYS = 3
STALLED_GOAL_MAX_PROGRESS = 10
STRUGGLING_MIN_DAYS = 3
STRUGGLING_MAX_PROGRESS = 5
COMEBACK_MIN_DAYS = 3
NO_JOURNAL_SENTINEL = 999
FOCUS_REFLECTION_MIN_DAYS = 2
LOW_PROGRESS_MAX = 30
RECOMMEND_REFLECTION_MIN_DAYS = 3

# Focus priorities (higher wins)
URGENT_GOAL_BASE_PRIORITY = 90
URGENT_GOAL_DAY_PENALTY = 10
MINI_WIN_PRIORITY = 65
STALLED_GOAL_BASE_PRIORITY = 60
STALLED_GOAL_PROGRESS_MULTIPLIER = 0.5
CELEBRATION_PRIORITY = 40
REFLECTION_PRIORITY = 35
NEW_USER_PRIORITY = 30

# Celebrations
STREAK_MILESTONES = (7, 14, 21, 30, 60, 90)
STREAK_CELEBRATION_INTERVAL = 7
HALFWAY_PROGRESS_MIN = 50
HALFWAY_PROGRESS_MAX = 55
FINISH_LINE_PROGRESS_MIN = 75
FINISH_LINE_PROGRESS_MAX = 80

# Winning
WINNING_EVALUATION_DAYS = 14
WINNING_COMPLETION_RATE = 0.8
WINNING_JOURNALS_PER_WEEK = 4

# Challenges
CHALLENGE_STREAK_THRESHOLD = 7
CHALLENGE_PROGRESS_THRESHOLD = 50
CHALLENGE_JOURNAL_THRESHOLD = 3
MAX_CHALLENGES = 2

# Action recommendations
MAX_STALLED_GOALS = 2
CHALLENGE_READY_THRESHOLD = 0.7
ON_TRACK_PROGRESS_MIN = 40

# HALT (Hungry, Angry, Lonely, Tired) check-ins
HALT_RECENT_DAYS = 7
HALT_NO_JOURNAL_DAYS = 3
HALT_PERIODIC_DAYS = 7
HALT_FIRST_MIN_JOURNALS = 5

STRESS_KEYWORDS = (
    "stress",
    "overwhelm",
    "exhausted",
    "tired",
    "frustrated",
    "angry",
    "alone",
    "lonely",
    "isolated",
    "anxious",
    "panic",
    "burnt out",
    "burnout",
    "can't cope",
    "too much",
    "struggling",
)

# Journal themes, checked in order
THEME_KEYWORDS = (
    ("fitness", ("fitness", "exercise", "workout")),
    ("career", ("work", "career", "job")),
    ("relationships", ("relationship", "family", "friends")),
    ("learning", ("learn", "study", "skill")),
)
DEFAULT_THEME = "personal growth"
THEME_SAMPLE_DAYS = 7
THEME_SAMPLE_SIZE = 5
