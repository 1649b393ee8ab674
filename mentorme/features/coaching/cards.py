"""
Coaching card rendering.

One renderer per UserStateType. Renderers are pure lookups over the typed
state context: no I/O, no clock, no randomness.
"""

from typing import Callable, Dict

from mentorme.models.coaching import CardUrgency, MentorAction, MentorCoachingCard
from mentorme.models.user_state import (
    BalancedContext,
    ComebackContext,
    DiscoverChatContext,
    DiscoverHabitCheckingContext,
    DiscoverMilestonesContext,
    HabitsAndGoalsContext,
    HaltCheckContext,
    HaltReason,
    MiniWinContext,
    OnlyGoalsContext,
    OnlyHabitsContext,
    OnlyJournalsContext,
    StalledGoalContext,
    StreakAtRiskContext,
    UrgentDeadlineContext,
    UserState,
    UserStateType,
    WinningContext,
)

JOURNAL_SCREEN = "GuidedJournalingScreen"
CHECK_IN = {"isCheckIn": True}

URGENCY_BY_STATE = {
    UserStateType.URGENT_DEADLINE: CardUrgency.URGENT,
    UserStateType.STREAK_AT_RISK: CardUrgency.URGENT,
    UserStateType.STALLED_GOAL: CardUrgency.ATTENTION,
    UserStateType.MINI_WIN: CardUrgency.ATTENTION,
    UserStateType.COMEBACK: CardUrgency.ATTENTION,
    UserStateType.NEEDS_HALT_CHECK: CardUrgency.ATTENTION,
    UserStateType.WINNING: CardUrgency.CELEBRATION,
}

HALT_LEGEND = (
    "HALT stands for:\n"
    "• **H**ungry - Physical needs\n"
    "• **A**ngry - Emotions\n"
    "• **L**onely - Connection\n"
    "• **T**ired - Rest\n\n"
)


def urgency_for(state: UserState) -> CardUrgency:
    return URGENCY_BY_STATE.get(state.type, CardUrgency.INFO)


def render_card(state: UserState) -> MentorCoachingCard:
    message, primary, secondary = _RENDERERS[state.type](state.context)
    return MentorCoachingCard(
        state=state,
        message=message,
        primary_action=primary,
        secondary_action=secondary,
        urgency=urgency_for(state),
    )


def _new_user(_ctx):
    message = (
        "👋 Welcome!\n\n"
        "I'm your personal mentor, here to help you grow through reflection and intentional action.\n\n"
        "Let's start simple: Complete your first guided reflection. "
        "I'll ask you a few questions to help you discover what you want to work on.\n\n"
        "After that, you can turn those insights into goals and habits. Sound good?"
    )
    return (
        message,
        MentorAction.navigate("Start First Reflection", JOURNAL_SCREEN, CHECK_IN),
        MentorAction.chat("Chat with Me", "Hi! I'm new here. Can you explain how MentorMe works?"),
    )


def _urgent_deadline(ctx: UrgentDeadlineContext):
    goal, hours = ctx.goal, ctx.hours_remaining
    message = (
        f"⚡ Focus time: {goal.title}\n\n"
        f"You have {hours} hours until your deadline, and you're at {goal.current_progress}% progress.\n\n"
        "Let's make the most of the time you have. "
        "What's the most important thing you can accomplish today?"
    )
    return (
        message,
        MentorAction.navigate("Take Action", "Goals"),
        MentorAction.chat(
            "Prioritize with Me",
            f"I have {hours} hours left for {goal.title}. Help me figure out what to focus on.",
        ),
    )


def _streak_at_risk(ctx: StreakAtRiskContext):
    habit = ctx.habit
    message = (
        f"🔥 You're on a {habit.current_streak}-day streak with {habit.title}!\n\n"
        f"That's {habit.current_streak} days of showing up for yourself. "
        "You're building something real here.\n\n"
        f"Keep the momentum going - did you complete {habit.title.lower()} today?"
    )
    return (
        message,
        MentorAction.quick_action("✓ Mark Complete", {"action": "completeHabit", "habitId": habit.id}),
        MentorAction.navigate("View All Habits", "Habits"),
    )


def _stalled_goal(ctx: StalledGoalContext):
    goal = ctx.goal
    message = (
        f"💪 Let's get \"{goal.title}\" moving!\n\n"
        f"You set this goal {ctx.days} days ago - that shows you care about it. "
        f"Progress is at {goal.current_progress}%, so there's plenty of opportunity ahead.\n\n"
        "Sometimes the first steps are the hardest. What's one small action you could take today?"
    )
    return (
        message,
        MentorAction.navigate("Take Action", "Goals"),
        MentorAction.chat(
            "Get Unstuck",
            f"I want to make progress on {goal.title}. Can you help me figure out my next step?",
        ),
    )


def _mini_win(ctx: MiniWinContext):
    goal = ctx.goal
    message = (
        f"🚀 Let's get a quick win on {goal.title}!\n\n"
        "Starting is often the hardest part, and you don't need to do everything today.\n\n"
        "Progress beats perfection. What's one small step - just 5 minutes - you could take right now?"
    )
    return (
        message,
        MentorAction.navigate("Take Action", "Goals"),
        MentorAction.chat(
            "Break It Down",
            f"I want to work on {goal.title}. Help me figure out a tiny first step I can take today.",
        ),
    )


def _comeback(ctx: ComebackContext):
    days = ctx.days
    message = (
        "👋 Hey, welcome back!\n\n"
        f"It's been {days} days since you last checked in. "
        "Life gets busy - that's completely normal.\n\n"
        "What matters is that you're here now. Ready to reconnect with your goals?\n\n"
        f"How have these {days} days been?"
    )
    return (
        message,
        MentorAction.navigate(
            "Check In",
            JOURNAL_SCREEN,
            {"isCheckIn": True, "prompt": "Welcome back! What's been happening? Any wins? Any challenges?"},
        ),
        MentorAction.navigate("Review Goals", "Goals"),
    )


def _halt_check(ctx: HaltCheckContext):
    if ctx.reason == HaltReason.STRESS_KEYWORDS:
        message = (
            "🛑 I noticed some stress in your recent journal entries.\n\n"
            "When we're overwhelmed, it's easy to forget our basic needs. "
            "Let's do a quick HALT check - it only takes 3-5 minutes.\n\n"
            "HALT stands for:\n"
            "• **H**ungry - Are you nourished?\n"
            "• **A**ngry - Are you frustrated?\n"
            "• **L**onely - Are you connected?\n"
            "• **T**ired - Are you rested?\n\n"
            "Checking in on these basic needs can make a big difference."
        )
    elif ctx.reason == HaltReason.NO_JOURNALING:
        message = (
            "🛑 It's been a while since you checked in.\n\n"
            "When life gets hectic, it's easy to ignore our basic needs. "
            "A quick HALT check can help you reconnect with yourself.\n\n"
            + HALT_LEGEND
            + "Takes 3-5 minutes and can really help."
        )
    else:
        days = ctx.days_since_last_halt if ctx.days_since_last_halt is not None else 7
        message = (
            "🛑 Time for a HALT check?\n\n"
            f"It's been {days}+ days since you last checked in on your basic needs.\n\n"
            + HALT_LEGEND
            + "When these needs go unmet, everything else gets harder. Quick 3-5 minute check-in?"
        )
    return (
        message,
        MentorAction.navigate("Take HALT Check", JOURNAL_SCREEN, {"isHaltCheck": True}),
        MentorAction.navigate("Regular Check-In", JOURNAL_SCREEN, CHECK_IN),
    )


def _discover_habit_checking(_ctx: DiscoverHabitCheckingContext):
    message = (
        "✅ Nice work completing your reflection!\n\n"
        "Here's a key workflow you might have missed:\n\n"
        "After you complete a guided reflection, you can check off your \"Daily Reflection\" "
        "habit on the Habits screen. This tracks your consistency and builds your reflection streak! 🔥\n\n"
        "Let me show you →"
    )
    return (
        message,
        MentorAction.navigate("Check Off Habit", "Habits"),
        MentorAction.navigate("Reflect Again", JOURNAL_SCREEN, CHECK_IN),
    )


def _discover_chat(ctx: DiscoverChatContext):
    if ctx.goal is not None:
        done = f"set a goal for '{ctx.goal.title}'"
    else:
        noun = "entry" if ctx.journal_count == 1 else "entries"
        done = f"written {ctx.journal_count} journal {noun}"
    message = (
        "Did you know you can chat with me anytime?\n\n"
        f"You've {done} - that's great progress!\n\n"
        "Whenever you're stuck, need motivation, or want to think through something, "
        "just tap \"Chat with Mentor\" below. "
        "I'm here to help you work through challenges and celebrate wins.\n\n"
        "Want to try it now?"
    )
    if ctx.goal is not None:
        secondary = MentorAction.navigate("View Goals", "Goals")
    else:
        secondary = MentorAction.navigate("Keep Journaling", "Journal")
    return message, MentorAction.navigate("Try Chatting", "ChatScreen"), secondary


def _discover_milestones(ctx: DiscoverMilestonesContext):
    goal = ctx.goal
    message = (
        f"🎯 Pro tip: Break down '{goal.title}' into milestones!\n\n"
        "Big goals can feel overwhelming. Milestones let you break them into smaller, trackable steps.\n\n"
        "Each milestone becomes a mini-celebration - and celebrating progress keeps you motivated.\n\n"
        "Want to add your first milestone?"
    )
    return (
        message,
        MentorAction.navigate("Add Milestones", "Goals"),
        MentorAction.chat("Help Me Plan", f"Can you help me break down '{goal.title}' into smaller milestones?"),
    )


def _winning(ctx: WinningContext):
    wins = []
    if ctx.streak_habit is not None:
        wins.append(f"• {ctx.streak}-day {ctx.streak_habit.title} streak 🔥")
    if ctx.progress_goal is not None:
        wins.append(f"• \"{ctx.progress_goal.title}\" at {ctx.progress_goal.current_progress}%")
    if ctx.journal_count > 0:
        wins.append(f"• {ctx.journal_count} thoughtful reflections this week 📝")
    message = (
        "🎉 You're crushing it!\n\n"
        "Look at what you've built:\n" + "\n".join(wins) + "\n\n"
        "This momentum is real. You're taking action, reflecting on your progress, "
        "and showing up consistently. That's how growth happens.\n\n"
        "What's your next challenge?"
    )
    return (
        message,
        MentorAction.navigate("Set New Goal", "AddGoal"),
        MentorAction.chat("What's Next?", "I'm making good progress! What should I focus on next to keep growing?"),
    )


def _only_journals(ctx: OnlyJournalsContext):
    theme = ctx.theme
    message = (
        "📝 Your journaling practice is building powerful self-awareness!\n\n"
        f"I notice you've been reflecting on {theme}. That's valuable work.\n\n"
        "Want to amplify this? Turn these insights into action. "
        "Setting a goal gives your reflections a target to aim for.\n\n"
        "What's one thing you want to change or improve?"
    )
    return (
        message,
        MentorAction.navigate("Set a Goal", "Goals"),
        MentorAction.chat(
            "Explore Ideas",
            f"I've been journaling about {theme}. "
            "Help me figure out what goal would make sense based on my reflections.",
        ),
    )


def _only_habits(ctx: OnlyHabitsContext):
    habit = ctx.habit
    if habit.current_streak > 0:
        message = (
            f"💪 You're taking action with {habit.title}!\n\n"
            "That's great, but here's the secret: reflection amplifies progress.\n\n"
            "Taking a few minutes to journal about what's working and what's challenging "
            "helps you learn faster and adjust your approach.\n\n"
            f"How is {habit.title} really going for you?"
        )
    else:
        message = (
            f"💪 You've set up {habit.title} as a habit!\n\n"
            "Here's how to make it stick: reflection amplifies action.\n\n"
            "Before diving into the habit, take a moment to journal about why this matters "
            "to you and what success looks like.\n\n"
            f"Ready to reflect on {habit.title}?"
        )
    prompt = (
        f"How has your {habit.title} habit been serving you? What's working? What's challenging?"
    )
    return (
        message,
        MentorAction.navigate("Reflect", JOURNAL_SCREEN, {"isCheckIn": True, "prompt": prompt}),
        MentorAction.navigate("Track Progress", "Habits"),
    )


def _only_goals(ctx: OnlyGoalsContext):
    goal = ctx.goal
    message = (
        f"🎯 You've got a target: {goal.title}!\n\n"
        "Now let's build the daily actions that'll get you there.\n\n"
        "Goals are destinations. Habits are the vehicle. "
        "What's ONE small daily action that would move you toward this goal?"
    )
    return (
        message,
        MentorAction.navigate("Build a Habit", "Habits"),
        MentorAction.chat("Help Me Plan", f"I want to achieve {goal.title}. What daily habits would help me get there?"),
    )


def _habits_and_goals(ctx: HabitsAndGoalsContext):
    habit, goal = ctx.habit, ctx.goal
    if habit.current_streak > 0 or goal.current_progress > 0:
        message = (
            "You're building momentum! 💪\n\n"
            f"You're working on '{goal.title}' and maintaining your '{habit.title}' habit. "
            "That's the foundation of real change.\n\n"
            "One thing that'll amplify your progress: regular reflection. "
            "Journaling helps you learn what's working and adjust what's not.\n\n"
            "What's your next move?"
        )
        return (
            message,
            MentorAction.navigate(f"Track {habit.title}", "Habits"),
            MentorAction.navigate("Reflect on Progress", JOURNAL_SCREEN, CHECK_IN),
        )

    message = (
        f"You've set up {habit.title} and {goal.title}! 💪\n\n"
        "Now here's the key to making them stick: reflection first, action second.\n\n"
        "Taking a few minutes to journal about why these matter and what success looks like "
        "will make your actions more intentional.\n\n"
        "Ready to reflect?"
    )
    return (
        message,
        MentorAction.navigate("Reflect First", JOURNAL_SCREEN, CHECK_IN),
        MentorAction.navigate("View Habits", "Habits"),
    )


def _balanced(ctx: BalancedContext):
    if not ctx.has_data:
        message = (
            "Welcome! 👋\n\n"
            "I'm here to guide your growth journey. Start with reflection - understanding where "
            "you are helps us figure out where you want to go."
        )
        return (
            message,
            MentorAction.navigate("Reflect Now", JOURNAL_SCREEN, CHECK_IN),
            MentorAction.navigate("Explore Habits", "Habits"),
        )

    habit, goal, metrics = ctx.habit, ctx.goal, ctx.journaling_metrics
    has_progress = (
        (habit is not None and habit.current_streak > 0)
        or (goal is not None and goal.current_progress > 0)
        or (metrics is not None and metrics.entries_last_7_days > 0)
    )
    parts = ["You're building momentum! 🌟\n\n" if has_progress else "Let's get started! 🌟\n\n"]

    if habit is not None and goal is not None:
        if habit.current_streak > 0:
            line = f"You're on a {habit.current_streak}-day streak with '{habit.title}' and working toward '{goal.title}'"
            if goal.current_progress > 0:
                line += f" ({goal.current_progress}% complete)"
            parts.append(line + ".\n\n")
        else:
            parts.append(
                f"You've set up '{goal.title}' and '{habit.title}'. "
                "Now let's turn these into action through reflection.\n\n"
            )
    elif habit is not None:
        if habit.current_streak > 0:
            parts.append(f"You're maintaining a {habit.current_streak}-day streak with '{habit.title}'! 🔥\n\n")
        else:
            parts.append(f"You've set up '{habit.title}'. Start with reflection to clarify why this habit matters.\n\n")
    elif goal is not None:
        if goal.current_progress > 0:
            parts.append(f"You're making progress on '{goal.title}' - {goal.current_progress}% complete!\n\n")
        else:
            parts.append(
                f"You've set up '{goal.title}'. Reflect on why this goal matters and what success looks like.\n\n"
            )

    if metrics is not None:
        parts.append(f"{metrics.insight}\n\n")
    parts.append("What's your next move?")

    primary = (
        MentorAction.navigate("Track Habit", "Habits")
        if habit is not None
        else MentorAction.navigate("Update Progress", "Goals")
    )
    return "".join(parts), primary, MentorAction.navigate("Reflect", JOURNAL_SCREEN, CHECK_IN)


_RENDERERS: Dict[UserStateType, Callable] = {
    UserStateType.NEW_USER: _new_user,
    UserStateType.URGENT_DEADLINE: _urgent_deadline,
    UserStateType.STREAK_AT_RISK: _streak_at_risk,
    UserStateType.STALLED_GOAL: _stalled_goal,
    UserStateType.MINI_WIN: _mini_win,
    UserStateType.COMEBACK: _comeback,
    UserStateType.NEEDS_HALT_CHECK: _halt_check,
    UserStateType.DISCOVER_HABIT_CHECKING: _discover_habit_checking,
    UserStateType.DISCOVER_CHAT: _discover_chat,
    UserStateType.DISCOVER_MILESTONES: _discover_milestones,
    UserStateType.WINNING: _winning,
    UserStateType.ONLY_JOURNALS: _only_journals,
    UserStateType.ONLY_HABITS: _only_habits,
    UserStateType.ONLY_GOALS: _only_goals,
    UserStateType.HABITS_AND_GOALS: _habits_and_goals,
    UserStateType.BALANCED: _balanced,
}
