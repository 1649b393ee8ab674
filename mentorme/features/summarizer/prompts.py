"""Prompt builders for the summarizer tasks."""

from typing import Mapping, Optional, Sequence

THEME_ENTRY_CHARS = 200
INSIGHT_SNIPPET_CHARS = 150

SYSTEM_PROMPT = (
    "You are a warm, empathetic personal-growth mentor. "
    "Answer briefly and follow the requested format exactly."
)


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit]


def build_theme_prompt(texts: Sequence[str]) -> str:
    entries = "\n".join(f"- {_truncate(text, THEME_ENTRY_CHARS)}" for text in texts)
    return (
        "Analyze these recent journal entries and identify the main theme or area of focus.\n\n"
        f"Recent reflections:\n{entries}\n\n"
        "Respond with ONLY 1-3 words describing the primary theme. Examples:\n"
        '- "fitness"\n'
        '- "career growth"\n'
        '- "relationships"\n'
        '- "personal growth"\n'
        '- "health and wellness"\n'
        '- "learning"\n\n'
        "Theme:"
    )


def build_insight_prompt(texts: Sequence[str], hints: Optional[Mapping[str, object]] = None) -> str:
    hints = hints or {}
    entries = hints.get("entries_last_7_days", 0)
    words = float(hints.get("average_word_count", 0) or 0)
    consistency = "spread across multiple days" if hints.get("is_consistent") else "irregular"

    sample = ""
    if texts and texts[0]:
        sample = f'\n\nMost recent reflection: "{_truncate(texts[0], INSIGHT_SNIPPET_CHARS)}..."'

    return (
        "You're an empathetic mentor reviewing someone's journaling practice.\n\n"
        "Journaling metrics:\n"
        f"- Entries this week: {entries}\n"
        f"- Average length: {words:.0f} words\n"
        f"- Consistency: {consistency}{sample}\n\n"
        "Provide ONE sentence of supportive, personalized feedback. Be specific, warm, and "
        "encouraging. Focus on what they're doing well OR a gentle nudge to improve.\n\n"
        "Insight:"
    )


def clean_theme(raw: str) -> str:
    return raw.strip().lower().replace('"', "").replace("'", "").replace(".", "")


def clean_insight(raw: str) -> str:
    return raw.strip().replace('"', "")
