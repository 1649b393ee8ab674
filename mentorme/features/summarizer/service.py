"""
Summarizer collaborator.

The mentor engines only depend on the ``Summarizer`` protocol. Production
binds it to Groq; tests pass fakes. Every call site goes through
``call_summarizer`` so a slow or failing provider degrades to the local
fallback once, without retries.
"""

import asyncio
from enum import Enum
from typing import Mapping, Optional, Protocol, Sequence

import groq

from mentorme.core.config import Settings
from mentorme.core.errors import SummarizerError
from mentorme.core.logging import log_event
from mentorme.features.summarizer import prompts


class SummaryTask(str, Enum):
    JOURNALING_INSIGHT = "journaling_insight"
    JOURNAL_THEME = "journal_theme"


class Summarizer(Protocol):
    async def summarize(
        self,
        texts: Sequence[str],
        *,
        task: SummaryTask,
        hints: Optional[Mapping[str, object]] = None,
    ) -> Optional[str]:
        ...


async def call_summarizer(
    summarizer: Optional[Summarizer],
    texts: Sequence[str],
    *,
    task: SummaryTask,
    timeout: float,
    hints: Optional[Mapping[str, object]] = None,
) -> Optional[str]:
    """Invoke the summarizer once; return cleaned text or None on any failure."""
    if summarizer is None or not texts:
        return None

    try:
        result = await asyncio.wait_for(
            summarizer.summarize(texts, task=task, hints=hints),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        log_event(
            "warning",
            "summarizer.fallback",
            event_type="summarizer",
            error_code="timeout",
            extra={"task": task.value, "timeout_seconds": timeout},
        )
        return None
    except Exception as exc:
        log_event(
            "warning",
            "summarizer.fallback",
            event_type="summarizer",
            error_code=getattr(exc, "code", "summarizer_error"),
            extra={"task": task.value, "error": exc},
        )
        return None

    if not result or not result.strip():
        log_event(
            "warning",
            "summarizer.fallback",
            event_type="summarizer",
            error_code="empty_response",
            extra={"task": task.value},
        )
        return None
    return result


class GroqSummarizer:
    """Summarizer backed by the Groq chat completions API."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "llama-3.1-8b-instant",
        max_tokens: int = 80,
        temperature: float = 0.4,
        client=None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client or groq.AsyncGroq(api_key=api_key)

    async def summarize(
        self,
        texts: Sequence[str],
        *,
        task: SummaryTask,
        hints: Optional[Mapping[str, object]] = None,
    ) -> Optional[str]:
        if task == SummaryTask.JOURNAL_THEME:
            prompt = prompts.build_theme_prompt(texts)
        else:
            prompt = prompts.build_insight_prompt(texts, hints)

        try:
            completion = await self._client.chat.completions.create(
                messages=[
                    {"role": "system", "content": prompts.SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except groq.GroqError as exc:
            raise SummarizerError(f"Groq request failed: {exc.__class__.__name__}") from exc

        if not completion.choices:
            return None
        content = completion.choices[0].message.content or ""

        if task == SummaryTask.JOURNAL_THEME:
            cleaned = prompts.clean_theme(content)
        else:
            cleaned = prompts.clean_insight(content)
        return cleaned or None


def build_summarizer(settings: Settings) -> Optional[Summarizer]:
    """Production binding; None means every caller uses its local fallback."""
    if not settings.SUMMARIZER_ENABLED or not settings.GROQ_API_KEY:
        return None
    return GroqSummarizer(
        settings.GROQ_API_KEY,
        model=settings.SUMMARIZER_MODEL,
        max_tokens=settings.SUMMARIZER_MAX_TOKENS,
        temperature=settings.SUMMARIZER_TEMPERATURE,
    )
