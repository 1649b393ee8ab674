from enum import Enum
from typing import List, Optional

from pydantic import Field

from mentorme.models.base import SnapshotModel, UtcDatetime

HALT_REFLECTION_TYPE = "halt"


class JournalEntryType(str, Enum):
    QUICK_NOTE = "quick_note"
    GUIDED_JOURNAL = "guided_journal"
    STRUCTURED_JOURNAL = "structured_journal"


class QAPair(SnapshotModel):
    question: str
    answer: str = ""


class JournalEntry(SnapshotModel):
    """
    A single journal entry.

    Quick notes carry free text in ``content``; guided journals carry
    question/answer pairs. Word counts only ever look at ``content``.
    """
    id: str
    created_at: UtcDatetime
    type: JournalEntryType = JournalEntryType.QUICK_NOTE
    reflection_type: Optional[str] = Field(None, description="Guided reflection template, e.g. 'halt'")
    content: Optional[str] = None
    qa_pairs: Optional[List[QAPair]] = None
    goal_ids: List[str] = Field(default_factory=list)

    @property
    def word_count(self) -> int:
        if not self.content:
            return 0
        return len(self.content.split())

    @property
    def text(self) -> str:
        """Readable text for keyword scans and summarizer prompts."""
        if self.type == JournalEntryType.GUIDED_JOURNAL and self.qa_pairs:
            return "\n".join(f"{pair.question}\n{pair.answer}" for pair in self.qa_pairs)
        return self.content or ""

    @property
    def is_halt_check(self) -> bool:
        return (
            self.type == JournalEntryType.GUIDED_JOURNAL
            and bool(self.qa_pairs)
            and self.reflection_type == HALT_REFLECTION_TYPE
        )


class FeatureDiscoveryFlags(SnapshotModel):
    """Read-only record of which app features the user has already found."""
    has_completed_guided_reflection: bool = False
    has_checked_off_reflection_habit: bool = False
    has_opened_chat_screen: bool = False
    has_created_milestone: bool = False
