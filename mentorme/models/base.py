"""Shared building blocks for snapshot models."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so every comparison is between aware values."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class SnapshotModel(BaseModel):
    """Immutable input record. Callers build a fresh snapshot per request."""

    model_config = ConfigDict(frozen=True)
