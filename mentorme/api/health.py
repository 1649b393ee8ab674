import logging

from fastapi import APIRouter

from mentorme.core.config import settings
from mentorme.core.logging import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

root_router = APIRouter(tags=["health"])


@root_router.get("/healthz")
def healthz():
    return {"status": "ok"}


@root_router.get("/readyz")
def readyz():
    """Always ready; reports whether insights come from Groq or the canned fallbacks."""
    binding = "groq" if settings.summarizer_available else "fallback"
    logger.info("health.ready", extra={"summarizer": binding})
    return {"status": "ok", "summarizer": binding}
