import logging
from typing import List, Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Mentor service settings, read from the environment and ``.env``."""

    ENV: str = "development"
    CONFIG_STRICT: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Summarizer (Groq). Disabled or keyless means canned insights and keyword themes.
    GROQ_API_KEY: Optional[str] = None
    SUMMARIZER_ENABLED: bool = True
    SUMMARIZER_MODEL: str = "llama-3.1-8b-instant"
    SUMMARIZER_TIMEOUT_SECONDS: float = 8.0
    SUMMARIZER_MAX_TOKENS: int = 80
    SUMMARIZER_TEMPERATURE: float = 0.4

    # Tracing
    OTEL_ENABLED: bool = False
    OTEL_EXPORTER: str = "console"  # console | memory

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def summarizer_available(self) -> bool:
        return bool(self.SUMMARIZER_ENABLED and self.GROQ_API_KEY)


settings = Settings()


def validate_config(
    strict: Optional[bool] = None,
    settings_obj: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Check that an enabled summarizer has credentials.

    Strict mode raises RuntimeError; otherwise the gap is logged and the
    service runs on its deterministic fallbacks. Only key names are logged.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger("mentorme")
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    if not getattr(cfg, "SUMMARIZER_ENABLED", False) or getattr(cfg, "GROQ_API_KEY", None):
        return True

    message = "Missing required configuration: GROQ_API_KEY (summarizer will use fallbacks)"
    if strict_mode:
        raise RuntimeError(message)
    log.warning(message)
    return True
