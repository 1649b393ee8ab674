"""
Startup checks for the mentor service environment.

Set SKIP_ENV_VALIDATION=1 to bypass them (tests, one-off scripts).
"""

import os
from typing import List, Optional

from mentorme.core.config import settings

KNOWN_ENVS = ("development", "test", "staging", "production")
KNOWN_EXPORTERS = ("console", "memory")


class EnvValidationError(RuntimeError):
    pass


def _positive(cfg, name: str) -> Optional[str]:
    value = getattr(cfg, name, None)
    if value is not None and value <= 0:
        return f"{name} must be positive"
    return None


def _problems(mode: str, cfg) -> List[str]:
    problems = []
    if mode not in KNOWN_ENVS:
        problems.append(f"ENV must be one of {', '.join(KNOWN_ENVS)}")
    for name in ("SUMMARIZER_TIMEOUT_SECONDS", "SUMMARIZER_MAX_TOKENS"):
        problem = _positive(cfg, name)
        if problem:
            problems.append(problem)
    if getattr(cfg, "OTEL_EXPORTER", "console") not in KNOWN_EXPORTERS:
        problems.append(f"OTEL_EXPORTER must be one of {', '.join(KNOWN_EXPORTERS)}")
    # Production must not silently degrade to canned insights
    if mode == "production" and getattr(cfg, "SUMMARIZER_ENABLED", False) and not getattr(cfg, "GROQ_API_KEY", None):
        problems.append("GROQ_API_KEY is required in production")
    return problems


def validate_env(env: Optional[str] = None, settings_obj=None) -> bool:
    """Raise EnvValidationError listing every rule the environment breaks."""
    if os.getenv("SKIP_ENV_VALIDATION") == "1":
        return True

    cfg = settings_obj or settings
    mode = (env or getattr(cfg, "ENV", None) or "development").lower()
    problems = _problems(mode, cfg)
    if problems:
        raise EnvValidationError("; ".join(problems))
    return True
