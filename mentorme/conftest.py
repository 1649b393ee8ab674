# mentorme/conftest.py
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add repository root to PYTHONPATH so `import mentorme` works without install
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Tests never talk to Groq
os.environ.setdefault("SUMMARIZER_ENABLED", "false")


@pytest.fixture
def now():
    """Fixed clock: Wednesday 2025-06-18 15:00 UTC."""
    return datetime(2025, 6, 18, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def monday():
    """Fixed clock on a Monday: 2025-06-16 09:00 UTC."""
    return datetime(2025, 6, 16, 9, 0, tzinfo=timezone.utc)
