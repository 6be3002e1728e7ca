import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TAG_EMOJIS", "TAG_SEARCH_URL", "TOAST_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)
