import os
import sys


# Ensure `src` is on sys.path so `import composable_rules` works from a plain checkout.
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import pytest

from composable_rules.config import get_settings, trace_enabled


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    monkeypatch.delenv("COMPOSABLE_RULES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMPOSABLE_RULES_TRACE", raising=False)
    get_settings.cache_clear()
    trace_enabled.cache_clear()
    yield
    get_settings.cache_clear()
    trace_enabled.cache_clear()
