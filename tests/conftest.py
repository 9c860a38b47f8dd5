import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'tosca_catalog' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from tosca_catalog.core.stdlib_logging import reset_logging_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Drop TOSCA_CATALOG_* overrides and logging handlers leaking between tests."""
    for key in list(os.environ):
        if key.startswith("TOSCA_CATALOG_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_logging_for_tests()


