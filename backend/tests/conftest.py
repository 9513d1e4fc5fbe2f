import pytest

from objects_checker.config import get_settings
from objects_checker.validators import SeverityReporter


@pytest.fixture
def reporter() -> SeverityReporter:
    return SeverityReporter()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    monkeypatch.delenv("OBJECTS_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
