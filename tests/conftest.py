import pytest

from pathjoin.utils import LOG_LEVEL_ENV, STYLE_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's shell or .env settings out of the tests."""
    monkeypatch.delenv(STYLE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
