"""
Configuration helper tests.
"""

import pytest

from pathjoin.schemas import PathStyle
from pathjoin.utils import default_style, get_env, host_style, log_level


class TestGetEnv:

    def test_returns_value(self, monkeypatch) -> None:
        monkeypatch.setenv("PATHJOIN_TEST_VAR", "x")
        assert get_env("PATHJOIN_TEST_VAR") == "x"

    def test_returns_default(self, monkeypatch) -> None:
        monkeypatch.delenv("PATHJOIN_TEST_VAR", raising=False)
        assert get_env("PATHJOIN_TEST_VAR", "fallback") == "fallback"

    def test_missing_without_default_raises(self, monkeypatch) -> None:
        monkeypatch.delenv("PATHJOIN_TEST_VAR", raising=False)
        with pytest.raises(ValueError, match="PATHJOIN_TEST_VAR"):
            get_env("PATHJOIN_TEST_VAR")


class TestDefaultStyle:

    def test_falls_back_to_host(self) -> None:
        assert default_style() is host_style()

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PATHJOIN_STYLE", " Windows ")
        assert default_style() is PathStyle.WINDOWS

    def test_unknown_style_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("PATHJOIN_STYLE", "vms")
        with pytest.raises(ValueError, match="PATHJOIN_STYLE must be one of"):
            default_style()


class TestLogLevel:

    def test_default_is_warning(self) -> None:
        assert log_level() == "WARNING"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PATHJOIN_LOG_LEVEL", "debug")
        assert log_level() == "DEBUG"
