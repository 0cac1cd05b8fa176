"""Unit tests for RelayConfig and Settings.

Tests configuration validation and environment variable handling.
No mocks - uses real environment variables via monkeypatch.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from relay_probe.config import RelayConfig
from relay_probe.settings import Settings

# ============================================================================
# RelayConfig
# ============================================================================


class TestRelayConfigValidation:
    """Tests for RelayConfig field validation."""

    def test_defaults(self) -> None:
        """RelayConfig targets the fixed sandbox path and flushes once."""
        config = RelayConfig()
        assert config.input_path == Path("/sandbox/input.txt")
        assert config.flush_each_unit is False

    def test_path_from_string(self) -> None:
        """input_path accepts strings."""
        config = RelayConfig(input_path="/tmp/fixture.bin")  # type: ignore[arg-type]
        assert config.input_path == Path("/tmp/fixture.bin")

    def test_extra_fields_forbidden(self) -> None:
        """RelayConfig rejects unknown fields."""
        with pytest.raises(ValidationError):
            RelayConfig(retries=3)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """RelayConfig is immutable after creation."""
        config = RelayConfig()
        with pytest.raises(ValidationError):
            config.flush_each_unit = True  # type: ignore[misc]


# ============================================================================
# Settings
# ============================================================================


class TestSettings:
    """Tests for environment-driven Settings."""

    def test_default_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No env var leaves the log level unset."""
        monkeypatch.delenv("RELAY_PROBE_LOG_LEVEL", raising=False)
        assert Settings().log_level is None

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """RELAY_PROBE_LOG_LEVEL is read and normalized to upper case."""
        monkeypatch.setenv("RELAY_PROBE_LOG_LEVEL", " debug ")
        assert Settings().log_level == "DEBUG"

    def test_empty_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty env var counts as unset."""
        monkeypatch.setenv("RELAY_PROBE_LOG_LEVEL", "")
        assert Settings().log_level is None

    @pytest.mark.parametrize("value", ["verbose", "LOUD", "10"])
    def test_unknown_log_level_falls_back(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Unknown level names fall back to the default instead of failing."""
        monkeypatch.setenv("RELAY_PROBE_LOG_LEVEL", value)
        assert Settings().log_level is None

    def test_unrelated_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown RELAY_PROBE_ variables are ignored."""
        monkeypatch.setenv("RELAY_PROBE_INPUT_PATH", "/etc/passwd")
        assert not hasattr(Settings(), "input_path")
