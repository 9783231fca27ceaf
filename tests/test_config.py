"""
Tests for sanitizer configuration.

Tests cover:
- Defaults
- Environment and .env overrides
- Rejection of malformed patterns at startup
"""

import re

import pytest

from sanitizer.config import SanitizerConfig, load_config
from sanitizer.masking import DEFAULT_MASK, DEFAULT_SENSITIVE_PATTERN


class TestSanitizerConfig:
    """Test suite for SanitizerConfig."""

    def test_defaults(self):
        config = SanitizerConfig()

        assert config.sensitive_pattern == DEFAULT_SENSITIVE_PATTERN
        assert config.mask == DEFAULT_MASK

    def test_compile(self):
        assert isinstance(SanitizerConfig().compile(), re.Pattern)

    def test_compile_disabled(self):
        assert SanitizerConfig(sensitive_pattern=None).compile() is None

    def test_invalid_pattern_rejected(self):
        """A malformed pattern is the one hard failure allowed."""
        with pytest.raises(ValueError, match="Invalid sensitive pattern"):
            SanitizerConfig(sensitive_pattern="'password'=('")

    def test_frozen(self):
        config = SanitizerConfig()

        with pytest.raises(AttributeError):
            config.mask = "x"


class TestLoadConfig:
    """Test suite for load_config()."""

    def test_defaults_without_environment(self, tmp_path):
        config = load_config(str(tmp_path / "missing.env"))

        assert config == SanitizerConfig()

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SENTINEL_SENSITIVE_PATTERN", r"secret=\S+")
        monkeypatch.setenv("SENTINEL_MASK", "secret=***")

        config = load_config(str(tmp_path / "missing.env"))

        assert config.sensitive_pattern == r"secret=\S+"
        assert config.mask == "secret=***"

    def test_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text('SENTINEL_MASK="<redacted>"\n')

        config = load_config(str(env_file))

        assert config.mask == "<redacted>"
        assert config.sensitive_pattern == DEFAULT_SENSITIVE_PATTERN

    def test_invalid_pattern_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SENTINEL_SENSITIVE_PATTERN", "(unclosed")

        with pytest.raises(ValueError):
            load_config(str(tmp_path / "missing.env"))
