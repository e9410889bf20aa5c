"""
ABOUTME: Unit tests for the string accessor
ABOUTME: Tests that values pass through unchanged in every access mode
"""

import logging

import pytest

from typed_env.exceptions import NotUnicodeError, RequiredNotPresentError
from typed_env.string import (
    get_env_string_optional,
    get_env_string_or_default,
    get_env_string_required,
)

NAME = "TYPED_ENV_TEST_STRING"

VALUES = ["hello", "  padded  ", "postgres://user:pw@host/db?x=1", "ünïcödé ✓", "=", "TRUE"]


class TestStringOptional:
    """Test get_env_string_optional."""

    def test_unset_returns_none(self, env):
        """Test that an unset variable gives no value."""
        env.pop(NAME, None)
        assert get_env_string_optional(NAME) is None

    @pytest.mark.parametrize("raw", VALUES)
    def test_value_is_returned_verbatim(self, env, raw):
        """Test that the value is returned unchanged."""
        env[NAME] = raw
        assert get_env_string_optional(NAME) == raw

    def test_empty_value_is_not_absent(self, env):
        """Test that an empty value is returned rather than None."""
        env[NAME] = ""
        assert get_env_string_optional(NAME) == ""


class TestStringOrDefault:
    """Test get_env_string_or_default."""

    def test_unset_returns_default(self, env):
        """Test that an unset variable gives the default."""
        env.pop(NAME, None)
        assert get_env_string_or_default(NAME, "plain") == "plain"

    @pytest.mark.parametrize("raw", VALUES)
    def test_value_is_returned_verbatim(self, env, raw):
        """Test that the value is returned unchanged."""
        env[NAME] = raw
        assert get_env_string_or_default(NAME, "default") == raw

    def test_not_unicode_returns_default(self, env, not_unicode_value):
        """Test that a non-text value falls back to the default."""
        env[NAME] = not_unicode_value
        assert get_env_string_or_default(NAME, "default") == "default"


class TestStringRequired:
    """Test get_env_string_required."""

    def test_unset_raises(self, env):
        """Test that an unset variable raises RequiredNotPresentError."""
        env.pop(NAME, None)
        with pytest.raises(RequiredNotPresentError, match=NAME):
            get_env_string_required(NAME)

    @pytest.mark.parametrize("raw", VALUES)
    def test_value_is_returned_verbatim(self, env, raw):
        """Test that the value is returned unchanged."""
        env[NAME] = raw
        assert get_env_string_required(NAME) == raw

    def test_not_unicode_raises(self, env, not_unicode_value):
        """Test that a non-text value raises NotUnicodeError."""
        env[NAME] = not_unicode_value
        with pytest.raises(NotUnicodeError):
            get_env_string_required(NAME)


class TestStringFallbackLogging:
    """Test non-text fallbacks and the warning emitted for each fallback."""

    def test_optional_not_unicode_returns_none(self, env, not_unicode_value):
        """Test that a non-text value gives no value."""
        env[NAME] = not_unicode_value
        assert get_env_string_optional(NAME) is None

    def test_optional_logs_one_warning(self, env, caplog):
        """Test that an unset variable logs exactly one warning."""
        env.pop(NAME, None)
        with caplog.at_level(logging.WARNING, logger="typed_env"):
            get_env_string_optional(NAME)
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert NAME in caplog.records[0].getMessage()

    def test_default_logs_one_warning(self, env, caplog):
        """Test that falling back to the default logs exactly one warning."""
        env.pop(NAME, None)
        with caplog.at_level(logging.WARNING, logger="typed_env"):
            get_env_string_or_default(NAME, "plain")
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "Using default 'plain'" in caplog.records[0].getMessage()

    def test_not_unicode_logs_one_warning(self, env, caplog, not_unicode_value):
        """Test that a non-text fallback logs exactly one warning."""
        env[NAME] = not_unicode_value
        with caplog.at_level(logging.WARNING, logger="typed_env"):
            get_env_string_or_default(NAME, "plain")
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
