"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides an isolated environment and a mocked Rich console for all tests
"""

import os
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console


@pytest.fixture
def env():
    """Provide os.environ, restored to its original contents after the test."""
    with patch.dict(os.environ):
        yield os.environ


@pytest.fixture
def mock_console():
    """Replace the bootstrap Rich console with a mock."""
    console = MagicMock(spec=Console)
    with patch("typed_env.bootstrap.console", console):
        yield console


@pytest.fixture
def not_unicode_value():
    """A value that os.environ holds as a lone surrogate (undecodable bytes)."""
    if os.name == "nt":
        pytest.skip("Windows environment values are always valid text")
    return "caf\udce9"
