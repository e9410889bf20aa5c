"""
ABOUTME: String environment variable accessor
ABOUTME: Returns values verbatim with no trimming or conversion
"""

from typing import Optional

from .lookup import get_optional, get_or_default, get_required


def get_env_string_optional(name: str) -> Optional[str]:
    """Get an environment variable as a string."""
    return get_optional(name, str)


def get_env_string_or_default(name: str, default: str) -> str:
    """Get an environment variable as a string, or fall back to `default`."""
    return get_or_default(name, str, default)


def get_env_string_required(name: str) -> str:
    """Get an environment variable as a string, or raise RequiredNotPresentError."""
    return get_required(name, str)
