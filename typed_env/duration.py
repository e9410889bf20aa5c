"""
ABOUTME: Duration environment variable accessor with whole-second granularity
ABOUTME: Converts a non-negative integer count of seconds into a timedelta
"""

import re
from datetime import timedelta
from typing import Optional

from .lookup import get_optional, get_or_default, get_required

_SECONDS_RE = re.compile(r"\+?[0-9]+")


def parse_duration_seconds(raw: str) -> timedelta:
    """Parse a non-negative whole number of seconds."""
    if not _SECONDS_RE.fullmatch(raw):
        raise ValueError(f"Couldn't parse as number: '{raw}'")
    # timedelta raises OverflowError past ~2.7 million years
    return timedelta(seconds=int(raw))


def get_env_duration_seconds_optional(name: str) -> Optional[timedelta]:
    """Get an environment variable as a duration in seconds, or None."""
    return get_optional(name, parse_duration_seconds)


def get_env_duration_seconds_or_default(name: str, default: timedelta) -> timedelta:
    """Get an environment variable as a duration in seconds, or `default`."""
    return get_or_default(name, parse_duration_seconds, default)


def get_env_duration_seconds_required(name: str) -> timedelta:
    """
    Get an environment variable as a duration in seconds.

    Decimals, negative numbers, units and empty values are rejected.

    Raises:
        RequiredNotPresentError: If the variable is unset.
        ParseError: If the value is not a non-negative whole number.
        NotUnicodeError: If the value is not valid text.
    """
    return get_required(name, parse_duration_seconds)
