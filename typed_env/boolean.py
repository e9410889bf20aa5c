"""
ABOUTME: Boolean environment variable accessor
ABOUTME: Accepts only the exact literals true/TRUE and false/FALSE
"""

from typing import Optional

from .lookup import get_optional, get_or_default, get_required

TRUE_VALUES = frozenset({"true", "TRUE"})
FALSE_VALUES = frozenset({"false", "FALSE"})


def parse_bool(raw: str) -> bool:
    """Parse a case-sensitive boolean literal."""
    if raw in TRUE_VALUES:
        return True
    if raw in FALSE_VALUES:
        return False
    raise ValueError(f"Couldn't parse as bool: '{raw}'")


def get_env_bool_optional(name: str) -> Optional[bool]:
    """Get an environment variable as a bool, or None if unset or invalid."""
    return get_optional(name, parse_bool)


def get_env_bool_or_default(name: str, default: bool) -> bool:
    """Get an environment variable as a bool, or `default` if unset or invalid."""
    return get_or_default(name, parse_bool, default)


def get_env_bool_required(name: str) -> bool:
    """
    Get an environment variable as a bool.

    Raises:
        RequiredNotPresentError: If the variable is unset.
        ParseError: If the value is not one of true, TRUE, false, FALSE.
        NotUnicodeError: If the value is not valid text.
    """
    return get_required(name, parse_bool)
