"""
ABOUTME: Generic numeric environment variable accessor
ABOUTME: Falls back to a default only when the variable is unset; bad values always raise
"""

from typing import Callable, Optional, TypeVar

from .exceptions import ParseError
from .lookup import logger, lookup_and_parse

T = TypeVar("T")


def get_env_num(name: str, default: T, parse: Optional[Callable[[str], T]] = None) -> T:
    """
    Get an environment variable as a number, or `default` if it is unset.

    Unlike the other defaulted accessors, a value that is present but cannot
    be parsed is an error even though a default was supplied. Wrap the call
    in ``try/except EnvError`` to treat bad values as absent, or let the
    exception propagate to make the variable effectively required.

    Parameters:
        name (str): Environment variable name.
        default (T): Value returned when the variable is unset.
        parse (Callable[[str], T], optional): Converter from text. Defaults to
            ``type(default)``, so ``int``, ``float``, ``Decimal`` and
            ``Fraction`` defaults work out of the box. The parser's own
            leniency applies: ``int`` and ``float`` accept surrounding
            whitespace and digit underscores (``" 42 "``, ``"1_000"``).
            Pass a stricter `parse` to reject them.

    Returns:
        T: The parsed value, or `default`.

    Raises:
        ParseError: If the variable is set but cannot be parsed.
        NotUnicodeError: If the value is not valid text.
    """
    if parse is None:
        if isinstance(default, bool):
            raise TypeError("bool is not numeric; use get_env_bool_or_default")
        parse = type(default)

    try:
        value = lookup_and_parse(name, parse)
    except ParseError as e:
        logger.error(f"Can't parse value for '{name}'. Error: {e.reason}")
        raise

    if value is None:
        logger.warning(f"Env var '{name}' not supplied. Using default '{default}'.")
        return default
    return value


def get_env_int(name: str, default: int) -> int:
    """Get integer environment variable, raising ParseError on a bad value."""
    return get_env_num(name, default, int)


def get_env_float(name: str, default: float) -> float:
    """Get float environment variable, raising ParseError on a bad value."""
    return get_env_num(name, default, float)
