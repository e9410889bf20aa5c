"""
ABOUTME: Lookup primitives shared by every typed environment variable accessor
ABOUTME: Provides raw lookup, single-shot parsing and the optional/default/required wrappers
"""

import logging
import os
from typing import Callable, Optional, TypeVar

from .exceptions import EnvError, NotUnicodeError, ParseError, RequiredNotPresentError

T = TypeVar("T")

logger = logging.getLogger("typed_env")


def get_env_raw(name: str) -> Optional[str]:
    """
    Return the raw text of an environment variable, or None when it is unset.

    On POSIX, bytes that are not valid UTF-8 reach os.environ as lone
    surrogates; such values are rejected rather than handed to a parser.

    Raises:
        NotUnicodeError: If the value cannot be encoded as UTF-8.
    """
    value = os.environ.get(name)
    if value is None:
        return None
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NotUnicodeError(name) from e
    return value


def lookup_and_parse(name: str, parse: Callable[[str], T]) -> Optional[T]:
    """
    Read `name` once and, if present, parse it once.

    Parameters:
        name (str): Environment variable name.
        parse (Callable[[str], T]): Converts the raw text; signals bad input
            with ValueError, TypeError or ArithmeticError.

    Returns:
        Optional[T]: The parsed value, or None when the variable is unset.

    Raises:
        NotUnicodeError: If the value is not valid text.
        ParseError: If `parse` rejects the value.
    """
    raw = get_env_raw(name)
    if raw is None:
        return None
    try:
        return parse(raw)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ParseError(name, str(e)) from e


def get_optional(name: str, parse: Callable[[str], T]) -> Optional[T]:
    """Parse `name`, returning None when it is unset or invalid."""
    try:
        value = lookup_and_parse(name, parse)
    except EnvError as e:
        logger.warning(f"{e}. Returning no value.")
        return None
    if value is None:
        logger.warning(f"Env var '{name}' not supplied.")
    return value


def get_or_default(name: str, parse: Callable[[str], T], default: T) -> T:
    """Parse `name`, returning `default` when it is unset or invalid."""
    try:
        value = lookup_and_parse(name, parse)
    except EnvError as e:
        logger.warning(f"{e}. Using default '{default}'.")
        return default
    if value is None:
        logger.warning(f"Env var '{name}' not supplied. Using default '{default}'.")
        return default
    return value


def get_required(name: str, parse: Callable[[str], T]) -> T:
    """
    Parse `name`, raising when it is unset or invalid.

    Raises:
        RequiredNotPresentError: If the variable is unset.
        NotUnicodeError: If the value is not valid text.
        ParseError: If the value cannot be parsed.
    """
    value = lookup_and_parse(name, parse)
    if value is None:
        logger.warning(f"Required env var '{name}' not supplied.")
        raise RequiredNotPresentError(name)
    return value
