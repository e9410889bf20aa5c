"""
ABOUTME: Command-line interface for reading typed environment variables
ABOUTME: Handles argument parsing and dispatch to the typed accessors
"""

import argparse
import json
import sys
from datetime import timedelta
from pathlib import Path
from typing import Any, Optional

from . import __version__
from .boolean import (
    get_env_bool_optional,
    get_env_bool_or_default,
    get_env_bool_required,
    parse_bool,
)
from .bootstrap import console, err_console, init_env_file, init_logger
from .duration import (
    get_env_duration_seconds_optional,
    get_env_duration_seconds_or_default,
    get_env_duration_seconds_required,
    parse_duration_seconds,
)
from .exceptions import EnvError
from .lookup import get_optional, get_required
from .num import get_env_num
from .path import get_env_path_optional, get_env_path_or_default, get_env_path_required
from .string import (
    get_env_string_optional,
    get_env_string_or_default,
    get_env_string_required,
)

# (optional, or_default, required, default converter) per value type
ACCESSORS = {
    "bool": (
        get_env_bool_optional,
        get_env_bool_or_default,
        get_env_bool_required,
        parse_bool,
    ),
    "duration": (
        get_env_duration_seconds_optional,
        get_env_duration_seconds_or_default,
        get_env_duration_seconds_required,
        parse_duration_seconds,
    ),
    "path": (get_env_path_optional, get_env_path_or_default, get_env_path_required, Path),
    "string": (
        get_env_string_optional,
        get_env_string_or_default,
        get_env_string_required,
        str,
    ),
}

NUMERIC_PARSERS = {"int": int, "float": float}


def cli() -> argparse.Namespace:
    """
    Parse and return command-line arguments for the typed-env CLI tool.

    Returns:
        argparse.Namespace: Variable name, value type, access mode and output options.
    """
    p = argparse.ArgumentParser(
        description="Read an environment variable as a typed value"
    )
    p.add_argument("name", help="Environment variable to read")
    p.add_argument(
        "--type",
        dest="value_type",
        default="string",
        choices=sorted([*ACCESSORS, *NUMERIC_PARSERS]),
        help="Type to parse the value as",
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--default",
        type=str,
        help="Fallback value used when the variable is missing",
    )
    mode.add_argument(
        "--required",
        action="store_true",
        help="Fail if the variable is missing or invalid",
    )
    p.add_argument(
        "--env-file",
        type=str,
        help="Load this .env file instead of searching for one",
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Log level spec to use when LOG_LEVEL is unset",
    )
    p.add_argument(
        "--json", action="store_true", help="Output the result as JSON"
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"typed-env {__version__}",
    )
    return p.parse_args()


def read_value(
    name: str, value_type: str, default: Optional[str] = None, required: bool = False
) -> Any:
    """
    Read `name` as `value_type` using the accessor mode selected by the flags.

    Numeric types only have a defaulted accessor; their optional and
    required modes read through the shared lookup wrappers directly.

    Raises:
        EnvError: In required mode, or for a malformed numeric value with a default.
        ValueError, ArithmeticError: If `default` itself cannot be converted
            to `value_type`.
    """
    if value_type in NUMERIC_PARSERS:
        parse = NUMERIC_PARSERS[value_type]
        if default is not None:
            return get_env_num(name, parse(default), parse)
        if required:
            return get_required(name, parse)
        return get_optional(name, parse)

    optional, or_default, required_accessor, convert = ACCESSORS[value_type]
    if default is not None:
        return or_default(name, convert(default))
    if required:
        return required_accessor(name)
    return optional(name)


def to_jsonable(value: Any) -> Any:
    """Convert an accessor result into a JSON-serializable value."""
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, Path):
        return str(value)
    return value


def main():
    """
    Execute the main entry point for the typed-env CLI tool.

    Loads the .env file, configures logging, reads the requested variable
    and prints it. Exits with status 1 when the variable cannot be read and
    2 when --default is invalid. With --json, stdout holds only the JSON
    object and every notice goes to stderr.
    """
    a = cli()
    out = err_console if a.json else console

    init_env_file(a.env_file, out=out)
    init_logger(a.log_level, out=out)

    try:
        value = read_value(a.name, a.value_type, a.default, a.required)
    except EnvError as exc:
        out.print(f"❌ {exc}", markup=False)
        sys.exit(1)
    except (ValueError, ArithmeticError) as exc:
        out.print(f"❌ Invalid --default for type {a.value_type}: {exc}")
        sys.exit(2)

    if a.json:
        print(
            json.dumps(
                {"name": a.name, "type": a.value_type, "value": to_jsonable(value)}
            )
        )
    elif value is not None:
        text = json.dumps(value) if isinstance(value, bool) else str(to_jsonable(value))
        console.print(text, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
