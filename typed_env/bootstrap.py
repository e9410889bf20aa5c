"""
ABOUTME: Process start-up helpers for logging and .env loading
ABOUTME: Seeds the log-level variable, configures Rich logging and loads .env files
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Name of the environment variable init_logger reads the level spec from
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_LOG_LEVEL = "info"

DEFAULT_ENV_FILE = ".env"

LEVELS = {
    "off": logging.CRITICAL + 10,
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

console = Console()

# Log records go to stderr so stdout stays free for program output
err_console = Console(stderr=True)


def parse_level_spec(
    spec: str, out: Optional[Console] = None
) -> tuple[int, dict[str, int]]:
    """
    Parse a log-level spec such as ``"info"`` or ``"urllib3=warn,debug"``.

    A bare level sets the root level; ``name=level`` sets the level of a
    named logger. Unknown directives are reported on `out` (the stdout
    console by default) and skipped.

    Returns:
        tuple[int, dict[str, int]]: Root level and per-logger levels.
    """
    if out is None:
        out = console
    root_level = LEVELS[DEFAULT_LOG_LEVEL]
    per_logger: dict[str, int] = {}

    for directive in spec.split(","):
        directive = directive.strip()
        if not directive:
            continue
        name, sep, level_name = directive.rpartition("=")
        level = LEVELS.get(level_name.strip().lower())
        if level is None or (sep and not name.strip()):
            out.print(f"Ignoring invalid logging directive '{directive}'")
            continue
        if sep:
            per_logger[name.strip()] = level
        else:
            root_level = level

    return root_level, per_logger


def init_logger(
    default_if_absent: Optional[str] = None, out: Optional[Console] = None
) -> None:
    """
    Configure logging from the LOG_LEVEL environment variable.

    If LOG_LEVEL is unset it is first set to `default_if_absent`, or "info"
    when no default is given. An existing value is never overwritten.
    Notices are printed to `out`, the stdout console by default; log
    records are written to stderr.

    Must be called during single-threaded start-up, before anything else
    reads the environment. Calling it twice does not reconfigure handlers,
    since logging.basicConfig is a no-op once the root logger has handlers.
    """
    if out is None:
        out = console
    if os.environ.get(ENV_LOG_LEVEL) is None:
        default_log_level = default_if_absent or DEFAULT_LOG_LEVEL
        out.print(
            f'Setting default logging level to "{default_log_level}", '
            f"override with env var {ENV_LOG_LEVEL}."
        )
        os.environ[ENV_LOG_LEVEL] = default_log_level

    root_level, per_logger = parse_level_spec(os.environ[ENV_LOG_LEVEL], out)

    logging.basicConfig(
        level=root_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )
    for name, level in per_logger.items():
        logging.getLogger(name).setLevel(level)


def init_env_file(
    path: Optional[Union[str, os.PathLike]] = None, out: Optional[Console] = None
) -> bool:
    """
    Load environment variables from a .env file, best effort.

    Variables already present in the environment are left untouched. The
    outcome is printed to the console; failures never raise.

    Parameters:
        path (str | PathLike, optional): File to load. When omitted, a .env
            file is searched for from the working directory upwards.
        out (Console, optional): Where to print the outcome. Defaults to
            the stdout console.

    Returns:
        bool: True if a file was found and loaded.
    """
    if out is None:
        out = console
    try:
        if path is None:
            found = find_dotenv(DEFAULT_ENV_FILE, usecwd=True)
            env_path = Path(found) if found else None
        else:
            env_path = Path(path)

        if env_path is not None and env_path.is_file():
            load_dotenv(env_path, override=False)
            out.print(f"✅ Loaded environment from {env_path}")
            return True

        out.print("⚠️  No .env file found, using system environment variables")
        return False
    except Exception as e:
        out.print(f"❌ Error loading .env file: {e}")
        return False


def init_all(default_if_absent: Optional[str] = None) -> None:
    """Load the .env file, then configure logging."""
    init_env_file()
    init_logger(default_if_absent)
