"""
ABOUTME: Typed environment variable access with optional, defaulted and required modes
ABOUTME: Provides accessors for booleans, numbers, durations, paths and strings plus start-up helpers
"""

__version__ = "0.1.0"

from .boolean import get_env_bool_optional, get_env_bool_or_default, get_env_bool_required
from .bootstrap import ENV_LOG_LEVEL, init_all, init_env_file, init_logger
from .duration import (
    get_env_duration_seconds_optional,
    get_env_duration_seconds_or_default,
    get_env_duration_seconds_required,
)
from .exceptions import EnvError, NotUnicodeError, ParseError, RequiredNotPresentError
from .num import get_env_float, get_env_int, get_env_num
from .path import get_env_path_optional, get_env_path_or_default, get_env_path_required
from .string import get_env_string_optional, get_env_string_or_default, get_env_string_required

__all__ = [
    "EnvError",
    "NotUnicodeError",
    "ParseError",
    "RequiredNotPresentError",
    "get_env_bool_optional",
    "get_env_bool_or_default",
    "get_env_bool_required",
    "get_env_num",
    "get_env_int",
    "get_env_float",
    "get_env_duration_seconds_optional",
    "get_env_duration_seconds_or_default",
    "get_env_duration_seconds_required",
    "get_env_path_optional",
    "get_env_path_or_default",
    "get_env_path_required",
    "get_env_string_optional",
    "get_env_string_or_default",
    "get_env_string_required",
    "ENV_LOG_LEVEL",
    "init_logger",
    "init_env_file",
    "init_all",
]
