"""
ABOUTME: File-system path environment variable accessor
ABOUTME: Wraps values in pathlib.Path without validating their syntax
"""

import os
from pathlib import Path
from typing import Optional, Union

from .lookup import get_optional, get_or_default, get_required


def get_env_path_optional(name: str) -> Optional[Path]:
    """Get an environment variable as a Path, or None if unset or not valid text."""
    return get_optional(name, Path)


def get_env_path_or_default(name: str, default: Union[str, os.PathLike]) -> Path:
    """
    Get an environment variable as a Path, falling back to `default`.

    Parameters:
        name (str): Environment variable name.
        default (str | os.PathLike): Anything Path() accepts.

    Returns:
        Path: The variable's value, or `default` converted to a Path.
    """
    return get_or_default(name, Path, Path(default))


def get_env_path_required(name: str) -> Path:
    """
    Get an environment variable as a Path.

    Any text is a syntactically valid path, so only absence and non-text
    values fail.

    Raises:
        RequiredNotPresentError: If the variable is unset.
        NotUnicodeError: If the value is not valid text.
    """
    return get_required(name, Path)
