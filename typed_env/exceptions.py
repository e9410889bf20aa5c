"""
ABOUTME: Custom exception classes for typed environment variable access
ABOUTME: Provides specific error types for missing, non-text, and unparseable values
"""


class EnvError(Exception):
    """Base class for environment variable errors."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        super().__init__(message or f"Env var '{name}' error")


class NotUnicodeError(EnvError):
    """The variable is present but its value is not valid text."""

    def __init__(self, name: str):
        super().__init__(name, f"Env var '{name}' is not valid unicode")


class ParseError(EnvError):
    """The variable is present but does not match the expected form."""

    def __init__(self, name: str, reason: str):
        self.reason = reason
        super().__init__(name, f"Env var '{name}': {reason}")


class RequiredNotPresentError(EnvError):
    """A required variable was not set."""

    def __init__(self, name: str):
        super().__init__(name, f"Required env var '{name}' not supplied")
