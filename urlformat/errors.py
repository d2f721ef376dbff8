# urlformat/errors.py
from typing import Any


class FormatUrlError(Exception):
    """Base class for everything the formatter raises."""


class MissingSubstitution(FormatUrlError, KeyError):
    """The template references a placeholder that has no substitution value."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"missing substitution for placeholder ':{self.identifier}'"


class UnusedSubstitution(FormatUrlError):
    """Strict mode only: a substitution key the template never references."""

    def __init__(self, identifier: str):
        super().__init__(f"substitution '{identifier}' is not used by the path template")
        self.identifier = identifier


class UnsupportedQueryValue(FormatUrlError, TypeError):
    def __init__(self, key: str, value: Any):
        super().__init__(
            f"query parameter '{key}' has unsupported value of type {type(value).__name__}; "
            "only flat str/int/float/bool values are allowed"
        )
        self.key = key
        self.value = value
