"""Exception hierarchy for tagged-logger.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import Any

__all__ = (
    'TaggedLoggerError',
    'ColorError',
    'InvalidColorError',
    'UnknownCategoryError',
    'HostConfigurationError',
)


class TaggedLoggerError(Exception):
    """Base exception for all tagged-logger errors.

    Every error is raised at construction or configuration time; the
    logging calls themselves never raise one.

    Attributes:
        context: Additional context for debugging.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)


# =============================================================================
# Color Exceptions
# =============================================================================
class ColorError(TaggedLoggerError):
    """Base exception for color-related errors."""


class InvalidColorError(ColorError):
    """Raised when a color value cannot be parsed."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f'Invalid color {value!r}: {reason}', context={'value': value, 'reason': reason})


# =============================================================================
# Category Exceptions
# =============================================================================
class UnknownCategoryError(TaggedLoggerError):
    """Raised when a value is not a member of the category enumeration."""

    def __init__(self, value: object, *, known: list[str] | None = None) -> None:
        self.value = value
        self.known = known or []
        super().__init__(
            f'Unknown log category: {value!r}', context={'value': value, 'known': self.known}
        )


# =============================================================================
# Host Exceptions
# =============================================================================
class HostConfigurationError(TaggedLoggerError):
    """Raised when a sink or environment predicate is unusable."""

    def __init__(self, component: str, message: str) -> None:
        self.component = component
        super().__init__(f'[{component}] {message}', context={'component': component})
