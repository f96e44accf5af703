"""Type aliases for tagged-logger.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from collections.abc import Callable
from typing import Literal

# Third-party (alphabetical)
from typing_extensions import TypeAliasType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "HexColor",
    "LogLevel",
    "SinkKind",
    "EnvironmentPredicate",
    "LogRecord",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
HexColor = TypeAliasType("HexColor", str)

LogLevel = TypeAliasType("LogLevel", Literal["info", "warning", "error"])
SinkKind = TypeAliasType("SinkKind", Literal["logfire", "rich", "memory"])

EnvironmentPredicate = TypeAliasType("EnvironmentPredicate", Callable[[], bool])
"""Zero-argument callable answering "is this a development session?"."""

LogRecord = TypeAliasType("LogRecord", tuple[LogLevel, str])
