"""tagged-logger package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .core.categories import CATEGORY_COLORS, Category, category_color
from .core.color import Color
from .core.protocols import ConsoleSink
from .infra.config import configure_host, reset_host
from .infra.environment import SettingsPredicate, StaticPredicate
from .infra.logging import configure_logging
from .infra.sinks import LogfireSink, MemorySink, RichConsoleSink
from .logger import TaggedLogger, format_message, log_error_global, log_info_global, log_warning_global

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "TaggedLogger",
    "Category",
    "CATEGORY_COLORS",
    "category_color",
    "Color",
    "ConsoleSink",
    "format_message",
    "log_info_global",
    "log_warning_global",
    "log_error_global",
    "configure_host",
    "reset_host",
    "configure_logging",
    "SettingsPredicate",
    "StaticPredicate",
    "LogfireSink",
    "RichConsoleSink",
    "MemorySink",
)
