"""Infrastructure concerns for tagged-logger.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .config import Host, configure_host, get_predicate, get_sink, is_development_mode, reset_host
from .environment import SettingsPredicate, StaticPredicate
from .logging import configure_logging, get_logger
from .sinks import LogfireSink, MemorySink, RichConsoleSink, create_sink, strip_markup

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Host",
    "configure_host",
    "get_predicate",
    "get_sink",
    "is_development_mode",
    "reset_host",
    "SettingsPredicate",
    "StaticPredicate",
    "configure_logging",
    "get_logger",
    "LogfireSink",
    "MemorySink",
    "RichConsoleSink",
    "create_sink",
    "strip_markup",
)
