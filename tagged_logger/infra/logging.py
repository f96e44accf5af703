"""Centralized logging utilities.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import TYPE_CHECKING, Literal

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.constants import DEFAULT_SERVICE_NAME
from ..core.settings import TaggedLoggerSettings

if TYPE_CHECKING:
    from logfire import ConsoleOptions

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("configure_logging", "get_logger")


# =============================================================================
# Section 12: Functions
# =============================================================================
def get_logger(component: str) -> logfire.Logfire:
    """Return a component-specific logger."""
    return logfire.with_settings(tags=[f"component:{component}"])


def configure_logging(
    *,
    service_name: str = DEFAULT_SERVICE_NAME,
    environment: str | None = None,
    send_to_logfire: bool | Literal["if-token-present"] | None = "if-token-present",
    console: ConsoleOptions | Literal[False] | None = None,
) -> None:
    """Configure logfire once at application startup.

    Args:
        service_name: Name reported with every record.
        environment: Deployment environment; read from settings when omitted.
        send_to_logfire: Whether to ship records to the Logfire backend.
        console: Console exporter options, or False to disable it.
    """
    environment = environment or TaggedLoggerSettings().environment

    logfire.configure(
        service_name=service_name,
        environment=environment,
        send_to_logfire=send_to_logfire,
        console=console,
    )
