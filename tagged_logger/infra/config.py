"""Process-wide host defaults: the console sink and the environment predicate.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

# Third-party (alphabetical)
from pydantic import ValidationError

# Local imports (core first, then alphabetical)
from ..core.exceptions import HostConfigurationError
from ..core.protocols import ConsoleSink
from ..core.settings import DEFAULT_SINK, TaggedLoggerSettings
from .environment import SettingsPredicate
from .sinks import create_sink

if TYPE_CHECKING:
    from ..core.types import EnvironmentPredicate

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Host",
    "configure_host",
    "get_host",
    "get_predicate",
    "get_sink",
    "is_development_mode",
    "reset_host",
    "validate_predicate",
    "validate_sink",
)


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True)
class Host:
    """Sink and predicate used when a logger has none bound.

    A ``None`` sink is built from settings on first use.
    """

    sink: ConsoleSink | None = None
    predicate: EnvironmentPredicate = field(default_factory=SettingsPredicate)


# =============================================================================
# Section 10: Module State
# =============================================================================
_host = Host()


# =============================================================================
# Section 12: Functions
# =============================================================================
def validate_sink(sink: object) -> ConsoleSink:
    """Return ``sink`` if it implements all three channels."""
    if not isinstance(sink, ConsoleSink):
        raise HostConfigurationError("sink", f"{type(sink).__name__} does not provide info/warning/error")
    return sink


def validate_predicate(predicate: object) -> EnvironmentPredicate:
    """Return ``predicate`` if it is callable."""
    if not callable(predicate):
        raise HostConfigurationError("predicate", f"{type(predicate).__name__} is not callable")
    return predicate


def configure_host(*, sink: ConsoleSink | None = None, predicate: EnvironmentPredicate | None = None) -> Host:
    """Install process defaults. Omitted arguments keep their current value."""
    global _host
    _host = Host(
        sink=validate_sink(sink) if sink is not None else _host.sink,
        predicate=validate_predicate(predicate) if predicate is not None else _host.predicate,
    )
    return _host


def reset_host() -> None:
    """Restore the settings-driven defaults."""
    global _host
    _host = Host()


def get_host() -> Host:
    return _host


def get_sink() -> ConsoleSink:
    """Return the default sink, creating it from settings if none is installed.

    An unreadable sink setting falls back to the rich console.
    """
    global _host
    host = _host
    if host.sink is None:
        try:
            kind = TaggedLoggerSettings().sink
        except ValidationError:
            kind = DEFAULT_SINK
        host = Host(sink=create_sink(kind), predicate=host.predicate)
        _host = host
    return host.sink


def get_predicate() -> EnvironmentPredicate:
    return _host.predicate


def is_development_mode() -> bool:
    """Evaluate the installed predicate now."""
    return bool(_host.predicate())
